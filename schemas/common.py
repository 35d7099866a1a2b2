"""
Shared coercion helpers for request schemas.

Inline-editable tables send blank strings for cleared cells and ISO strings
(sometimes with a trailing "Z") for dates; these types normalize both before
Pydantic validates the value.
"""
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, AfterValidator


def blank_to_none(value: Any) -> Any:
     """Treat "" and whitespace-only strings as a missing value."""
     if isinstance(value, str) and not value.strip():
          return None
     return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
     """Store timestamps as naive UTC; the database columns carry no zone."""
     if value is not None and value.tzinfo is not None:
          return value.astimezone(timezone.utc).replace(tzinfo=None)
     return value


def midnight_if_date_only(value: Any) -> Any:
     """"2024-07-01" -> "2024-07-01T00:00:00" for datetime columns."""
     value = blank_to_none(value)
     if isinstance(value, str) and len(value.strip()) == 10:
          return value.strip() + "T00:00:00"
     return value


def date_prefix(value: Any) -> Any:
     """Accept full ISO timestamps where only the calendar date is stored."""
     value = blank_to_none(value)
     if isinstance(value, str) and len(value) > 10 and value[4] == "-" and value[7] == "-":
          return value[:10]
     if isinstance(value, datetime):
          return value.date()
     return value


OptionalInt = Annotated[Optional[int], BeforeValidator(blank_to_none)]
OptionalMoney = Annotated[Optional[Decimal], BeforeValidator(blank_to_none)]
OptionalDatetime = Annotated[Optional[datetime], BeforeValidator(midnight_if_date_only), AfterValidator(to_naive_utc)]
OptionalDate = Annotated[Optional[date], BeforeValidator(date_prefix)]
OptionalText = Annotated[Optional[str], BeforeValidator(blank_to_none)]


def reject_nulls(model: Any, fields: tuple) -> None:
     """
     Raise when a PATCH explicitly sets a NOT NULL column to null.

     Only fields present in the request body are checked, so omitted fields
     stay untouched.
     """
     for name in fields:
          if name in model.model_fields_set and getattr(model, name) is None:
               raise ValueError(f"{name} cannot be empty")
