import pytest

from models import Property, IncomeProducing
from services.ledger_service import month_index
from services.property_service import apply_property_changes, infer_income_producing


@pytest.mark.parametrize("status, expected", [
     ("Vacant", IncomeProducing.NO),
     ("PENDING", IncomeProducing.NO),
     (" leased ", IncomeProducing.YES),
     ("Subleased", IncomeProducing.YES),
     ("financed", IncomeProducing.YES),
     ("Renovation", None),
     (None, None),
])
def test_infer_income_producing(status, expected):
     assert infer_income_producing(status) == expected


@pytest.mark.parametrize("month, expected", [
     ("Jan", 1), ("january", 1), ("SEP", 9), ("Sept", 9), ("12", 12), ("13", None), ("", None), ("Foo", None),
])
def test_month_index(month, expected):
     assert month_index(month) == expected


def test_unrecognised_status_keeps_flag():
     prop = Property(income_producing="YES")
     apply_property_changes(prop, {"status": "Renovation"})
     assert prop.income_producing == "YES"


def test_new_property_defaults_to_not_income_producing():
     prop = Property()
     apply_property_changes(prop, {"status": "Renovation", "income_producing": None})
     assert prop.income_producing == "NO"
