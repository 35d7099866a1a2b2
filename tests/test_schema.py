from sqlalchemy.dialects import mssql, postgresql
from sqlalchemy.schema import CreateIndex, CreateTable

from models import LoanPayment, Property


def _index(table, name):
     return next(ix for ix in table.indexes if ix.name == name)


def test_address_key_is_indexable_on_sql_server():
     ddl = str(CreateTable(Property.__table__).compile(dialect=mssql.dialect()))
     assert "address VARCHAR(255) NOT NULL" in ddl
     assert "UNIQUE (address, city, state, zipcode)" in ddl


def test_payment_code_unique_only_when_set():
     index = _index(LoanPayment.__table__, "loan_payments_payment_code_key")
     assert index.unique

     for dialect in (mssql.dialect(), postgresql.dialect()):
          ddl = str(CreateIndex(index).compile(dialect=dialect))
          assert "WHERE payment_code IS NOT NULL" in ddl

     table_ddl = str(CreateTable(LoanPayment.__table__).compile(dialect=mssql.dialect()))
     assert "UNIQUE (payment_code)" not in table_ddl
