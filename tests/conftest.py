"""
Pytest configuration and shared fixtures.

The whole session runs against one SQLite file; tables are emptied before
every test.
"""
import os
from datetime import date

import pytest

os.environ["ENV"] = "test"
os.environ["DB_PROVIDER"] = "sqlite"
os.environ["DB_CREATE_TABLES"] = "true"

from fastapi.testclient import TestClient
from pony.orm import db_session, delete

from app.database.connection import connect_to_db
from app.models import Employee, Salary, Title
from app.schemas.finance_schemas import Salary as SalaryRecord


@pytest.fixture(scope="session")
def database(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("db") / "employees.sqlite"
    return connect_to_db(provider="sqlite", filename=str(db_file), create_db=True)


@pytest.fixture(autouse=True)
def clean_tables(database):
    with db_session:
        delete(s for s in Salary)
        delete(t for t in Title)
        delete(e for e in Employee)
    yield


@pytest.fixture
def client(database):
    from app.main import app
    return TestClient(app)


@pytest.fixture
def employee_number(database) -> int:
    """Employee 10001, Georgi Facello from the sample employees database."""
    with db_session:
        Employee(
            emp_no=10001,
            first_name="Georgi",
            last_name="Facello",
            birth_date=date(1953, 9, 2),
            hire_date=date(1986, 6, 26),
            gender="M"
        )
    return 10001


@pytest.fixture
def existing_salaries(employee_number):
    """
    EXISTING SALARIES in DB:
    (10001, 60117, '1986-06-26', '1987-06-26')
    (10001, 62102, '1987-06-26', '1988-06-25')
    """
    rows = [
        SalaryRecord(employee_number=employee_number, salary=60117,
                     from_date=date(1986, 6, 26), to_date=date(1987, 6, 26)),
        SalaryRecord(employee_number=employee_number, salary=62102,
                     from_date=date(1987, 6, 26), to_date=date(1988, 6, 25)),
    ]
    with db_session:
        for row in rows:
            Salary(employee=row.employee_number, salary=row.salary,
                   from_date=row.from_date, to_date=row.to_date)
    return {row.from_date.isoformat(): row for row in rows}
