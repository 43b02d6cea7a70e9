# app/crud/salary.py

from typing import List, Optional
from pony.orm import db_session, select

from app.core.exceptions import ResourceNotFoundError
from app.models import Salary as SalaryModel
from app.schemas.finance_schemas import Salary, SalaryKey


def _find(key: SalaryKey) -> Optional[SalaryModel]:
    employee_number, from_date = key.employee_number, key.from_date
    return select(s for s in SalaryModel
                  if s.employee.emp_no == employee_number
                  and s.from_date == from_date).first()


@db_session
def get_overlapping_salaries(salary: Salary, exclude: Optional[SalaryKey] = None) -> List[Salary]:
    """
    Salaries of the same employee whose [from_date, to_date) intersects the given one.

    A record conflicts when it starts on the same day, starts strictly inside
    the candidate, or the candidate starts strictly inside it. Ranges that only
    touch at an endpoint do not conflict. ``exclude`` drops one record from the
    result, used when a record is checked against its own siblings.
    """
    employee_number = salary.employee_number
    from_date, to_date = salary.from_date, salary.to_date

    query = select(s for s in SalaryModel
                   if s.employee.emp_no == employee_number
                   and (s.from_date == from_date
                        or (from_date < s.from_date and to_date > s.from_date)
                        or (s.from_date < from_date and s.to_date > from_date)))

    if exclude is not None:
        excluded_from = exclude.from_date
        query = query.filter(lambda s: s.from_date != excluded_from)

    return [Salary.from_orm(s) for s in query.order_by(SalaryModel.from_date)[:]]


@db_session
def get_salaries_by_employee_number(employee_number: int) -> List[Salary]:
    salaries = select(s for s in SalaryModel
                      if s.employee.emp_no == employee_number).order_by(SalaryModel.from_date)[:]
    return [Salary.from_orm(s) for s in salaries]


@db_session
def get_salary_by_key(key: SalaryKey) -> Salary:
    salary = _find(key)
    if not salary:
        raise ResourceNotFoundError("Salary not found")
    return Salary.from_orm(salary)


@db_session
def get_salary_by_id(salary_id: int) -> Salary:
    salary = SalaryModel.get(id=salary_id)
    if not salary:
        raise ResourceNotFoundError("Salary not found")
    return Salary.from_orm(salary)


@db_session
def insert_salary(salary: Salary) -> int:
    """Insert a salary and return its generated id."""
    db_salary = SalaryModel(
        employee=salary.employee_number,
        salary=salary.salary,
        from_date=salary.from_date,
        to_date=salary.to_date
    )
    db_salary.flush()
    return db_salary.id


@db_session
def save_salary(key: SalaryKey, salary: Salary) -> int:
    """
    Overwrite the record stored under ``key`` with ``salary``.

    Returns the id of the updated row; the row keeps its id when from_date moves.
    """
    db_salary = _find(key)
    if not db_salary:
        raise ResourceNotFoundError("Salary not found")

    db_salary.set(
        salary=salary.salary,
        from_date=salary.from_date,
        to_date=salary.to_date
    )
    db_salary.flush()
    return db_salary.id


@db_session
def delete_salary_by_key(key: SalaryKey) -> int:
    db_salary = _find(key)
    if not db_salary:
        raise ResourceNotFoundError("Salary not found")
    db_salary.delete()
    return 1
