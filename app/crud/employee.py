# app/crud/employee.py

from typing import List
from pony.orm import db_session, select

from app.core.exceptions import ResourceNotFoundError
from app.models import Employee as EmployeeModel
from app.schemas.hr_schemas import Employee, EmployeeCreate, EmployeeFilter, gender_for_db


@db_session
def list_employees(filter: EmployeeFilter) -> List[Employee]:
    """
    Fetch up to ``filter.limit`` employees, optionally only those that held ``filter.title``
    """
    limit, title = filter.limit, filter.title

    if title:
        rows = select((e, t.title) for e in EmployeeModel
                      for t in e.titles if t.title == title).order_by(1)[:limit]
        employees = [Employee.from_orm(e, title=t) for e, t in rows]
    else:
        rows = select(e for e in EmployeeModel).order_by(EmployeeModel.emp_no)[:limit]
        employees = [Employee.from_orm(e) for e in rows]

    if not employees:
        raise ResourceNotFoundError("employees not found")
    return employees


@db_session
def get_employee_by_number(employee_number: int) -> Employee:
    employee = EmployeeModel.get(emp_no=employee_number)
    if not employee:
        raise ResourceNotFoundError("employee not found")
    return Employee.from_orm(employee)


@db_session
def insert_employee(employee: EmployeeCreate) -> int:
    """Insert an employee and return the generated employee number."""
    db_employee = EmployeeModel(
        first_name=employee.first_name,
        last_name=employee.last_name,
        birth_date=employee.birth_date,
        hire_date=employee.hire_date,
        gender=gender_for_db(employee.gender)
    )
    db_employee.flush()
    return db_employee.emp_no


@db_session
def save_employee(employee: Employee) -> int:
    db_employee = EmployeeModel.get(emp_no=employee.employee_number)
    if not db_employee:
        raise ResourceNotFoundError("employee not found")

    db_employee.set(
        first_name=employee.first_name,
        last_name=employee.last_name,
        birth_date=employee.birth_date,
        hire_date=employee.hire_date,
        gender=gender_for_db(employee.gender)
    )
    return 1


@db_session
def delete_employee_by_number(employee_number: int) -> int:
    db_employee = EmployeeModel.get(emp_no=employee_number)
    if not db_employee:
        raise ResourceNotFoundError("employee not found")
    db_employee.delete()
    return 1
