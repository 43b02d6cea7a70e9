import logging
from typing import List

from pony.orm import db_session

from app.crud import employee as employee_crud
from app.schemas.hr_schemas import Employee, EmployeeCreate, EmployeeFilter, EmployeePatch

logger = logging.getLogger(__name__)


def get_employees(filter: EmployeeFilter) -> List[Employee]:
    return employee_crud.list_employees(filter)


def get_employee(employee_number: int) -> Employee:
    return employee_crud.get_employee_by_number(employee_number)


@db_session
def create_employee(new_employee: EmployeeCreate) -> Employee:
    employee_number = employee_crud.insert_employee(new_employee)
    logger.info(f"Created employee {employee_number}")
    return employee_crud.get_employee_by_number(employee_number)


@db_session
def edit_employee(employee_number: int, patch: EmployeePatch) -> Employee:
    employee = patch.apply(employee_crud.get_employee_by_number(employee_number))
    employee_crud.save_employee(employee)
    logger.info(f"Updated employee {employee_number}")
    return employee_crud.get_employee_by_number(employee_number)


def delete_employee(employee_number: int) -> None:
    employee_crud.delete_employee_by_number(employee_number)
    logger.info(f"Deleted employee {employee_number}")
