from fastapi import APIRouter, Path
from typing import List
from ..schemas.finance_schemas import INT32_MAX, IsoDate, Salary, SalaryCreate, SalaryKey, SalaryPatch
from ..services import salary_service

router = APIRouter(prefix="/salaries", tags=["Finance"])


@router.post("", response_model=Salary, status_code=201)
def create_salary(salary: SalaryCreate):
    """
    Create a salary record.

    Fails with 400 when toDate is not after fromDate, when the employee already
    has a salary starting on fromDate, or when the range overlaps another of
    the employee's salaries.
    """
    return salary_service.create_salary(Salary(**salary.model_dump()))


@router.get("/{employeeNumber}", response_model=List[Salary])
def get_salaries(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX)):
    return salary_service.get_salaries(employee_number)


@router.get("/{employeeNumber}/{fromDate}", response_model=Salary)
def get_salary(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
               from_date: IsoDate = Path(..., alias="fromDate")):
    return salary_service.get_salary(SalaryKey(employee_number=employee_number, from_date=from_date))


@router.patch("/{employeeNumber}/{fromDate}", response_model=Salary)
def patch_salary(patch: SalaryPatch,
                 employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
                 from_date: IsoDate = Path(..., alias="fromDate")):
    return salary_service.patch_salary(
        SalaryKey(employee_number=employee_number, from_date=from_date),
        patch
    )


@router.delete("/{employeeNumber}/{fromDate}", status_code=204)
def delete_salary(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
                  from_date: IsoDate = Path(..., alias="fromDate")):
    salary_service.delete_salary(SalaryKey(employee_number=employee_number, from_date=from_date))
