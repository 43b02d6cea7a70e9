from fastapi import APIRouter, Path, Query
from typing import List, Optional
from ..schemas.finance_schemas import INT32_MAX, IsoDate
from ..schemas.hr_schemas import (
    Employee, EmployeeCreate, EmployeeFilter, EmployeePatch,
    Title, TitleCreate, TitleFilter, TitleKey, TitlePatch
)
from ..services import employee_service, title_service

router = APIRouter(tags=["HR"])


# Employees

@router.post("/employees", response_model=Employee, response_model_exclude_none=True, status_code=201)
def create_employee(employee: EmployeeCreate):
    return employee_service.create_employee(employee)


@router.get("/employees", response_model=List[Employee], response_model_exclude_none=True)
def get_employees(
        limit: int = Query(10, ge=1),
        title: Optional[str] = Query(None, min_length=1, max_length=50, description="Only employees that held this title")
):
    return employee_service.get_employees(EmployeeFilter(limit=limit, title=title))

@router.get("/employees/{employeeNumber}", response_model=Employee, response_model_exclude_none=True)
def get_employee(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX)):
    return employee_service.get_employee(employee_number)


@router.patch("/employees/{employeeNumber}", response_model=Employee, response_model_exclude_none=True)
def update_employee(patch: EmployeePatch,
                    employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX)):
    return employee_service.edit_employee(employee_number, patch)


@router.delete("/employees/{employeeNumber}", status_code=204)
def delete_employee(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX)):
    employee_service.delete_employee(employee_number)


# Titles

@router.post("/titles", response_model=Title, status_code=201)
def create_title(title: TitleCreate):
    return title_service.create_title(Title(**title.model_dump()))


@router.get("/titles", response_model=List[Title])
def get_titles(
        limit: int = Query(10, ge=1),
        employee_number: Optional[int] = Query(None, alias="employeeNumber", ge=1, le=INT32_MAX)
):
    return title_service.get_titles(TitleFilter(limit=limit, employee_number=employee_number))


@router.get("/titles/{employeeNumber}/{title}/{fromDate}", response_model=Title)
def get_title(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
              title: str = Path(..., min_length=1, max_length=50),
              from_date: IsoDate = Path(..., alias="fromDate")):
    return title_service.get_title(TitleKey(employee_number=employee_number, title=title, from_date=from_date))


@router.patch("/titles/{employeeNumber}/{title}/{fromDate}", response_model=Title)
def update_title(patch: TitlePatch,
                 employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
                 title: str = Path(..., min_length=1, max_length=50),
                 from_date: IsoDate = Path(..., alias="fromDate")):
    return title_service.edit_title(
        TitleKey(employee_number=employee_number, title=title, from_date=from_date),
        patch
    )


@router.delete("/titles/{employeeNumber}/{title}/{fromDate}", status_code=204)
def delete_title(employee_number: int = Path(..., alias="employeeNumber", ge=1, le=INT32_MAX),
                 title: str = Path(..., min_length=1, max_length=50),
                 from_date: IsoDate = Path(..., alias="fromDate")):
    title_service.delete_title(TitleKey(employee_number=employee_number, title=title, from_date=from_date))
