import re
from pydantic import BaseModel, BeforeValidator, Field
from datetime import date
from typing import Annotated, Optional

INT32_MAX = 2 ** 31 - 1  # salaries.salary and emp_no are signed int columns

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_iso_date(value):
    """Dates cross the API boundary as plain YYYY-MM-DD; datetime strings are refused."""
    if isinstance(value, str) and not ISO_DATE.fullmatch(value):
        raise ValueError("Input should be a date in YYYY-MM-DD format")
    return value


IsoDate = Annotated[date, BeforeValidator(check_iso_date)]


class SalaryKey(BaseModel):
    employee_number: int = Field(..., alias="employeeNumber", ge=1, le=INT32_MAX)
    from_date: IsoDate = Field(..., alias="fromDate")

    class Config:
        populate_by_name = True


class SalaryBase(BaseModel):
    employee_number: int = Field(..., alias="employeeNumber", ge=1, le=INT32_MAX)
    salary: int = Field(..., description="Salary amount", ge=1, le=INT32_MAX)
    from_date: IsoDate = Field(..., alias="fromDate", description="First day of the period")
    to_date: IsoDate = Field(..., alias="toDate", description="Day after the last day of the period")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "employeeNumber": 10001,
                "salary": 60117,
                "fromDate": "1986-06-26",
                "toDate": "1987-06-26"
            }
        }


class SalaryCreate(SalaryBase):
    pass


class Salary(SalaryBase):
    @property
    def key(self) -> SalaryKey:
        return SalaryKey(employee_number=self.employee_number, from_date=self.from_date)

    @classmethod
    def from_orm(cls, db_obj):
        """Convert from ORM object to Pydantic model"""
        return cls(
            employee_number=db_obj.employee.emp_no,
            salary=db_obj.salary,
            from_date=db_obj.from_date,
            to_date=db_obj.to_date
        )

    class Config:
        from_attributes = True


class SalaryPatch(BaseModel):
    """Fields a PATCH may change. Unset and null fields leave the record untouched."""
    salary: Optional[int] = Field(None, ge=1, le=INT32_MAX)
    from_date: Optional[IsoDate] = Field(None, alias="fromDate")
    to_date: Optional[IsoDate] = Field(None, alias="toDate")

    class Config:
        populate_by_name = True

    @property
    def touches_dates(self) -> bool:
        return self.from_date is not None or self.to_date is not None

    def apply(self, salary: Salary) -> Salary:
        return salary.model_copy(update=self.model_dump(exclude_none=True))
