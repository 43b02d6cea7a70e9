from pydantic import BaseModel, Field, field_validator
from enum import Enum
from typing import Optional

from .finance_schemas import INT32_MAX, IsoDate


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    OTHER = "O"


# Request spellings accepted for each gender, compared lower-cased
GENDER_FROM_REQUEST = {
    "m": Gender.MALE,
    "male": Gender.MALE,
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
    "o": Gender.OTHER,
    "other": Gender.OTHER,
}

# employees.gender column values
GENDER_STORAGE = {
    Gender.MALE: "M",
    Gender.FEMALE: "F",
    Gender.OTHER: "O",
}
GENDER_FROM_STORAGE = {v: k for k, v in GENDER_STORAGE.items()}


def gender_from_request(value) -> Gender:
    if isinstance(value, Gender):
        return value
    try:
        return GENDER_FROM_REQUEST[str(value).strip().lower()]
    except KeyError:
        raise ValueError(f"gender must be one of {sorted(GENDER_FROM_REQUEST)}")


def gender_for_db(gender: Gender) -> str:
    return GENDER_STORAGE[gender]


def gender_from_db(value: str) -> Gender:
    return GENDER_FROM_STORAGE.get(value.upper(), Gender.OTHER)


# Employees

class EmployeeBase(BaseModel):
    first_name: str = Field(..., alias="firstName", min_length=1, max_length=14)
    last_name: str = Field(..., alias="lastName", min_length=1, max_length=16)
    birth_date: IsoDate = Field(..., alias="birthDate")
    hire_date: IsoDate = Field(..., alias="hireDate")
    gender: Gender

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, value):
        return gender_from_request(value)

    class Config:
        populate_by_name = True


class EmployeeCreate(EmployeeBase):
    class Config:
        json_schema_extra = {
            "example": {
                "firstName": "Georgi",
                "lastName": "Facello",
                "birthDate": "1953-09-02",
                "hireDate": "1986-06-26",
                "gender": "M"
            }
        }


class Employee(EmployeeBase):
    employee_number: int = Field(..., alias="employeeNumber")
    title: Optional[str] = None  # only set when listing by title

    @classmethod
    def from_orm(cls, db_obj, title: Optional[str] = None):
        """Convert from ORM object to Pydantic model"""
        return cls(
            employee_number=db_obj.emp_no,
            first_name=db_obj.first_name,
            last_name=db_obj.last_name,
            birth_date=db_obj.birth_date,
            hire_date=db_obj.hire_date,
            gender=gender_from_db(db_obj.gender),
            title=title
        )

    class Config:
        from_attributes = True


class EmployeePatch(BaseModel):
    first_name: Optional[str] = Field(None, alias="firstName", min_length=1, max_length=14)
    last_name: Optional[str] = Field(None, alias="lastName", min_length=1, max_length=16)
    birth_date: Optional[IsoDate] = Field(None, alias="birthDate")
    hire_date: Optional[IsoDate] = Field(None, alias="hireDate")
    gender: Optional[Gender] = None

    @field_validator("gender", mode="before")
    @classmethod
    def normalize_gender(cls, value):
        return None if value is None else gender_from_request(value)

    class Config:
        populate_by_name = True

    def apply(self, employee: Employee) -> Employee:
        return employee.model_copy(update=self.model_dump(exclude_none=True))


class EmployeeFilter(BaseModel):
    limit: int = Field(10, ge=1)
    title: Optional[str] = Field(None, min_length=1, max_length=50)


# Titles

class TitleKey(BaseModel):
    employee_number: int = Field(..., alias="employeeNumber", ge=1, le=INT32_MAX)
    title: str = Field(..., min_length=1, max_length=50)
    from_date: IsoDate = Field(..., alias="fromDate")

    class Config:
        populate_by_name = True


class TitleBase(BaseModel):
    employee_number: int = Field(..., alias="employeeNumber", ge=1, le=INT32_MAX)
    title: str = Field(..., min_length=1, max_length=50)
    from_date: IsoDate = Field(..., alias="fromDate")
    to_date: Optional[IsoDate] = Field(None, alias="toDate")

    class Config:
        populate_by_name = True


class TitleCreate(TitleBase):
    class Config:
        json_schema_extra = {
            "example": {
                "employeeNumber": 10001,
                "title": "Senior Engineer",
                "fromDate": "1986-06-26",
                "toDate": None
            }
        }


class Title(TitleBase):
    @property
    def key(self) -> TitleKey:
        return TitleKey(employee_number=self.employee_number, title=self.title, from_date=self.from_date)

    @classmethod
    def from_orm(cls, db_obj):
        """Convert from ORM object to Pydantic model"""
        return cls(
            employee_number=db_obj.employee.emp_no,
            title=db_obj.title,
            from_date=db_obj.from_date,
            to_date=db_obj.to_date
        )

    class Config:
        from_attributes = True


class TitlePatch(BaseModel):
    """title and fromDate are only replaced when given; toDate: null marks the title current."""
    title: Optional[str] = Field(None, min_length=1, max_length=50)
    from_date: Optional[IsoDate] = Field(None, alias="fromDate")
    to_date: Optional[IsoDate] = Field(None, alias="toDate")

    class Config:
        populate_by_name = True

    def apply(self, title: Title) -> Title:
        fields = {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None or name == "to_date"
        }
        return title.model_copy(update=fields)


class TitleFilter(BaseModel):
    limit: int = Field(10, ge=1)
    employee_number: Optional[int] = Field(None, alias="employeeNumber", ge=1, le=INT32_MAX)

    class Config:
        populate_by_name = True
