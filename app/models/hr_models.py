from datetime import date
from pony.orm import Required, Optional, Set, PrimaryKey, composite_key
from ..database.connection import db

class Employee(db.Entity):
    _table_ = 'employees'

    emp_no = PrimaryKey(int, auto=True)
    birth_date = Required(date)
    first_name = Required(str, 14)
    last_name = Required(str, 16)
    gender = Required(str, 1)  # storage side of Gender, see hr_schemas.GENDER_STORAGE
    hire_date = Required(date)
    titles = Set('Title', reverse='employee')
    salaries = Set('Salary', reverse='employee')  # Relationship with finance models


class Title(db.Entity):
    _table_ = 'titles'

    id = PrimaryKey(int, auto=True)
    employee = Required(Employee, column='emp_no', reverse='titles')
    title = Required(str, 50)
    from_date = Required(date)
    to_date = Optional(date)  # null while the title is current
    composite_key(employee, title, from_date)
