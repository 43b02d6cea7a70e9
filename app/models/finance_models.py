from pony.orm import Required, PrimaryKey, composite_key
from datetime import date
from ..database.connection import db

class Salary(db.Entity):
    """
    One contiguous compensation period of an employee, [from_date, to_date).

    The public identity is (emp_no, from_date); the surrogate id stays fixed
    when a patch moves from_date.
    """
    _table_ = 'salaries'

    id = PrimaryKey(int, auto=True)
    employee = Required('Employee', column='emp_no', reverse='salaries')
    salary = Required(int)
    from_date = Required(date)
    to_date = Required(date)
    composite_key(employee, from_date)
