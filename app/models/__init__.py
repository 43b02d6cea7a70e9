from .hr_models import Employee, Title
from .finance_models import Salary
