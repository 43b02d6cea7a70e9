"""
Salary interval manager.

Every salary mutation goes through here so that no employee ends up with two
salary records whose [from_date, to_date) ranges overlap. Each check and the
write that depends on it run in one serializable transaction; the unique
(emp_no, from_date) key on the table backs this up for exact duplicates.
"""
import logging
from typing import List

from pony.orm import CommitException, OperationalError, TransactionIntegrityError, db_session

from app.config.settings import settings
from app.core.exceptions import DuplicateKeyError, InvalidRangeError
from app.crud import salary as salary_crud
from app.schemas.finance_schemas import Salary, SalaryKey, SalaryPatch

logger = logging.getLogger(__name__)


def is_retryable(exc: Exception) -> bool:
    """
    Retry serialization failures, lock timeouts and unique-key races.

    A foreign key violation (unknown employee) fails the same way on every
    attempt, so it is raised straight away.
    """
    if "foreign key" in str(exc).lower():
        return False
    return isinstance(exc, (TransactionIntegrityError, CommitException, OperationalError))


transaction = db_session(serializable=True, retry=settings.DB_TRANSACTION_RETRIES, retry_exceptions=is_retryable)


@transaction
def create_salary(salary: Salary) -> Salary:
    if salary.to_date <= salary.from_date:
        logger.warning(f"Rejected salary for employee {salary.employee_number}: "
                       f"toDate {salary.to_date} is not after fromDate {salary.from_date}")
        raise InvalidRangeError()

    overlapping = salary_crud.get_overlapping_salaries(salary)
    if overlapping:
        logger.warning(f"Rejected salary for employee {salary.employee_number}: "
                       f"{len(overlapping)} overlapping record(s)")
        if any(s.employee_number == salary.employee_number and s.from_date == salary.from_date
               for s in overlapping):
            raise DuplicateKeyError()
        raise InvalidRangeError()

    salary_crud.insert_salary(salary)
    logger.info(f"Created salary {salary.employee_number}/{salary.from_date}")

    return salary_crud.get_salary_by_key(salary.key)


@transaction
def patch_salary(key: SalaryKey, patch: SalaryPatch) -> Salary:
    """
    Apply the fields present in ``patch`` to the salary stored under ``key``.

    Date changes are validated against the employee's other salaries; a change
    to the amount alone is written without any range check. The returned record
    is re-read by row id, so it reflects a moved fromDate.
    """
    salary = patch.apply(salary_crud.get_salary_by_key(key))

    if patch.touches_dates:
        if salary.to_date <= salary.from_date:
            logger.warning(f"Rejected patch of salary {key.employee_number}/{key.from_date}: empty range")
            raise InvalidRangeError()
        if salary_crud.get_overlapping_salaries(salary, exclude=key):
            logger.warning(f"Rejected patch of salary {key.employee_number}/{key.from_date}: overlapping range")
            raise InvalidRangeError()

    salary_id = salary_crud.save_salary(key, salary)
    logger.info(f"Updated salary {key.employee_number}/{key.from_date}")

    return salary_crud.get_salary_by_id(salary_id)


def get_salary(key: SalaryKey) -> Salary:
    return salary_crud.get_salary_by_key(key)


def get_salaries(employee_number: int) -> List[Salary]:
    return salary_crud.get_salaries_by_employee_number(employee_number)


def delete_salary(key: SalaryKey) -> None:
    salary_crud.delete_salary_by_key(key)
    logger.info(f"Deleted salary {key.employee_number}/{key.from_date}")
