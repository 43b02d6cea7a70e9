import logging
from typing import List

from pony.orm import db_session

from app.crud import title as title_crud
from app.schemas.hr_schemas import Title, TitleFilter, TitleKey, TitlePatch

logger = logging.getLogger(__name__)


def get_title(key: TitleKey) -> Title:
    return title_crud.get_title_by_key(key)


def get_titles(filter: TitleFilter) -> List[Title]:
    return title_crud.list_titles(filter)


@db_session
def create_title(title: Title) -> Title:
    title_crud.insert_title(title)
    logger.info(f"Created title {title.title!r} for employee {title.employee_number}")
    return title_crud.get_title_by_key(title.key)


@db_session
def edit_title(key: TitleKey, patch: TitlePatch) -> Title:
    # Re-read by row id: the patch may have changed title or fromDate
    title = patch.apply(title_crud.get_title_by_key(key))
    title_id = title_crud.save_title(key, title)
    logger.info(f"Updated title {key.title!r} for employee {key.employee_number}")
    return title_crud.get_title_by_id(title_id)


def delete_title(key: TitleKey) -> None:
    title_crud.delete_title_by_key(key)
    logger.info(f"Deleted title {key.title!r} for employee {key.employee_number}")
