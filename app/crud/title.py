# app/crud/title.py

from typing import List, Optional
from pony.orm import db_session, select

from app.core.exceptions import ResourceNotFoundError
from app.models import Title as TitleModel
from app.schemas.hr_schemas import Title, TitleFilter, TitleKey


def _find(key: TitleKey) -> Optional[TitleModel]:
    employee_number, title, from_date = key.employee_number, key.title, key.from_date
    return select(t for t in TitleModel
                  if t.employee.emp_no == employee_number
                  and t.title == title
                  and t.from_date == from_date).first()


@db_session
def get_title_by_key(key: TitleKey) -> Title:
    title = _find(key)
    if not title:
        raise ResourceNotFoundError("Title not found")
    return Title.from_orm(title)


@db_session
def get_title_by_id(title_id: int) -> Title:
    title = TitleModel.get(id=title_id)
    if not title:
        raise ResourceNotFoundError("Title not found")
    return Title.from_orm(title)


@db_session
def list_titles(filter: TitleFilter) -> List[Title]:
    query = select(t for t in TitleModel)

    if filter.employee_number:
        employee_number = filter.employee_number
        query = query.filter(lambda t: t.employee.emp_no == employee_number)

    titles = query.order_by(TitleModel.id)[:filter.limit]
    return [Title.from_orm(t) for t in titles]


@db_session
def insert_title(title: Title) -> int:
    db_title = TitleModel(
        employee=title.employee_number,
        title=title.title,
        from_date=title.from_date,
        to_date=title.to_date
    )
    db_title.flush()
    return db_title.id


@db_session
def save_title(key: TitleKey, title: Title) -> int:
    """Overwrite the title stored under ``key``; returns its id."""
    db_title = _find(key)
    if not db_title:
        raise ResourceNotFoundError("Title not found")

    db_title.set(
        title=title.title,
        from_date=title.from_date,
        to_date=title.to_date
    )
    db_title.flush()
    return db_title.id


@db_session
def delete_title_by_key(key: TitleKey) -> int:
    db_title = _find(key)
    if not db_title:
        raise ResourceNotFoundError("Title not found")
    db_title.delete()
    return 1
