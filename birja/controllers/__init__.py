from typing import Iterable, TypeVar, Type
from sqlalchemy.ext.asyncio import AsyncSession
from birja.repositories import BaseRepository

T = TypeVar('T', bound=BaseRepository)


def has_blank(attributes: dict, fields: Iterable[str]) -> bool:
    # missing, null and whitespace-only strings all count as blank
    return any(not str(attributes.get(field) or '').strip() for field in fields)


class BaseController:
    def __init__(self, session: AsyncSession):
        self.session = session

    def repository(self, repo_type: Type[T]) -> T:
        return repo_type(self.session)
