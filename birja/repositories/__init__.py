from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    def __init__(self, session: AsyncSession):
        self.session = session


from .user import UserRepository
from .vacancy import VacancyRepository
from .application import ApplicationRepository

__all__ = [
    "UserRepository",
    "VacancyRepository",
    "ApplicationRepository",
]
