import uuid
import sqlalchemy as sa
import sqlalchemy.orm as so
from birja.models import Base, TimestampMixin
from birja.models.role import RoleEnum

class User(Base, TimestampMixin):

    __tablename__ = 'users'

    id: so.Mapped[uuid.UUID] = so.mapped_column(sa.Uuid, primary_key=True, default=uuid.uuid4, index=True)
    username: so.Mapped[str] = so.mapped_column(sa.String, nullable=False, unique=True, index=True)
    password: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    role: so.Mapped[str] = so.mapped_column(sa.String(20), nullable=False, default=RoleEnum.EMPLOYER.value)

    vacancies = so.relationship(
        "Vacancy", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )

    def __str__(self):
        return self.username
