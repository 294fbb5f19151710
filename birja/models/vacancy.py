import uuid
import sqlalchemy as sa
import sqlalchemy.orm as so
from birja.models import Base, TimestampMixin

class Vacancy(Base, TimestampMixin):

    __tablename__ = 'vacancies'

    id: so.Mapped[int] = so.mapped_column(sa.Integer, primary_key=True, autoincrement=True, index=True)
    owner_id: so.Mapped[uuid.UUID] = so.mapped_column(
        sa.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    title: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    text: so.Mapped[str] = so.mapped_column(sa.Text, nullable=False)
    region: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    salary: so.Mapped[str | None] = so.mapped_column(sa.String, nullable=True)
    profession: so.Mapped[str | None] = so.mapped_column(sa.String, nullable=True)
    images: so.Mapped[list[str] | None] = so.mapped_column(sa.JSON, nullable=True)

    owner = so.relationship("User", back_populates="vacancies")

    def __str__(self):
        return self.title
