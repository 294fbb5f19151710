import sqlalchemy as sa
import sqlalchemy.orm as so
from birja.models import Base, TimestampMixin
from birja.models.application_status import ApplicationStatus

class Application(Base, TimestampMixin):

    __tablename__ = 'applications'

    id: so.Mapped[int] = so.mapped_column(sa.Integer, primary_key=True, autoincrement=True, index=True)
    offer_id: so.Mapped[int] = so.mapped_column(
        sa.ForeignKey('vacancies.id', ondelete='CASCADE'),
        nullable=False,
        index=True,
    )
    name: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    phone: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    region: so.Mapped[str] = so.mapped_column(sa.String, nullable=False)
    interest: so.Mapped[str | None] = so.mapped_column(sa.Text, nullable=True)
    applicant_id: so.Mapped[str | None] = so.mapped_column(sa.String, nullable=True)
    status: so.Mapped[str] = so.mapped_column(
        sa.String(20), nullable=False, default=ApplicationStatus.NEW.value
    )

    # candidate profile
    contract: so.Mapped[str | None] = so.mapped_column(sa.String, nullable=True)
    age: so.Mapped[int | None] = so.mapped_column(sa.Integer, nullable=True)
    experience: so.Mapped[str | None] = so.mapped_column(sa.Text, nullable=True)
    salary_worker: so.Mapped[str | None] = so.mapped_column(sa.String, nullable=True)
    images: so.Mapped[list[str] | None] = so.mapped_column(sa.JSON, nullable=True)

    offer = so.relationship("Vacancy")

    def __str__(self):
        return f"{self.id}"
