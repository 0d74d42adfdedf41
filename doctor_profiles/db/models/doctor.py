# doctor_profiles/db/models/doctor.py
from sqlalchemy import (
    Column,
    String,
    Integer,
    Float,
    Text,
    JSON,
    DateTime,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from doctor_profiles.db.base import Base, generate_id
from doctor_profiles.config.settings import settings


class DoctorModel(Base):
    __tablename__ = "doctors"

    id = Column(String(32), primary_key=True, default=generate_id)
    # Plain reference: the users table belongs to another application, so a
    # profile may outlive its account.
    user_id = Column(String(32), nullable=False, index=True)

    name = Column(String(100), nullable=False)
    specialization = Column(String(100), nullable=False, index=True)
    hospital = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    experience = Column(Integer, nullable=False)
    consultation_fee = Column(Float, nullable=False)

    # [{"day": "Monday", "slots": [{"startTime": "08:00", "endTime": "17:00"}]}, ...]
    availability = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=True)
    education = Column(JSON, nullable=False, default=list)
    certifications = Column(JSON, nullable=False, default=list)
    languages = Column(JSON, nullable=False, default=list)
    image = Column(String, nullable=False, default=settings.default_doctor_image)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (UniqueConstraint("user_id", name="uq_doctors_user_id"),)

    user = relationship(
        "UserModel",
        primaryjoin="foreign(DoctorModel.user_id) == UserModel.id",
        viewonly=True,
        uselist=False,
    )

    def __repr__(self):
        return f"<DoctorModel(id={self.id}, user_id={self.user_id}, name={self.name})>"
