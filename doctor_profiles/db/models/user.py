# doctor_profiles/db/models/user.py
from sqlalchemy import Column, String, Boolean, Float, DateTime, func
from doctor_profiles.db.base import Base, generate_id


class UserModel(Base):
    """
    Account record owned by the surrounding application.

    Only the fields this service reads or writes are mapped: the doctor flag,
    the cached display image and the registration data used as defaults when
    a doctor profile is provisioned.
    """
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=generate_id)
    email = Column(String, unique=True, nullable=False, index=True)
    username = Column(String(50), nullable=True)
    name = Column(String(100), nullable=True)

    is_doctor = Column(Boolean, nullable=False, default=False)
    cimage = Column(String, nullable=True)  # cached profile image

    # registration data, only used as provisioning defaults
    specialization = Column(String(100), nullable=True)
    hospital = Column(String(200), nullable=True)
    location = Column(String(200), nullable=True)
    doctor_reg = Column(String(50), nullable=True)
    consultation_fee = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<UserModel(id={self.id}, email={self.email}, is_doctor={self.is_doctor})>"
