from doctor_profiles.db.models.user import UserModel
from doctor_profiles.db.models.doctor import DoctorModel

__all__ = ["UserModel", "DoctorModel"]
