# doctor_profiles/schemas/doctor.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from doctor_profiles.config.constants import Weekday
from doctor_profiles.schemas.shared import UserRef


class TimeSlot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_time: str = Field(alias="startTime")  # "HH:MM"
    end_time: str = Field(alias="endTime")


class DaySchedule(BaseModel):
    day: Weekday
    slots: List[TimeSlot] = Field(default_factory=list)


def _is_set(value: Any) -> bool:
    # lists count as set even when empty, blank strings and zero do not
    if isinstance(value, list):
        return True
    return bool(value)


def _fee(value: float) -> Union[int, float]:
    # the column is a float; whole amounts go back out as they were sent
    if value is not None and float(value).is_integer():
        return int(value)
    return value


class DoctorUpdate(BaseModel):
    """
    Partial profile update.

    A field overwrites the stored value only when it is present and set:
    blank strings and zero are treated like absent fields, so they can not be
    used to clear a value.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    specialization: Optional[str] = None
    hospital: Optional[str] = None
    location: Optional[str] = None
    experience: Optional[int] = None
    consultation_fee: Optional[float] = Field(None, alias="consultationFee")
    availability: Optional[List[DaySchedule]] = None
    bio: Optional[str] = None
    education: Optional[List[Any]] = None
    certifications: Optional[List[Any]] = None
    languages: Optional[List[Any]] = None
    image: Optional[str] = None

    def to_columns(self) -> Dict[str, Any]:
        """Supplied fields keyed by column name, availability in wire form."""
        data = self.model_dump(exclude_none=True, exclude={"availability"})
        data.pop("user_id", None)
        if self.availability is not None:
            data["availability"] = [
                day.model_dump(mode="json", by_alias=True) for day in self.availability
            ]
        return data

    def changes(self) -> Dict[str, Any]:
        return {key: value for key, value in self.to_columns().items() if _is_set(value)}


class DoctorCreate(DoctorUpdate):
    user_id: str = Field(alias="userId")
    name: str
    specialization: str
    hospital: str
    location: str
    experience: int
    consultation_fee: float = Field(alias="consultationFee")


class DoctorOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    user_id: Union[UserRef, str, None] = Field(None, alias="userId")
    name: str
    specialization: str
    hospital: str
    location: str
    experience: int
    consultation_fee: Union[int, float] = Field(alias="consultationFee")
    availability: List[DaySchedule] = Field(default_factory=list)
    bio: Optional[str] = None
    education: List[Any] = Field(default_factory=list)
    certifications: List[Any] = Field(default_factory=list)
    languages: List[Any] = Field(default_factory=list)
    image: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @classmethod
    def from_model(cls, doctor, expand_user: bool = False) -> "DoctorOut":
        """
        Build the wire representation of a DoctorModel.

        With ``expand_user`` the userId becomes ``{_id, email}`` of the linked
        account (requires ``doctor.user`` to be loaded); a dangling reference
        expands to None.
        """
        user_ref: Union[UserRef, str, None] = doctor.user_id
        if expand_user:
            user = doctor.user
            user_ref = UserRef(id=user.id, email=user.email) if user is not None else None

        return cls(
            id=doctor.id,
            user_id=user_ref,
            name=doctor.name,
            specialization=doctor.specialization,
            hospital=doctor.hospital,
            location=doctor.location,
            experience=doctor.experience,
            consultation_fee=_fee(doctor.consultation_fee),
            availability=doctor.availability or [],
            bio=doctor.bio,
            education=doctor.education or [],
            certifications=doctor.certifications or [],
            languages=doctor.languages or [],
            image=doctor.image,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )
