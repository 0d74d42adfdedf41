import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError

from doctor_profiles.config import constants
from doctor_profiles.config.settings import settings
from doctor_profiles.db.crud import doctor as doctor_crud
from doctor_profiles.db.crud.user import get_user
from doctor_profiles.db.models import DoctorModel, UserModel
from doctor_profiles.schemas.doctor import DoctorCreate, DoctorUpdate

logger = logging.getLogger(__name__)

DOCTOR_NOT_FOUND = "Doctor not found"
USER_NOT_FOUND = "User not found"
PROFILE_EXISTS = "Doctor profile already exists"


def default_availability() -> List[Dict[str, Any]]:
    """Weekly template for provisioned profiles: weekdays 08-17, Saturday 08-13, Sunday off."""
    schedule = []
    for day in constants.Weekday:
        if day is constants.Weekday.SUNDAY:
            hours = None
        elif day is constants.Weekday.SATURDAY:
            hours = constants.SATURDAY_HOURS
        else:
            hours = constants.WEEKDAY_HOURS
        slots = [{"startTime": hours[0], "endTime": hours[1]}] if hours else []
        schedule.append({"day": day.value, "slots": slots})
    return schedule


def profile_from_user(user: UserModel) -> Dict[str, Any]:
    """Column values for a profile synthesized from a user's registration data."""
    name = user.name or user.username
    if user.specialization:
        specialization = user.specialization
    elif user.doctor_reg:
        specialization = constants.REGISTERED_SPECIALIZATION.format(reg=user.doctor_reg)
    else:
        specialization = constants.DEFAULT_SPECIALIZATION
    hospital = user.hospital or constants.DEFAULT_HOSPITAL

    return {
        "user_id": user.id,
        "name": name,
        "specialization": specialization,
        "hospital": hospital,
        "location": user.location or constants.DEFAULT_LOCATION,
        "experience": constants.DEFAULT_EXPERIENCE,
        "consultation_fee": user.consultation_fee or constants.DEFAULT_CONSULTATION_FEE,
        "availability": default_availability(),
        "bio": f"Dr. {name} is a {specialization} specialist at {hospital}.",
        "image": user.cimage or settings.default_doctor_image,
    }


async def list_profiles(
    db: AsyncSession, filters: Optional[Dict[str, str]] = None
) -> List[DoctorModel]:
    return await doctor_crud.find_doctors(db, filters=filters, with_user=True)


async def get_profile(db: AsyncSession, doctor_id: str, with_user: bool = False) -> DoctorModel:
    doctor = await doctor_crud.get_doctor(db, doctor_id, with_user=with_user)
    if doctor is None:
        logger.warning(f"Doctor {doctor_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DOCTOR_NOT_FOUND)
    return doctor


async def get_profile_for_user(db: AsyncSession, user_id: str) -> Optional[DoctorModel]:
    """Existing profile of a user, or None. Never writes."""
    return await doctor_crud.get_doctor_by_user_id(db, user_id, with_user=True)


async def provision_profile(db: AsyncSession, user_id: str) -> DoctorModel:
    """
    Create a profile for a doctor-flagged user from their registration data.

    Raises:
        HTTPException: 404 when the user does not exist or is not a doctor
    """
    user = await get_user(db, user_id)
    if user is None or not user.is_doctor:
        logger.warning(f"No doctor profile to provision for user {user_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DOCTOR_NOT_FOUND)

    logger.info(f"Creating doctor profile for user: {user.id}")
    profile = profile_from_user(user)
    logger.debug(f"Using registration data: {profile}")

    doctor = DoctorModel(**profile)
    db.add(doctor)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        # a concurrent request created the profile first
        existing = await doctor_crud.get_doctor_by_user_id(db, user_id)
        if existing is None:
            raise
        logger.info(f"Doctor profile for user {user_id} was created concurrently")
        return existing

    await db.refresh(doctor)
    logger.info(f"Doctor profile created: {doctor.id}")
    return doctor


async def create_profile(db: AsyncSession, payload: DoctorCreate) -> DoctorModel:
    user = await get_user(db, payload.user_id)
    if user is None:
        logger.warning(f"Cannot create doctor profile: user {payload.user_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)

    if await doctor_crud.get_doctor_by_user_id(db, payload.user_id) is not None:
        logger.warning(f"Doctor profile already exists for user {payload.user_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PROFILE_EXISTS)

    try:
        return await doctor_crud.create_doctor(db, user, payload.to_columns())
    except IntegrityError:
        logger.warning(f"Duplicate doctor profile rejected by the store for user {payload.user_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=PROFILE_EXISTS)


async def update_profile(db: AsyncSession, doctor_id: str, payload: DoctorUpdate) -> DoctorModel:
    doctor = await get_profile(db, doctor_id)
    changes = payload.changes()

    user = None
    if "image" in changes:
        # mirrored into the account when it still exists
        user = await get_user(db, doctor.user_id)

    return await doctor_crud.update_doctor(db, doctor, changes, user=user)


async def delete_profile(db: AsyncSession, doctor_id: str) -> None:
    doctor = await get_profile(db, doctor_id)
    user = await get_user(db, doctor.user_id)
    await doctor_crud.delete_doctor(db, doctor, user=user)
