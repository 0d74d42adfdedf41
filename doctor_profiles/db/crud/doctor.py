import logging
from typing import Optional, List, Dict, Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from doctor_profiles.db.models import DoctorModel, UserModel

logger = logging.getLogger(__name__)

SEARCHABLE_FIELDS = ("specialization", "location", "hospital")


async def find_doctors(
    db: AsyncSession,
    filters: Optional[Dict[str, str]] = None,
    with_user: bool = True,
) -> List[DoctorModel]:
    """
    Find doctor profiles by exact match on the searchable fields.

    Args:
        db: Database session
        filters: Mapping of field name to value. Only specialization, location
            and hospital are honoured; empty values are ignored.
        with_user: Eager load the linked user account (for the email)

    Returns:
        List of DoctorModel objects, every profile when no filter applies
    """
    criteria = {
        field: value
        for field, value in (filters or {}).items()
        if field in SEARCHABLE_FIELDS and value
    }
    logger.debug(f"CRUD: searching doctors with criteria {criteria}")

    query = select(DoctorModel)
    for field, value in criteria.items():
        query = query.where(getattr(DoctorModel, field) == value)
    if with_user:
        query = query.options(selectinload(DoctorModel.user))

    result = await db.execute(query)
    doctors = list(result.scalars().all())
    logger.info(f"CRUD: found {len(doctors)} doctors matching {criteria or 'no filter'}")
    return doctors


async def get_doctor(
    db: AsyncSession, doctor_id: str, with_user: bool = False
) -> Optional[DoctorModel]:
    """Fetch a doctor profile by its own ID."""
    query = select(DoctorModel).where(DoctorModel.id == doctor_id)
    if with_user:
        query = query.options(selectinload(DoctorModel.user))
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_doctor_by_user_id(
    db: AsyncSession, user_id: str, with_user: bool = False
) -> Optional[DoctorModel]:
    """Fetch the doctor profile linked to a user account."""
    query = select(DoctorModel).where(DoctorModel.user_id == user_id)
    if with_user:
        query = query.options(selectinload(DoctorModel.user))
    result = await db.execute(query)
    return result.scalars().first()


async def create_doctor(
    db: AsyncSession, user: UserModel, profile: Dict[str, Any]
) -> DoctorModel:
    """
    Insert a doctor profile for ``user`` and mark the account as a doctor.

    The profile, the ``is_doctor`` flag and the mirrored image are committed
    together; a failure rolls all of them back.

    Raises:
        sqlalchemy.exc.IntegrityError: a profile already exists for the user
    """
    doctor = DoctorModel(user_id=user.id, **profile)
    db.add(doctor)

    user.is_doctor = True
    if profile.get("image"):
        user.cimage = profile["image"]

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    await db.refresh(doctor)
    logger.info(f"CRUD: created doctor_id={doctor.id} for user_id={user.id}")
    return doctor


async def update_doctor(
    db: AsyncSession,
    doctor: DoctorModel,
    changes: Dict[str, Any],
    user: Optional[UserModel] = None,
) -> DoctorModel:
    """
    Apply ``changes`` to a profile. A changed image is mirrored into the
    user's cached image when the account is given.
    """
    for key, value in changes.items():
        setattr(doctor, key, value)

    if "image" in changes and user is not None:
        user.cimage = changes["image"]

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    await db.refresh(doctor)
    logger.info(f"CRUD: updated doctor_id={doctor.id} fields={sorted(changes)}")
    return doctor


async def delete_doctor(
    db: AsyncSession, doctor: DoctorModel, user: Optional[UserModel] = None
) -> None:
    """Delete a profile and clear the doctor flag on its account, in one commit."""
    if user is not None:
        user.is_doctor = False
    await db.delete(doctor)

    try:
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    logger.info(f"CRUD: deleted doctor_id={doctor.id} (user_id={doctor.user_id})")
