from fastapi import APIRouter, Depends, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from doctor_profiles.core.middleware import get_db
from doctor_profiles.routes.doctor import services
from doctor_profiles.schemas.doctor import DoctorCreate, DoctorOut, DoctorUpdate
from doctor_profiles.schemas.shared import Envelope

logger = logging.getLogger(__name__)

# Mounted under settings.api_prefix by the application. Fixed paths are
# declared before "/{doctor_id}" so they are matched first.
router = APIRouter(tags=["doctors"])


@router.get("/all", response_model=Envelope[List[DoctorOut]], response_model_exclude_none=True)
async def list_doctors_route(db: AsyncSession = Depends(get_db)):
    """Every doctor profile, userId expanded to the account email."""
    doctors = await services.list_profiles(db)
    return Envelope(data=[DoctorOut.from_model(d, expand_user=True) for d in doctors])


@router.get("/search", response_model=Envelope[List[DoctorOut]], response_model_exclude_none=True)
async def search_doctors_route(
    specialization: Optional[str] = None,
    location: Optional[str] = None,
    hospital: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """Exact-match search; absent filters are ignored."""
    doctors = await services.list_profiles(
        db,
        filters={"specialization": specialization, "location": location, "hospital": hospital},
    )
    return Envelope(data=[DoctorOut.from_model(d, expand_user=True) for d in doctors])


@router.get("/user/{user_id}", response_model=Envelope[DoctorOut], response_model_exclude_none=True)
async def get_doctor_for_user_route(user_id: str, db: AsyncSession = Depends(get_db)):
    """
    Profile of a user account. When a doctor-flagged user has no profile yet,
    one is created from their registration data and returned.
    """
    doctor = await services.get_profile_for_user(db, user_id)
    if doctor is not None:
        return Envelope(data=DoctorOut.from_model(doctor, expand_user=True))

    doctor = await services.provision_profile(db, user_id)
    return Envelope(data=DoctorOut.from_model(doctor))


@router.post(
    "/create",
    response_model=Envelope[DoctorOut],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_doctor_route(payload: DoctorCreate, db: AsyncSession = Depends(get_db)):
    doctor = await services.create_profile(db, payload)
    return Envelope(message="Doctor profile created successfully", data=DoctorOut.from_model(doctor))


@router.get("/{doctor_id}", response_model=Envelope[DoctorOut], response_model_exclude_none=True)
async def get_doctor_route(doctor_id: str, db: AsyncSession = Depends(get_db)):
    doctor = await services.get_profile(db, doctor_id, with_user=True)
    return Envelope(data=DoctorOut.from_model(doctor, expand_user=True))


@router.put("/{doctor_id}", response_model=Envelope[DoctorOut], response_model_exclude_none=True)
async def update_doctor_route(
    doctor_id: str,
    payload: DoctorUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Partial update; only fields that are present and set are written."""
    doctor = await services.update_profile(db, doctor_id, payload)
    return Envelope(message="Doctor profile updated successfully", data=DoctorOut.from_model(doctor))


@router.delete("/{doctor_id}", response_model=Envelope[DoctorOut], response_model_exclude_none=True)
async def delete_doctor_route(doctor_id: str, db: AsyncSession = Depends(get_db)):
    logger.info(f"Attempting to delete doctor profile {doctor_id}")
    await services.delete_profile(db, doctor_id)
    return Envelope(message="Doctor profile deleted successfully")
