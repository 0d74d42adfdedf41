import asyncio

from sqlalchemy.future import select
from doctor_profiles.db.base import get_engine, get_session_factory
from doctor_profiles.db.models.user import UserModel
from doctor_profiles.db.models.doctor import DoctorModel
from doctor_profiles.config.settings import settings

async def main() -> None:
    print("Connecting to database at:", settings.database_url)
    engine = get_engine(settings.database_url)
    async_session = get_session_factory(engine)

    async with async_session() as db:
        # Outer join: a profile may outlive its account
        result = await db.execute(
            select(DoctorModel, UserModel)
            .outerjoin(UserModel, UserModel.id == DoctorModel.user_id)
            .order_by(DoctorModel.name)
        )

        doctors = result.all()

        if not doctors:
            print("No doctors found in the database.")
        else:
            print(f"Found {len(doctors)} doctors in the database:")
            print("-" * 100)
            print(f"{'ID':<34} {'Name':<20} {'Email':<28} {'Specialization':<16}")
            print("-" * 100)

            for doctor, user in doctors:
                email = user.email if user else "(no account)"
                print(f"{doctor.id:<34} {doctor.name:<20} {email:<28} {doctor.specialization:<16}")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
