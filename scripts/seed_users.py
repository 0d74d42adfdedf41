import asyncio

from sqlalchemy.future import select
from doctor_profiles.db.base import get_engine, get_session_factory
from doctor_profiles.db.models.user import UserModel
from doctor_profiles.config.settings import settings

# (email, username, name, specialization, hospital, location, doctor_reg, fee)
# Accounts with gaps exercise the provisioning fallbacks.
DOCTOR_USERS = [
    ("dr.perera@example.com", "aperera", "A. Perera", "Cardiology", "National Hospital", "Colombo", "SLMC-10231", 3500),
    ("dr.silva@example.com", "nsilva", "N. Silva", "Pediatrics", "Lady Ridgeway Hospital", "Colombo", "SLMC-11872", 3000),
    ("dr.fernando@example.com", "kfernando", "K. Fernando", None, None, "Kandy", "SLMC-09541", None),
    ("dr.jayasinghe@example.com", "rjayasinghe", None, None, "Teaching Hospital Karapitiya", "Galle", None, 2500),
    ("dr.bandara@example.com", "sbandara", None, None, None, None, None, None),
]

async def main() -> None:
    print("Connecting to database at:", settings.database_url)
    engine = get_engine(settings.database_url)
    async_session = get_session_factory(engine)

    async with async_session() as db:
        for email, username, name, specialization, hospital, location, doctor_reg, fee in DOCTOR_USERS:
            existing_user = await db.execute(
                select(UserModel).where(UserModel.email == email)
            )
            if existing_user.first() is not None:
                print(f"User with email {email} already exists. Skipping.")
                continue

            db.add(UserModel(
                email=email,
                username=username,
                name=name,
                is_doctor=True,
                specialization=specialization,
                hospital=hospital,
                location=location,
                doctor_reg=doctor_reg,
                consultation_fee=fee,
            ))
            print(f"Added doctor account: {username} ({email})")

        await db.commit()
        print("Doctor accounts successfully added to the database.")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
