from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from doctor_profiles.config.settings import settings
from doctor_profiles.core.errors import register_exception_handlers
from doctor_profiles.core.middleware import catch_unhandled_errors, get_db
from doctor_profiles.db.base import Base, get_engine, get_session_factory
from doctor_profiles.routes.doctor.router import router as doctor_router
import doctor_profiles.db.models  # noqa: F401  (registers the tables on Base.metadata)

# -------------------------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------------------------
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application start-up & shutdown hooks."""
    logger.info("Application startup …")

    engine = None
    try:
        logger.info("Initializing Database Engine...")
        engine = get_engine(settings.database_url)
        app.state.engine = engine
        app.state.session_factory = get_session_factory(engine)
        logger.info("DB engine and session factory ready.")

        if settings.auto_create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created (AUTO_CREATE_TABLES).")
    except Exception as e:
        logger.critical(f"CRITICAL ERROR DURING STARTUP INITIALIZATIONS: {e}", exc_info=True)
        if engine:
            await engine.dispose()
        raise

    yield

    logger.info("Application shutdown …")
    try:
        await engine.dispose()
        logger.info("DB engine disposed")
    except Exception:
        logger.exception("Error disposing DB engine")
    logger.info("Shutdown complete")


# -------------------------------------------------------------------------------------
# FastAPI application instance
# -------------------------------------------------------------------------------------
app = FastAPI(title="Doctor Profiles API", lifespan=lifespan)

# registered before CORS: CORSMiddleware must stay the outermost layer
app.middleware("http")(catch_unhandled_errors)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(o) for o in settings.cors_origins],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


# ----------------------------------------------------------------- health‑check -----
@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    database = "connected"
    try:
        await db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check could not reach the database")
        database = "unavailable"
    return {"status": "ok", "database": database}


# ------------------------------------------------------------------- routes ---------
app.include_router(doctor_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
