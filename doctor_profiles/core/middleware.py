from fastapi import Request
from fastapi.responses import JSONResponse
import logging

from doctor_profiles.db.session import get_db_session

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"


async def catch_unhandled_errors(request: Request, call_next):
    """
    Middleware turning any exception that escaped the route handlers into the
    generic 500 envelope. Details are only logged, never sent to the client.
    """
    try:
        return await call_next(request)
    except Exception:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"success": False, "error": SERVER_ERROR})

# Get a database session dependency
async def get_db(request: Request):
    """Yield an async SQLAlchemy session (dependency)."""
    async for session in get_db_session(request):
        yield session
