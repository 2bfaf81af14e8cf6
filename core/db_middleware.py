from peewee import PeeweeException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from core.logging import get_logger
from db.base import db, close_db
from schemas.common import ApiStatus

log = get_logger("database")

# Liveness checks answer without touching the database
NO_DB_PATHS = {"/", "/ping"}


class DatabaseMiddleware(BaseHTTPMiddleware):
    """Hold one peewee connection per request and release it afterwards."""

    async def dispatch(self, request, call_next):
        if request.url.path in NO_DB_PATHS:
            return await call_next(request)

        try:
            db.connect(reuse_if_open=True)
        except PeeweeException as e:
            log.error("database_connect_error", error=str(e))
            return JSONResponse(
                status_code=503,
                content={
                    "status": ApiStatus.ERROR.value,
                    "message": "Failed to load tournament data",
                    "data": None,
                },
            )

        try:
            return await call_next(request)
        finally:
            close_db()
