"""Liveness probe backed by a trivial database query."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ems_api.core.database import get_db, ping
from ems_api.schemas.health import PingResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/ping", response_model=PingResponse)
def get_ping(db: Annotated[Session, Depends(get_db)]) -> PingResponse | JSONResponse:
    """Return the rows of SELECT 1 AS ok, or 500 with the driver's message."""
    try:
        rows = ping(db)
    except SQLAlchemyError as e:
        logger.warning("Database ping failed: %s", e)
        return JSONResponse(status_code=500, content={"error": str(e)})
    return PingResponse(ok=rows)
