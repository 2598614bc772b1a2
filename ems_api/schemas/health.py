"""Pydantic schemas for the liveness probe."""

from typing import Any

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    """Rows returned by the liveness query, verbatim."""

    ok: list[dict[str, Any]] = Field(description="Result rows of SELECT 1 AS ok")
