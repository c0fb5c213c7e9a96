from typing import Literal

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Service liveness plus the result of a database probe."""

    status: Literal["ok", "degraded"]
    version: str
    timestamp: str
    database: Literal["healthy", "unhealthy"]
