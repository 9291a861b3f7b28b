"""Response body for /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"] = "ok"
    environment: str
    database: Literal["connected", "disconnected"]
    uploads: Literal["ready", "not_created", "unwritable"] = Field(
        description="State of the attachment directory; not_created until the first upload",
    )
