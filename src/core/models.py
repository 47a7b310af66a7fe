"""Domain models for the monitoring facade."""

from datetime import datetime, timezone
from typing import Any, Tuple
from pydantic import BaseModel, ConfigDict, Field


class NoticeError(Exception):
    """Error reported for message-only notices (no originating exception)."""


class AgentCall(BaseModel):
    """A single entry-point call captured by the recording agent."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    method: str = Field(..., description="Agent entry point name")
    args: Tuple[Any, ...] = Field(default_factory=tuple, description="Positional arguments")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Call timestamp (UTC)"
    )
