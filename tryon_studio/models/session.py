"""Orchestrator state models."""

from enum import Enum

from pydantic import BaseModel


class TryOnStatus(str, Enum):
    """Lifecycle of a single try-on trigger."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class TryOnState(BaseModel):
    """Snapshot of the orchestrator's transient state."""

    status: TryOnStatus = TryOnStatus.IDLE
    error: str | None = None
    result_url: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is TryOnStatus.LOADING
