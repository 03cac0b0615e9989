from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class JobHandle:
    resource_id: str
    job_id: str

    def __str__(self) -> str:
        return f"{self.resource_id}/{self.job_id}"


@dataclass(frozen=True)
class JobStatus:
    value: str
    payload: dict[str, Any] = field(default_factory=dict, compare=False)


class JobOutcome(Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class PollPolicy:
    interval: float
    max_attempts: Optional[int] = None
    max_duration: Optional[float] = None

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError("interval must not be negative")
        if self.max_attempts is not None and (
            type(self.max_attempts) is not int or self.max_attempts < 1
        ):
            raise ValueError("max_attempts must be an integer of at least 1")
        if self.max_duration is not None and self.max_duration <= 0:
            raise ValueError("max_duration must be positive")


@dataclass(frozen=True)
class TerminalResult:
    handle: JobHandle
    status: JobStatus
    attempts: int
