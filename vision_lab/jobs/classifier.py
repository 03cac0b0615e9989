"""Maps remote job status values onto running / succeeded / failed."""
from vision_lab.constants import (
    ITERATION_FAILED_STATUSES,
    ITERATION_RUNNING_STATUSES,
    ITERATION_SUCCEEDED_STATUSES,
)
from vision_lab.errors import ProtocolError
from vision_lab.jobs.models import JobOutcome


def classify_status(value: str) -> JobOutcome:
    """Return the outcome for a status value. Raises ProtocolError if unknown."""
    match value:
        case v if v in ITERATION_RUNNING_STATUSES:
            return JobOutcome.RUNNING
        case v if v in ITERATION_SUCCEEDED_STATUSES:
            return JobOutcome.SUCCEEDED
        case v if v in ITERATION_FAILED_STATUSES:
            return JobOutcome.FAILED
        case _:
            raise ProtocolError(value)
