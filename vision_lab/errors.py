"""Error taxonomy shared by the REST clients and the job poller."""
from typing import Any, Optional


class VisionLabError(Exception):
    """Base class for every error surfaced to the command line."""


class RemoteRequestError(VisionLabError):
    """A single call to a remote service failed.

    Covers connection errors, timeouts, non-2xx responses and bodies that are
    not JSON. Never retried here; callers may wrap their own retry policy.

    Attributes:
        status: HTTP status code, when a response was received
        body: response body text, when available
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.message = message
        self.status = status
        self.body = body
        super().__init__(message)


class JobFailed(VisionLabError):
    """The remote service reported that the job failed."""

    def __init__(self, handle: Any, status: Any) -> None:
        self.handle = handle
        self.status = status
        super().__init__(f"Job {handle} failed with status {status.value!r}")


class JobTimeout(VisionLabError):
    """The job was still running when the local poll bound ran out.

    Attributes:
        attempts: status queries performed before giving up
        elapsed: seconds spent polling
    """

    def __init__(self, handle: Any, attempts: int, elapsed: float) -> None:
        self.handle = handle
        self.attempts = attempts
        self.elapsed = elapsed
        super().__init__(
            f"Job {handle} still running after {attempts} polls ({elapsed:.1f}s)"
        )


class ProtocolError(VisionLabError):
    """The remote service returned a status value this client does not know."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Unrecognized job status {value!r}")
