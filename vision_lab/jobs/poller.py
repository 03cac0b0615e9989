"""Drive a remote job to a terminal state by polling its status."""
import asyncio
import logging
from time import monotonic
from typing import Callable, Optional

from vision_lab.constants import MSG_POLL_STATUS
from vision_lab.errors import JobFailed, JobTimeout
from vision_lab.jobs.classifier import classify_status
from vision_lab.jobs.client import JobClient
from vision_lab.jobs.models import (
    JobHandle,
    JobOutcome,
    JobStatus,
    PollPolicy,
    TerminalResult,
)

logger = logging.getLogger(__name__)

OnPoll = Callable[[JobStatus], None]


def _bound_reached(policy: PollPolicy, attempts: int, elapsed: float) -> bool:
    match (policy.max_attempts, policy.max_duration):
        case (int() as n, _) if attempts >= n:
            return True
        case (_, (float() | int()) as limit) if elapsed >= limit:
            return True
        case _:
            return False


async def run_to_completion(
    client: JobClient,
    handle: JobHandle,
    policy: PollPolicy,
    on_poll: Optional[OnPoll] = None,
) -> TerminalResult:
    """Poll ``handle`` until the job succeeds, fails or the policy runs out.

    Every status is fetched fresh from ``client``; ``on_poll`` sees each one
    before it is classified. Raises JobFailed, JobTimeout or ProtocolError,
    and lets RemoteRequestError from the status query through untouched.
    Cancelling the awaiting task while it sleeps stops polling immediately.
    """
    started = monotonic()
    attempts = 0
    while True:
        status = await client.poll_status(handle)
        attempts += 1
        logger.debug(MSG_POLL_STATUS, handle, status.value, attempts)
        if on_poll is not None:
            on_poll(status)

        match classify_status(status.value):
            case JobOutcome.SUCCEEDED:
                return TerminalResult(handle=handle, status=status, attempts=attempts)
            case JobOutcome.FAILED:
                raise JobFailed(handle, status)
            case JobOutcome.RUNNING:
                pass

        elapsed = monotonic() - started
        if _bound_reached(policy, attempts, elapsed):
            raise JobTimeout(handle, attempts, elapsed)

        await asyncio.sleep(policy.interval)
