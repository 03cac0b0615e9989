import pytest

from vision_lab.errors import ProtocolError
from vision_lab.jobs.classifier import classify_status
from vision_lab.jobs.models import JobHandle, JobOutcome, JobStatus, PollPolicy


# ── classify_status ───────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "value, outcome",
    [
        ("Queued", JobOutcome.RUNNING),
        ("Training", JobOutcome.RUNNING),
        ("Completed", JobOutcome.SUCCEEDED),
        ("Failed", JobOutcome.FAILED),
    ],
)
def test_classify_known_statuses(value, outcome):
    assert classify_status(value) is outcome


@pytest.mark.parametrize("value", ["Weird", "", "training", "Paused"])
def test_classify_unknown_status_raises(value):
    with pytest.raises(ProtocolError) as excinfo:
        classify_status(value)

    assert excinfo.value.value == value


# ── PollPolicy ────────────────────────────────────────────────────────────────


def test_poll_policy_defaults_are_unbounded():
    policy = PollPolicy(interval=5)

    assert policy.max_attempts is None
    assert policy.max_duration is None


def test_poll_policy_rejects_negative_interval():
    with pytest.raises(ValueError, match="interval"):
        PollPolicy(interval=-1)


def test_poll_policy_rejects_zero_attempts():
    with pytest.raises(ValueError, match="max_attempts"):
        PollPolicy(interval=0, max_attempts=0)


@pytest.mark.parametrize("attempts", [2.0, "3", True])
def test_poll_policy_rejects_non_integer_attempts(attempts):
    with pytest.raises(ValueError, match="max_attempts"):
        PollPolicy(interval=0, max_attempts=attempts)


def test_poll_policy_rejects_non_positive_duration():
    with pytest.raises(ValueError, match="max_duration"):
        PollPolicy(interval=0, max_duration=0)


def test_poll_policy_immutable():
    policy = PollPolicy(interval=1)

    with pytest.raises(Exception):
        policy.interval = 2


# ── JobHandle / JobStatus ─────────────────────────────────────────────────────


def test_job_handle_str():
    assert str(JobHandle(resource_id="p", job_id="i")) == "p/i"


def test_job_status_equality_ignores_payload():
    assert JobStatus("Training", {"a": 1}) == JobStatus("Training", {"b": 2})
