"""JobClient — abstract base for services that run long remote jobs."""
from abc import ABC, abstractmethod

from vision_lab.jobs.models import JobHandle, JobStatus


class JobClient(ABC):
    @abstractmethod
    async def submit(self, resource_id: str) -> tuple[JobHandle, JobStatus]:
        """Start a remote job and return its handle and initial status. Raises RemoteRequestError."""
        ...

    @abstractmethod
    async def poll_status(self, handle: JobHandle) -> JobStatus:
        """Fetch a fresh status snapshot for the job. Raises RemoteRequestError."""
        ...
