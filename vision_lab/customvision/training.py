"""CustomVisionTrainingClient — uploads tagged images and retrains a project."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from vision_lab.constants import MSG_MISSING_TAG_FOLDER, MSG_TRAINING_SUBMITTED, TRAINING_API_PATH
from vision_lab.errors import RemoteRequestError
from vision_lab.jobs.client import JobClient
from vision_lab.jobs.models import JobHandle, JobStatus
from vision_lab.rest import RestClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectTag:
    id: str
    name: str


def _status(iteration: Any) -> JobStatus:
    match iteration:
        case {"status": str() as value}:
            return JobStatus(value=value, payload=iteration)
        case dict():
            return JobStatus(value="", payload=iteration)
        case _:
            raise RemoteRequestError("Iteration response is not an object", body=str(iteration))


def _tag(raw: Any) -> ProjectTag:
    match raw:
        case {"id": str() as tag_id, "name": str() as name}:
            return ProjectTag(id=tag_id, name=name)
        case _:
            raise RemoteRequestError("Tag entry has no id or name", body=str(raw))


class CustomVisionTrainingClient(JobClient):
    """Training API calls over an open RestClient.

    The RestClient must carry the Training-Key header and stay open for the
    lifetime of this object.
    """

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    @staticmethod
    def _path(project_id: str, suffix: str = "") -> str:
        return f"{TRAINING_API_PATH}/projects/{project_id}{suffix}"

    async def get_project(self, project_id: str) -> dict[str, Any]:
        return await self._rest.get_json(self._path(project_id))

    async def get_tags(self, project_id: str) -> list[ProjectTag]:
        data = await self._rest.get_json(self._path(project_id, "/tags"))
        match data:
            case list():
                return [_tag(t) for t in data]
            case _:
                raise RemoteRequestError("Tags response is not a list", body=str(data))

    async def create_images_from_data(
        self, project_id: str, image_bytes: bytes, tag_ids: list[str]
    ) -> dict[str, Any]:
        summary = await self._rest.post_json(
            self._path(project_id, "/images"),
            data=image_bytes,
            params={"tagIds": ",".join(tag_ids)},
        )
        match summary:
            case {"isBatchSuccessful": False, "images": images}:
                statuses = ", ".join(str(i.get("status")) for i in images)
                raise RemoteRequestError(f"Image upload rejected: {statuses}", body=str(summary))
            case _:
                return summary

    async def submit(self, resource_id: str) -> tuple[JobHandle, JobStatus]:
        iteration = await self._rest.post_json(self._path(resource_id, "/train"))
        match iteration:
            case {"id": str() as job_id}:
                handle = JobHandle(resource_id=resource_id, job_id=job_id)
            case _:
                raise RemoteRequestError("Training response has no iteration id", body=str(iteration))
        status = _status(iteration)
        logger.info(MSG_TRAINING_SUBMITTED, handle.job_id, status.value)
        return handle, status

    async def poll_status(self, handle: JobHandle) -> JobStatus:
        iteration = await self._rest.get_json(
            self._path(handle.resource_id, f"/iterations/{handle.job_id}")
        )
        return _status(iteration)


async def upload_images(
    client: CustomVisionTrainingClient,
    project_id: str,
    root_folder: Path,
    on_tag: Optional[Callable[[ProjectTag], None]] = None,
    on_image: Optional[Callable[[Path], None]] = None,
) -> int:
    """Upload every file under ``root_folder/<tag name>/`` tagged with that tag.

    Returns the number of images uploaded.
    """
    uploaded = 0
    for tag in await client.get_tags(project_id):
        if on_tag is not None:
            on_tag(tag)
        folder = root_folder / tag.name
        if not folder.is_dir():
            logger.warning(MSG_MISSING_TAG_FOLDER, tag.name, root_folder)
            continue
        for image in sorted(p for p in folder.iterdir() if p.is_file()):
            if on_image is not None:
                on_image(image)
            await client.create_images_from_data(project_id, image.read_bytes(), [tag.id])
            uploaded += 1
    return uploaded
