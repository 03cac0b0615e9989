"""AzureVisionClient — Azure AI Vision Image Analysis 4.0 backend."""
from typing import Any

from vision_lab.constants import (
    IMAGE_ANALYSIS_API_VERSION,
    IMAGE_ANALYSIS_FEATURES,
    IMAGE_ANALYSIS_KEY_HEADER,
    IMAGE_ANALYSIS_PATH,
)
from vision_lab.rest import RestClient
from vision_lab.vision.client import (
    BoundingBox,
    Caption,
    DetectedObject,
    DetectedPerson,
    ImageAnalysis,
    Tag,
    VisionClient,
)


def _box(raw: dict[str, Any]) -> BoundingBox:
    return BoundingBox(x=raw["x"], y=raw["y"], w=raw["w"], h=raw["h"])


def _values(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    return (data.get(key) or {}).get("values") or []


def parse_analysis(data: dict[str, Any]) -> ImageAnalysis:
    """Convert an imageanalysis:analyze response body into an ImageAnalysis."""
    match data.get("captionResult"):
        case {"text": str() as text, "confidence": confidence}:
            caption = Caption(text=text, confidence=confidence)
        case _:
            caption = None

    return ImageAnalysis(
        caption=caption,
        dense_captions=tuple(
            Caption(
                text=c["text"],
                confidence=c["confidence"],
                box=_box(c["boundingBox"]) if "boundingBox" in c else None,
            )
            for c in _values(data, "denseCaptionsResult")
        ),
        tags=tuple(
            Tag(name=t["name"], confidence=t["confidence"])
            for t in _values(data, "tagsResult")
        ),
        objects=tuple(
            DetectedObject(
                box=_box(o["boundingBox"]),
                tags=tuple(Tag(name=t["name"], confidence=t["confidence"]) for t in o.get("tags", [])),
            )
            for o in _values(data, "objectsResult")
        ),
        people=tuple(
            DetectedPerson(box=_box(p["boundingBox"]), confidence=p["confidence"])
            for p in _values(data, "peopleResult")
        ),
    )


class AzureVisionClient(VisionClient):

    def __init__(self, endpoint: str, api_key: str, timeout: float) -> None:
        self._endpoint = endpoint
        self._api_key = api_key
        self._timeout = timeout

    async def analyze(self, image_bytes: bytes) -> ImageAnalysis:
        params = {
            "api-version": IMAGE_ANALYSIS_API_VERSION,
            "features": ",".join(IMAGE_ANALYSIS_FEATURES),
        }
        async with RestClient(
            self._endpoint, IMAGE_ANALYSIS_KEY_HEADER, self._api_key, self._timeout
        ) as rest:
            data = await rest.post_json(IMAGE_ANALYSIS_PATH, data=image_bytes, params=params)
        return parse_analysis(data)
