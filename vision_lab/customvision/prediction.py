"""CustomVisionPredictionClient — classifies images against a published iteration."""
from dataclasses import dataclass

from vision_lab.constants import PREDICTION_API_PATH
from vision_lab.rest import RestClient


@dataclass(frozen=True)
class Prediction:
    tag_name: str
    probability: float


def confident(predictions: list[Prediction], threshold: float) -> list[Prediction]:
    """Predictions strictly above ``threshold``, most probable first."""
    return sorted(
        (p for p in predictions if p.probability > threshold),
        key=lambda p: p.probability,
        reverse=True,
    )


class CustomVisionPredictionClient:

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    async def classify_image(
        self, project_id: str, published_name: str, image_bytes: bytes
    ) -> list[Prediction]:
        data = await self._rest.post_json(
            f"{PREDICTION_API_PATH}/{project_id}/classify/iterations/{published_name}/image",
            data=image_bytes,
        )
        return [
            Prediction(tag_name=p["tagName"], probability=p["probability"])
            for p in data.get("predictions", [])
        ]
