"""Command flows — wire Config into the clients and print results to the console."""
import logging
from pathlib import Path

from rich.console import Console

from vision_lab.config import Config
from vision_lab.constants import (
    MSG_ANALYZING,
    MSG_CAPTION,
    MSG_CAPTION_HEADER,
    MSG_DENSE_CAPTION,
    MSG_DENSE_HEADER,
    MSG_MODEL_TRAINED,
    MSG_NO_TEST_IMAGES,
    MSG_OBJECT,
    MSG_OBJECTS_HEADER,
    MSG_PEOPLE_HEADER,
    MSG_PERSON,
    MSG_PREDICTION,
    MSG_TAG,
    MSG_TAGS_HEADER,
    MSG_TRAINING,
    MSG_UPLOADING,
    PREDICTION_KEY_HEADER,
    TRAINING_KEY_HEADER,
)
from vision_lab.customvision.prediction import (
    CustomVisionPredictionClient,
    Prediction,
    confident,
)
from vision_lab.customvision.training import CustomVisionTrainingClient, upload_images
from vision_lab.jobs.models import PollPolicy, TerminalResult
from vision_lab.jobs.poller import run_to_completion
from vision_lab.rest import RestClient
from vision_lab.vision.azure import AzureVisionClient
from vision_lab.vision.client import ImageAnalysis, VisionClient

logger = logging.getLogger(__name__)


def make_console() -> Console:
    return Console(markup=False, highlight=False)


def poll_policy(config: Config) -> PollPolicy:
    return PollPolicy(interval=config.poll_interval, max_attempts=config.poll_max_attempts)


# ── analysis ──────────────────────────────────────────────────────────────────


def print_analysis(result: ImageAnalysis, console: Console) -> None:
    match result.caption:
        case None:
            pass
        case caption:
            console.print(MSG_CAPTION_HEADER)
            console.print(MSG_CAPTION % (caption.text, caption.confidence))

    console.print(MSG_DENSE_HEADER)
    for dense in result.dense_captions:
        console.print(MSG_DENSE_CAPTION % (dense.text, dense.confidence))

    if result.tags:
        console.print(MSG_TAGS_HEADER)
        for tag in result.tags:
            console.print(MSG_TAG % (tag.name, tag.confidence))

    if result.objects:
        console.print(MSG_OBJECTS_HEADER)
        for detected in result.objects:
            console.print(MSG_OBJECT % detected.name)

    if result.people:
        console.print(MSG_PEOPLE_HEADER)
        for person in result.people:
            console.print(MSG_PERSON % (person.box, person.confidence))


async def analyze_image(
    config: Config,
    image_file: Path,
    console: Console,
    client: VisionClient | None = None,
) -> ImageAnalysis:
    config.require("ai_services_endpoint", "ai_services_key")
    vision = client or AzureVisionClient(
        config.ai_services_endpoint, config.ai_services_key, config.http_timeout
    )
    console.print(MSG_ANALYZING % image_file)
    result = await vision.analyze(image_file.read_bytes())
    print_analysis(result, console)
    return result


# ── training ──────────────────────────────────────────────────────────────────


async def train_classifier(config: Config, console: Console) -> TerminalResult:
    config.require("training_endpoint", "training_key", "project_id")
    async with RestClient(
        config.training_endpoint, TRAINING_KEY_HEADER, config.training_key, config.http_timeout
    ) as rest:
        client = CustomVisionTrainingClient(rest)
        await client.get_project(config.project_id)

        console.print(MSG_UPLOADING)
        first_tag = True

        def on_tag(tag) -> None:
            nonlocal first_tag
            if not first_tag:
                console.print()
            first_tag = False
            console.print(tag.name, end="")

        count = await upload_images(
            client,
            config.project_id,
            Path(config.training_images_dir),
            on_tag=on_tag,
            on_image=lambda _: console.print(".", end=""),
        )
        console.print()
        logger.info("Uploaded %d images", count)

        console.print(MSG_TRAINING, end="")
        handle, _ = await client.submit(config.project_id)
        result = await run_to_completion(
            client,
            handle,
            poll_policy(config),
            on_poll=lambda _: console.print(".", end=""),
        )
        console.print()
        console.print(MSG_MODEL_TRAINED)
        return result


# ── prediction ────────────────────────────────────────────────────────────────


async def predict_images(config: Config, console: Console) -> dict[Path, list[Prediction]]:
    config.require("prediction_endpoint", "prediction_key", "project_id", "model_name")
    folder = Path(config.test_images_dir)
    images = sorted(p for p in folder.iterdir() if p.is_file()) if folder.is_dir() else []
    match images:
        case []:
            logger.warning(MSG_NO_TEST_IMAGES, folder)
            return {}
        case _:
            pass

    results: dict[Path, list[Prediction]] = {}
    async with RestClient(
        config.prediction_endpoint,
        PREDICTION_KEY_HEADER,
        config.prediction_key,
        config.http_timeout,
    ) as rest:
        client = CustomVisionPredictionClient(rest)
        for image in images:
            predictions = await client.classify_image(
                config.project_id, config.model_name, image.read_bytes()
            )
            results[image] = confident(predictions, config.prediction_threshold)
            labels = ", ".join(
                MSG_PREDICTION % (p.tag_name, p.probability * 100) for p in results[image]
            )
            console.print(f"{image}: {labels}")
    return results


async def run_all(config: Config, console: Console) -> None:
    await train_classifier(config, console)
    await predict_images(config, console)
