"""Entry point — wires Config → command flow, maps errors to exit codes."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from vision_lab.commands import (
    analyze_image,
    make_console,
    predict_images,
    run_all,
    train_classifier,
)
from vision_lab import constants
from vision_lab.config import Config
from vision_lab.constants import (
    DEFAULT_IMAGE_FILE,
    MSG_CONFIG_ERROR,
    MSG_FILE_ERROR,
    MSG_JOB_FAILED,
    MSG_JOB_TIMEOUT,
    MSG_PROTOCOL_ERROR,
    MSG_REMOTE_ERROR,
)
from vision_lab.errors import JobFailed, JobTimeout, ProtocolError, RemoteRequestError

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vision-lab",
        description="Azure AI Vision and Custom Vision demo client.",
    )
    commands = parser.add_subparsers(dest="command")
    analyze = commands.add_parser(
        constants.CMD_ANALYZE, help="caption, tag and detect objects in an image"
    )
    analyze.add_argument("image", nargs="?", default=DEFAULT_IMAGE_FILE, type=Path)
    commands.add_parser(constants.CMD_TRAIN, help="upload tagged images and retrain the classifier")
    commands.add_parser(constants.CMD_PREDICT, help="classify the test images")
    commands.add_parser(constants.CMD_RUN, help="train, then predict (default)")
    return parser


async def _dispatch(args: argparse.Namespace, config: Config) -> None:
    console = make_console()
    match args.command:
        case constants.CMD_ANALYZE:
            await analyze_image(config, args.image, console)
        case constants.CMD_TRAIN:
            await train_classifier(config, console)
        case constants.CMD_PREDICT:
            await predict_images(config, console)
        case _:
            await run_all(config, console)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = Config.from_env()
    except ValueError as exc:
        _setup_logging("INFO")
        logger.error(MSG_CONFIG_ERROR, exc)
        return 1
    _setup_logging(config.log_level)

    try:
        asyncio.run(_dispatch(args, config))
    except ValueError as exc:
        logger.error(MSG_CONFIG_ERROR, exc)
    except JobFailed as exc:
        logger.error(MSG_JOB_FAILED, exc)
    except JobTimeout as exc:
        logger.error(MSG_JOB_TIMEOUT, exc)
    except ProtocolError as exc:
        logger.error(MSG_PROTOCOL_ERROR, exc)
    except RemoteRequestError as exc:
        logger.error(MSG_REMOTE_ERROR, exc)
    except OSError as exc:
        logger.error(MSG_FILE_ERROR, exc)
    else:
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
