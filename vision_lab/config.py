from dataclasses import dataclass
from typing import Optional
import os
import uuid
from dotenv import load_dotenv

from vision_lab.constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_POLL_MAX_ATTEMPTS,
    DEFAULT_PREDICTION_THRESHOLD,
    DEFAULT_TEST_IMAGES_DIR,
    DEFAULT_TRAINING_IMAGES_DIR,
)


@dataclass(frozen=True)
class Config:
    ai_services_endpoint: Optional[str]
    ai_services_key: Optional[str]
    training_endpoint: Optional[str]
    training_key: Optional[str]
    prediction_endpoint: Optional[str]
    prediction_key: Optional[str]
    project_id: Optional[str]
    model_name: Optional[str]
    log_level: str = DEFAULT_LOG_LEVEL
    training_images_dir: str = DEFAULT_TRAINING_IMAGES_DIR
    test_images_dir: str = DEFAULT_TEST_IMAGES_DIR
    poll_interval: float = float(DEFAULT_POLL_INTERVAL)
    poll_max_attempts: Optional[int] = int(DEFAULT_POLL_MAX_ATTEMPTS)
    prediction_threshold: float = float(DEFAULT_PREDICTION_THRESHOLD)
    http_timeout: float = float(DEFAULT_HTTP_TIMEOUT)

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        raw_max_attempts = os.getenv("POLL_MAX_ATTEMPTS", DEFAULT_POLL_MAX_ATTEMPTS).strip()

        return cls._validate(
            ai_services_endpoint=os.getenv("AI_SERVICES_ENDPOINT") or None,
            ai_services_key=os.getenv("AI_SERVICES_KEY") or None,
            training_endpoint=os.getenv("TRAINING_ENDPOINT") or None,
            training_key=os.getenv("TRAINING_KEY") or None,
            prediction_endpoint=os.getenv("PREDICTION_ENDPOINT") or None,
            prediction_key=os.getenv("PREDICTION_KEY") or None,
            project_id=os.getenv("PROJECT_ID") or None,
            model_name=os.getenv("MODEL_NAME") or None,
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
            training_images_dir=os.getenv("TRAINING_IMAGES_DIR", DEFAULT_TRAINING_IMAGES_DIR),
            test_images_dir=os.getenv("TEST_IMAGES_DIR", DEFAULT_TEST_IMAGES_DIR),
            poll_interval=float(os.getenv("POLL_INTERVAL", DEFAULT_POLL_INTERVAL)),
            poll_max_attempts=int(raw_max_attempts) if raw_max_attempts else None,
            prediction_threshold=float(
                os.getenv("PREDICTION_THRESHOLD", DEFAULT_PREDICTION_THRESHOLD)
            ),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)),
        )

    @staticmethod
    def _validate(**values) -> "Config":
        match values["project_id"]:
            case None:
                pass
            case raw:
                try:
                    uuid.UUID(raw)
                except ValueError:
                    raise ValueError(f"PROJECT_ID must be a UUID, got {raw!r}") from None

        match values["poll_max_attempts"]:
            case int() as n if n < 1:
                raise ValueError("POLL_MAX_ATTEMPTS must be at least 1")
            case _:
                pass

        match values["poll_interval"]:
            case n if n < 0:
                raise ValueError("POLL_INTERVAL must not be negative")
            case _:
                pass

        match values["prediction_threshold"]:
            case t if not 0.0 <= t <= 1.0:
                raise ValueError("PREDICTION_THRESHOLD must be between 0 and 1")
            case _:
                pass

        return Config(**values)

    def require(self, *names: str) -> None:
        """Raise ValueError naming every listed setting that is unset."""
        missing = [name.upper() for name in names if getattr(self, name) in (None, "")]
        match missing:
            case []:
                pass
            case _:
                raise ValueError(", ".join(missing) + " must be set in .env")
