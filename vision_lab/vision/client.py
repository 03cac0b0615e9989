"""VisionClient — abstract base for image analysis backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    w: int
    h: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.w}, {self.h})"


@dataclass(frozen=True)
class Caption:
    text: str
    confidence: float
    box: Optional[BoundingBox] = None


@dataclass(frozen=True)
class Tag:
    name: str
    confidence: float


@dataclass(frozen=True)
class DetectedObject:
    box: BoundingBox
    tags: tuple[Tag, ...]

    @property
    def name(self) -> str:
        return self.tags[0].name if self.tags else ""


@dataclass(frozen=True)
class DetectedPerson:
    box: BoundingBox
    confidence: float


@dataclass(frozen=True)
class ImageAnalysis:
    caption: Optional[Caption] = None
    dense_captions: tuple[Caption, ...] = field(default_factory=tuple)
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    objects: tuple[DetectedObject, ...] = field(default_factory=tuple)
    people: tuple[DetectedPerson, ...] = field(default_factory=tuple)


class VisionClient(ABC):
    @abstractmethod
    async def analyze(self, image_bytes: bytes) -> ImageAnalysis:
        """Analyze image bytes and return captions, tags and detections. Raises on failure."""
        ...
