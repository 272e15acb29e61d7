from dataclasses import dataclass
from typing import List, Tuple

Point2 = Tuple[float, float]
Landmark = Tuple[float, float, float]  # (x, y, depth)


@dataclass(frozen=True)
class BoundingBox:
    top_left: Point2
    bottom_right: Point2


@dataclass(frozen=True)
class HandPrediction:
    """Landmarks of one tracked hand in source image pixels."""

    landmarks: List[Landmark]  # length 21
    confidence: float
    bounding_box: BoundingBox
