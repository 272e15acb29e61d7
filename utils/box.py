"""
Axis-aligned boxes used to track hand regions between frames.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

import cv2
import numpy as np

Point2 = Tuple[float, float]


@dataclass(frozen=True)
class Box:
    """Region of interest in image pixels, start_point <= end_point componentwise."""

    start_point: Point2
    end_point: Point2
    palm_landmarks: Optional[Tuple[Point2, ...]] = None
    confidence: Optional[float] = None

    @property
    def size(self):
        return get_box_size(self)

    @property
    def center(self):
        return get_box_center(self)


def make_box(start_point, end_point, palm_landmarks=None, confidence=None):
    """Build a Box from any sequence types, normalising to float tuples."""
    if palm_landmarks is not None:
        palm_landmarks = tuple((float(p[0]), float(p[1])) for p in palm_landmarks)
    return Box(
        start_point=(float(start_point[0]), float(start_point[1])),
        end_point=(float(end_point[0]), float(end_point[1])),
        palm_landmarks=palm_landmarks,
        confidence=None if confidence is None else float(confidence),
    )


def get_box_size(box):
    return (abs(box.end_point[0] - box.start_point[0]), abs(box.end_point[1] - box.start_point[1]))


def get_box_center(box):
    return (
        box.start_point[0] + (box.end_point[0] - box.start_point[0]) / 2,
        box.start_point[1] + (box.end_point[1] - box.start_point[1]) / 2,
    )


def _with_corners(box, start_point, end_point):
    return replace(box, start_point=(float(start_point[0]), float(start_point[1])),
                   end_point=(float(end_point[0]), float(end_point[1])))


def scale_box_coordinates(box, factor):
    """Scale corners and palm landmarks by a per-axis (fx, fy) factor."""
    start_point = (box.start_point[0] * factor[0], box.start_point[1] * factor[1])
    end_point = (box.end_point[0] * factor[0], box.end_point[1] * factor[1])
    palm_landmarks = box.palm_landmarks
    if palm_landmarks is not None:
        palm_landmarks = tuple((p[0] * factor[0], p[1] * factor[1]) for p in palm_landmarks)
    return make_box(start_point, end_point, palm_landmarks, box.confidence)


def enlarge_box(box, factor=1.5):
    """Scale width and height by `factor` around the box center."""
    center = get_box_center(box)
    size = get_box_size(box)
    half_size = (factor * size[0] / 2, factor * size[1] / 2)
    start_point = (center[0] - half_size[0], center[1] - half_size[1])
    end_point = (center[0] + half_size[0], center[1] + half_size[1])
    return _with_corners(box, start_point, end_point)


def squarify_box(box):
    """Grow the shorter side so width equals height, keeping the center."""
    center = get_box_center(box)
    half_size = max(get_box_size(box)) / 2
    start_point = (center[0] - half_size, center[1] - half_size)
    end_point = (center[0] + half_size, center[1] + half_size)
    return _with_corners(box, start_point, end_point)


def shift_box(box, shift_factor):
    """Move the box by shift_factor expressed as fractions of its own size."""
    size = get_box_size(box)
    shift_vector = (size[0] * shift_factor[0], size[1] * shift_factor[1])
    start_point = (box.start_point[0] + shift_vector[0], box.start_point[1] + shift_vector[1])
    end_point = (box.end_point[0] + shift_vector[0], box.end_point[1] + shift_vector[1])
    return _with_corners(box, start_point, end_point)


def calculate_landmarks_bounding_box(landmarks):
    """Tightest box around the x/y of a set of landmarks."""
    xs = [p[0] for p in landmarks]
    ys = [p[1] for p in landmarks]
    return make_box((min(xs), min(ys)), (max(xs), max(ys)))


def box_area(box):
    width = box.end_point[0] - box.start_point[0]
    height = box.end_point[1] - box.start_point[1]
    if width <= 0 or height <= 0:
        return 0.0
    return width * height


def iou(box_a, box_b):
    """Intersection over union of two boxes.

    Returns 0 when the boxes do not overlap or either has no area.
    """
    area_a = box_area(box_a)
    area_b = box_area(box_b)
    if area_a <= 0 or area_b <= 0:
        return 0.0

    x_start_max = max(box_a.start_point[0], box_b.start_point[0])
    y_start_max = max(box_a.start_point[1], box_b.start_point[1])
    x_end_min = min(box_a.end_point[0], box_b.end_point[0])
    y_end_min = min(box_a.end_point[1], box_b.end_point[1])
    if x_end_min <= x_start_max or y_end_min <= y_start_max:
        return 0.0

    intersection = (x_end_min - x_start_max) * (y_end_min - y_start_max)
    return intersection / (area_a + area_b - intersection)


def cut_box_from_image_and_resize(box, image, crop_size):
    """Crop `box` out of an HxWxC image and resample it to crop_size (height, width).

    Parts of the box outside the image are filled with zeros.
    """
    crop_height, crop_width = crop_size
    box_width = box.end_point[0] - box.start_point[0]
    box_height = box.end_point[1] - box.start_point[1]
    if box_width <= 0 or box_height <= 0:
        return np.zeros((crop_height, crop_width) + image.shape[2:], dtype=np.float32)

    scale_x = crop_width / box_width
    scale_y = crop_height / box_height
    matrix = np.array([
        [scale_x, 0.0, -box.start_point[0] * scale_x],
        [0.0, scale_y, -box.start_point[1] * scale_y],
    ], dtype=np.float64)
    cropped = cv2.warpAffine(
        image, matrix, (crop_width, crop_height),
        flags=cv2.INTER_LINEAR, borderMode=cv2.BORDER_CONSTANT, borderValue=0
    )
    return cropped.astype(np.float32)
