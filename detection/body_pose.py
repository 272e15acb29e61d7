"""
MoveNet single-person body pose estimation.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import cv2
import numpy as np

logger = logging.getLogger(__name__)

BODY_PARTS = [
    'nose', 'leftEye', 'rightEye', 'leftEar', 'rightEar', 'leftShoulder', 'rightShoulder',
    'leftElbow', 'rightElbow', 'leftWrist', 'rightWrist', 'leftHip', 'rightHip',
    'leftKnee', 'rightKnee', 'leftAnkle', 'rightAnkle',
]


@dataclass(frozen=True)
class BodyKeypoint:
    part: str
    score: float
    position: Tuple[int, int]  # image pixels
    position_raw: Tuple[float, float]  # normalized to 0..1


@dataclass(frozen=True)
class BodyPrediction:
    id: int
    score: float
    box: Tuple[float, float, float, float]  # x, y, width, height in pixels
    box_raw: Tuple[float, float, float, float]  # same, normalized
    keypoints: List[BodyKeypoint] = field(default_factory=list)


def _bounds(xs, ys):
    if not xs:
        return (0, 0, 0, 0)
    return (min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


class MoveNetBodyPose:
    """Body pose predictor that reuses its last result for up to skip_frames frames.

    The cache belongs to the instance, so each video stream should use its own.
    """

    def __init__(self, model_loader):
        """Initialize with a loaded ModelLoader for a MoveNet single-pose model."""
        self.model_loader = model_loader
        self.keypoints = []
        self.box = (0, 0, 0, 0)
        self.box_raw = (0.0, 0.0, 0.0, 0.0)
        self.score = 0.0
        self.skipped = float('inf')

    def _cached(self):
        return [BodyPrediction(id=0, score=self.score, box=self.box, box_raw=self.box_raw,
                               keypoints=list(self.keypoints))]

    def prepare_input(self, image):
        """Resize an RGB frame to the model input size in the model's dtype."""
        input_height, input_width = self.model_loader.get_input_shape()
        resized = cv2.resize(image, (input_width, input_height), interpolation=cv2.INTER_LINEAR)
        return np.expand_dims(resized.astype(self.model_loader.get_input_dtype()), axis=0)

    async def predict(self, image, config, allow_skip=True):
        """Estimate body keypoints for one RGB frame.

        allow_skip=False forces inference, e.g. after a scene change.
        """
        if allow_skip and self.skipped < config.skip_frames and self.keypoints:
            self.skipped += 1
            return self._cached()
        self.skipped = 0

        image_height, image_width = image.shape[:2]
        input_tensor = self.prepare_input(image)
        outputs = self.model_loader.invoke(input_tensor)
        del input_tensor

        # [1, 1, 17, 3] of (y, x, score)
        kpt = np.asarray(outputs[0]).reshape(-1, 3)
        keypoints = []
        for part_id, (y, x, score) in enumerate(kpt[:len(BODY_PARTS)]):
            if score <= config.min_confidence:
                continue
            keypoints.append(BodyKeypoint(
                part=BODY_PARTS[part_id],
                score=round(float(score), 2),
                position=(int(round(image_width * float(x))), int(round(image_height * float(y)))),
                position_raw=(float(x), float(y)),
            ))

        self.keypoints = keypoints
        self.score = max((k.score for k in keypoints), default=0.0)
        self.box = _bounds([k.position[0] for k in keypoints], [k.position[1] for k in keypoints])
        self.box_raw = _bounds([k.position_raw[0] for k in keypoints], [k.position_raw[1] for k in keypoints])
        logger.debug("Body pose: %d keypoints, score %.2f", len(keypoints), self.score)
        return self._cached()

    def reset(self):
        """Drop the cached result."""
        self.keypoints = []
        self.box = (0, 0, 0, 0)
        self.box_raw = (0.0, 0.0, 0.0, 0.0)
        self.score = 0.0
        self.skipped = float('inf')
