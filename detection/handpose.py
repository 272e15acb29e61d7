"""
High level hand pose estimation built on the tracking pipeline.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from config.settings import Settings
from tracking.hand_pipeline import HandPipeline
from .body_pose import MoveNetBodyPose
from .landmark_model import HandLandmarkModel
from .model_loader import ModelLoader
from .palm_detector import PalmDetector

logger = logging.getLogger(__name__)

MESH_ANNOTATIONS = {
    'thumb': [1, 2, 3, 4],
    'index_finger': [5, 6, 7, 8],
    'middle_finger': [9, 10, 11, 12],
    'ring_finger': [13, 14, 15, 16],
    'pinky': [17, 18, 19, 20],
    'palm_base': [0],
}


@dataclass(frozen=True)
class Hand:
    """One detected hand in image pixels."""

    confidence: float
    box: Tuple[float, float, float, float]  # x, y, width, height clamped to the image
    box_raw: Tuple[float, float, float, float]  # same, normalized to image size
    landmarks: List[Tuple[float, float, float]]
    annotations: Dict[str, List[Tuple[float, float, float]]]


class HandPose:
    """Wraps HandPipeline and adds image-relative boxes and per-finger landmark groups."""

    def __init__(self, pipeline):
        self.pipeline = pipeline

    async def estimate_hands(self, image, config):
        """Estimate hands in one RGB frame."""
        predictions = await self.pipeline.estimate_hands(image, config)
        height, width = image.shape[:2]

        hands = []
        for prediction in predictions:
            annotations = {
                key: [prediction.landmarks[index] for index in indices]
                for key, indices in MESH_ANNOTATIONS.items()
            }
            top_left = prediction.bounding_box.top_left
            bottom_right = prediction.bounding_box.bottom_right
            x = max(0.0, top_left[0])
            y = max(0.0, top_left[1])
            box = (
                x,
                y,
                max(0.0, min(width, bottom_right[0]) - x),
                max(0.0, min(height, bottom_right[1]) - y),
            )
            box_raw = (
                top_left[0] / width,
                top_left[1] / height,
                (bottom_right[0] - top_left[0]) / width,
                (bottom_right[1] - top_left[1]) / height,
            )
            hands.append(Hand(
                confidence=prediction.confidence,
                box=box,
                box_raw=box_raw,
                landmarks=prediction.landmarks,
                annotations=annotations,
            ))
        return hands

    def reset(self):
        self.pipeline.reset()


def load_handpose(palm_model_path=Settings.DEFAULT_PALM_MODEL_PATH,
                  landmark_model_path=Settings.DEFAULT_LANDMARK_MODEL_PATH):
    """Load both TFLite models and assemble a HandPose.

    Raises FileNotFoundError for a missing model and RuntimeError if a model fails to load.
    """
    palm_loader = ModelLoader(palm_model_path)
    if not palm_loader.load_model():
        raise RuntimeError(f"Failed to load palm detection model: {palm_model_path}")

    landmark_loader = ModelLoader(landmark_model_path)
    if not landmark_loader.load_model():
        raise RuntimeError(f"Failed to load hand landmark model: {landmark_model_path}")

    palm_detector = PalmDetector(palm_loader, input_size=palm_loader.get_input_shape()[0])
    landmark_model = HandLandmarkModel(landmark_loader)
    pipeline = HandPipeline(palm_detector, landmark_model, input_size=landmark_loader.get_input_shape()[0])
    logger.info("Hand pose models loaded")
    return HandPose(pipeline)


def load_body_pose(model_path=Settings.DEFAULT_BODY_MODEL_PATH):
    """Load a MoveNet model and wrap it in MoveNetBodyPose."""
    loader = ModelLoader(model_path)
    if not loader.load_model():
        raise RuntimeError(f"Failed to load body pose model: {model_path}")
    return MoveNetBodyPose(loader)
