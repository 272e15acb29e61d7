"""
Per-frame hand landmark pipeline.

Runs the palm detector only when the tracked regions need refreshing, otherwise
reuses the boxes derived from the previous frame's landmarks.
"""

import logging

import cv2
import numpy as np

from utils.box import cut_box_from_image_and_resize, get_box_center
from utils.math_utils import build_rotation_matrix, compute_rotation
from .coordinate_transform import (
    PALM_LANDMARKS_INDEX_OF_MIDDLE_FINGER_BASE,
    PALM_LANDMARKS_INDEX_OF_PALM_BASE,
    get_box_for_hand_landmarks,
    get_box_for_palm_landmarks,
    transform_raw_coords,
)
from .hand_tracker import RegionTracker
from .types import BoundingBox, HandPrediction

logger = logging.getLogger(__name__)


def rotate_image(image, rotation_matrix):
    """Warp an HxWxC image with the 3x3 transform that maps source to rotated pixels."""
    height, width = image.shape[:2]
    return cv2.warpAffine(
        image, np.asarray(rotation_matrix, dtype=np.float64)[:2], (width, height),
        flags=cv2.INTER_LINEAR, borderMode=cv2.BORDER_CONSTANT, borderValue=0
    )


class HandPipeline:
    """Palm detection + hand landmark estimation with region tracking between frames."""

    def __init__(self, box_detector, mesh_detector, input_size=256, tracker=None):
        """Initialize with a palm detector and a hand landmark predictor.

        Args:
            box_detector: object with `async estimate_hand_bounds(image, config) -> list[Box]`
            mesh_detector: object with `predict(image) -> (confidence, flat_keypoints)`
            input_size: side of the square crop expected by the landmark model
        """
        self.box_detector = box_detector
        self.mesh_detector = mesh_detector
        self.input_size = input_size
        self.tracker = tracker if tracker is not None else RegionTracker()

    async def estimate_hands(self, image, config):
        """Estimate hand landmarks for one RGB frame (HxWx3 array)."""
        tracker = self.tracker
        detector_ran = tracker.should_run_detector(config.skip_frames)

        predictions = None
        if detector_ran:
            predictions = await self.box_detector.estimate_hand_bounds(image, config)

        use_fresh_boxes, has_regions = tracker.reconcile(predictions, config, detector_ran)
        if not has_regions:
            return []

        hands = []
        for index, current_box in enumerate(list(tracker.regions)):
            if current_box is None:
                continue
            hand = self._estimate_hand(image, index, current_box, use_fresh_boxes, config)
            if hand is not None:
                hands.append(hand)

        tracker.finish_frame(len(hands))
        return hands

    def _estimate_hand(self, image, index, current_box, use_fresh_boxes, config):
        palm_landmarks = current_box.palm_landmarks
        if palm_landmarks:
            angle = compute_rotation(palm_landmarks[PALM_LANDMARKS_INDEX_OF_PALM_BASE],
                                     palm_landmarks[PALM_LANDMARKS_INDEX_OF_MIDDLE_FINGER_BASE])
        else:
            angle = 0.0

        palm_center = get_box_center(current_box)
        rotation_matrix = build_rotation_matrix(-angle, palm_center)
        if use_fresh_boxes and palm_landmarks:
            new_box = get_box_for_palm_landmarks(palm_landmarks, rotation_matrix)
        else:
            new_box = current_box

        rotated_image = rotate_image(image, rotation_matrix)
        cropped_input = cut_box_from_image_and_resize(new_box, rotated_image, (self.input_size, self.input_size))
        del rotated_image
        hand_image = cropped_input / 255.0
        del cropped_input

        confidence, keypoints = self.mesh_detector.predict(hand_image)
        del hand_image
        confidence = float(np.asarray(confidence).reshape(-1)[0])

        if confidence < config.min_confidence:
            logger.debug("Dropping hand %d, confidence %.3f below %.3f", index, confidence, config.min_confidence)
            return None

        raw_coords = np.asarray(keypoints, dtype=np.float64).reshape(-1, 3).tolist()
        coords = transform_raw_coords(raw_coords, new_box, angle, rotation_matrix, self.input_size)
        next_bounding_box = get_box_for_hand_landmarks(coords)
        self.tracker.update_region(index, next_bounding_box)

        return HandPrediction(
            landmarks=coords,
            confidence=confidence,
            bounding_box=BoundingBox(
                top_left=next_bounding_box.start_point,
                bottom_right=next_bounding_box.end_point,
            ),
        )

    def reset(self):
        """Forget all tracked regions."""
        self.tracker.reset()
