"""
Palm detection: finds hand regions in a full frame.
"""

import logging

import cv2
import numpy as np

from utils.box import make_box, scale_box_coordinates
from .anchors import generate_anchors

logger = logging.getLogger(__name__)

NUM_PALM_KEYPOINTS = 7


def _sigmoid(values):
    return 1.0 / (1.0 + np.exp(-np.clip(values, -100.0, 100.0)))


class PalmDetector:
    """Decodes the SSD-style palm detection model into boxes with palm keypoints."""

    def __init__(self, model_loader, input_size=256, anchors=None):
        """Initialize palm detector.

        Args:
            model_loader: loaded ModelLoader for the palm detection model
            input_size: square model input side in pixels
            anchors: (N, 2) normalized anchor centers, generated when omitted
        """
        self.model_loader = model_loader
        self.input_size = input_size
        self.anchors = anchors if anchors is not None else generate_anchors(input_size)

    def prepare_input(self, image):
        """Resize an RGB frame to the model input and scale to [-1, 1]."""
        resized = cv2.resize(image, (self.input_size, self.input_size), interpolation=cv2.INTER_LINEAR)
        input_frame = np.float32(resized) / 127.5 - 1.0
        return np.expand_dims(input_frame, axis=0)

    def split_outputs(self, outputs):
        """Return (raw_scores, raw_boxes, raw_keypoints) from the model outputs.

        Handles both a single fused [1, N, 19] output and the separate
        regressors [1, N, 18] / classificators [1, N, 1] layout.
        """
        regressors = None
        scores = None
        for output in outputs:
            output = np.asarray(output)
            width = output.shape[-1]
            if width == 5 + 2 * NUM_PALM_KEYPOINTS:
                flat = output.reshape(-1, width)
                scores, regressors = flat[:, 0], flat[:, 1:]
            elif width == 4 + 2 * NUM_PALM_KEYPOINTS:
                regressors = output.reshape(-1, width)
            elif width == 1:
                scores = output.reshape(-1)

        if regressors is None or scores is None:
            raise ValueError(f"Unexpected palm model outputs: {[np.shape(o) for o in outputs]}")
        return scores, regressors[:, :4], regressors[:, 4:]

    def normalize_boxes(self, raw_boxes):
        """Decode anchor-relative boxes into (x1, y1, x2, y2) in input pixels."""
        box_offsets = raw_boxes[:, 0:2]
        box_sizes = raw_boxes[:, 2:4]
        box_center_points = box_offsets / self.input_size + self.anchors
        half_box_sizes = box_sizes / (2 * self.input_size)
        start_points = (box_center_points - half_box_sizes) * self.input_size
        end_points = (box_center_points + half_box_sizes) * self.input_size
        return np.concatenate([start_points, end_points], axis=1)

    def normalize_landmarks(self, raw_palm_landmarks, index):
        """Decode the palm keypoints of one anchor into input pixels."""
        landmarks = np.asarray(raw_palm_landmarks, dtype=np.float32).reshape(-1, 2)
        return (landmarks / self.input_size + self.anchors[index]) * self.input_size

    def get_boxes(self, input_tensor, config):
        """Run the model and return [(box, palm_landmarks, score)] in input pixels."""
        outputs = self.model_loader.invoke(input_tensor)
        raw_scores, raw_boxes, raw_keypoints = self.split_outputs(outputs)
        if len(raw_scores) != len(self.anchors):
            raise ValueError(f"Palm model returned {len(raw_scores)} candidates for {len(self.anchors)} anchors")

        scores = _sigmoid(raw_scores)
        boxes = self.normalize_boxes(raw_boxes)

        nms_boxes = [[float(b[0]), float(b[1]), float(b[2] - b[0]), float(b[3] - b[1])] for b in boxes]
        selected = cv2.dnn.NMSBoxes(nms_boxes, scores.astype(float).tolist(), config.score_threshold,
                                    config.iou_threshold, top_k=config.max_hands)
        selected = np.asarray(selected, dtype=np.int64).reshape(-1)

        candidates = []
        for index in selected[:config.max_hands]:
            score = float(scores[index])
            if score < config.min_confidence:
                continue
            palm_landmarks = self.normalize_landmarks(raw_keypoints[index], index)
            candidates.append((boxes[index], palm_landmarks, score))
        return candidates

    async def estimate_hand_bounds(self, image, config):
        """Find palm boxes in an RGB frame, returned in frame pixels."""
        input_height, input_width = image.shape[:2]
        input_tensor = self.prepare_input(image)
        candidates = self.get_boxes(input_tensor, config)
        del input_tensor

        factor = (input_width / self.input_size, input_height / self.input_size)
        hands = []
        for box, palm_landmarks, score in candidates:
            palm_box = make_box(box[:2], box[2:4], palm_landmarks, score)
            hands.append(scale_box_coordinates(palm_box, factor))

        logger.debug("Palm detector found %d hands", len(hands))
        return hands
