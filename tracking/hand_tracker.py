"""
Region-of-interest tracking for hands across frames.
"""

import logging

from utils.box import iou

logger = logging.getLogger(__name__)

# New box replaces a tracked one only when they overlap less than this
UPDATE_REGION_OF_INTEREST_IOU_THRESHOLD = 0.8


class RegionTracker:
    """Tracks one region of interest per hand and decides when to re-run the palm detector.

    Slots live in an ordered list. A slot index refers to the same hand until the
    next time the detector result replaces the whole list.
    """

    def __init__(self, iou_threshold=UPDATE_REGION_OF_INTEREST_IOU_THRESHOLD):
        """Initialize an empty tracker."""
        self.iou_threshold = iou_threshold
        self.regions = []
        self.runs_without_detector = 0
        self.detected_hands = 0

    def needs_fresh_boxes(self):
        """True when the tracked slots cannot be trusted without a detector pass."""
        return self.detected_hands == 0 or self.detected_hands != len(self.regions)

    def should_run_detector(self, skip_frames):
        """Decide whether this frame calls the palm detector."""
        return self.needs_fresh_boxes() or self.runs_without_detector >= skip_frames

    def reconcile(self, predictions, config, detector_ran=True):
        """Apply a detector result to the tracked slots.

        Returns (use_fresh_boxes, has_regions). has_regions is False when the
        detector found nothing, in which case all state has been cleared.
        """
        use_fresh_boxes = self.needs_fresh_boxes()

        if not detector_ran:
            self.runs_without_detector += 1
            return use_fresh_boxes, bool(self.regions)

        predictions = list(predictions or [])[:config.max_hands]
        self.runs_without_detector = 0

        if not predictions:
            if self.regions:
                logger.debug("Palm detector found no hands, clearing %d regions", len(self.regions))
            self.reset()
            return True, False

        # A changed hand count replaces the slots, except in single hand mode
        if config.max_hands > 1 and len(predictions) != self.detected_hands:
            use_fresh_boxes = True

        if use_fresh_boxes:
            logger.debug("Using %d fresh palm boxes", len(predictions))
            self.regions = predictions

        return use_fresh_boxes, True

    def update_region(self, index, new_box):
        """Store the box for the next frame, keeping the previous one if it barely moved."""
        previous_box = self.regions[index] if index < len(self.regions) else None
        overlap = iou(new_box, previous_box) if previous_box is not None else 0.0

        if overlap > self.iou_threshold:
            return previous_box

        while len(self.regions) <= index:
            self.regions.append(None)
        self.regions[index] = new_box
        return new_box

    def finish_frame(self, hand_count):
        """Record how many hands produced output this frame."""
        self.detected_hands = hand_count

    def reset(self):
        """Reset tracker state."""
        self.regions = []
        self.runs_without_detector = 0
        self.detected_hands = 0
