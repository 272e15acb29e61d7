"""
Frame format conversion before inference.
"""

import cv2


class FrameProcessor:
    """Converts captured BGR frames into the RGB frames the models expect."""

    def __init__(self, mirror=True):
        """Initialize frame processor; mirror flips frames horizontally (selfie view)."""
        self.mirror = mirror

    def prepare_display(self, frame):
        """BGR frame as it should be shown, mirrored if configured."""
        return cv2.flip(frame, 1) if self.mirror else frame

    def to_model_input(self, display_frame):
        """RGB copy of a display frame for the models."""
        return cv2.cvtColor(display_frame, cv2.COLOR_BGR2RGB)
