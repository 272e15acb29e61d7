"""
Camera and video file capture through OpenCV.
"""

import logging

import cv2

logger = logging.getLogger(__name__)


class VideoCapture:
    """Thin wrapper around cv2.VideoCapture for a camera index or a video path."""

    def __init__(self, source, width=None, height=None, fps=None):
        """Open the source; a numeric string is treated as a camera index."""
        self.source = int(source) if str(source).isdigit() else source
        self.capture = cv2.VideoCapture(self.source)
        if not self.capture.isOpened():
            raise RuntimeError(f"Could not open video source: {source}")

        if isinstance(self.source, int):
            if width:
                self.capture.set(cv2.CAP_PROP_FRAME_WIDTH, width)
            if height:
                self.capture.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
            if fps:
                self.capture.set(cv2.CAP_PROP_FPS, fps)
        logger.info("Opened video source %s", source)

    def read(self):
        """Read a frame, same contract as cv2.VideoCapture.read()."""
        return self.capture.read()

    def release(self):
        """Release capture resources."""
        self.capture.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
