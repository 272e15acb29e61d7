"""
Camera module for handling frame capture and preprocessing.
"""

from .video_capture import VideoCapture
from .frame_processor import FrameProcessor

__all__ = ['VideoCapture', 'FrameProcessor']
