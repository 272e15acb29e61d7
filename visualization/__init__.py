"""
Visualization module for hand tracking application.
"""

from .primitives import DrawOptions
from .landmark_annotator import LandmarkAnnotator
from .status_display import StatusDisplay

__all__ = ['DrawOptions', 'LandmarkAnnotator', 'StatusDisplay']
