"""
Tracking module for hand regions across frames.
"""

from .hand_tracker import RegionTracker
from .hand_pipeline import HandPipeline
from .types import BoundingBox, HandPrediction

__all__ = ['RegionTracker', 'HandPipeline', 'BoundingBox', 'HandPrediction']
