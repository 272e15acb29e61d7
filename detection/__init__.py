"""
Hand and body detection models.
"""

from .model_loader import ModelLoader
from .palm_detector import PalmDetector
from .landmark_model import HandLandmarkModel
from .body_pose import MoveNetBodyPose
from .handpose import Hand, HandPose, load_handpose, load_body_pose

__all__ = ['ModelLoader', 'PalmDetector', 'HandLandmarkModel', 'MoveNetBodyPose',
           'Hand', 'HandPose', 'load_handpose', 'load_body_pose']
