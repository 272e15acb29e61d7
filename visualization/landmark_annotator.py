"""
Landmark annotation for hand and body results.
"""

from utils.math_utils import compute_rotation
from . import primitives
from .primitives import DrawOptions

PALM_BASE = 0
MIDDLE_FINGER_BASE = 9

BODY_CONNECTIONS = [
    ('leftShoulder', 'rightShoulder'), ('leftShoulder', 'leftElbow'), ('leftElbow', 'leftWrist'),
    ('rightShoulder', 'rightElbow'), ('rightElbow', 'rightWrist'),
    ('leftShoulder', 'leftHip'), ('rightShoulder', 'rightHip'), ('leftHip', 'rightHip'),
    ('leftHip', 'leftKnee'), ('leftKnee', 'leftAnkle'), ('rightHip', 'rightKnee'), ('rightKnee', 'rightAnkle'),
    ('nose', 'leftEye'), ('nose', 'rightEye'), ('leftEye', 'leftEar'), ('rightEye', 'rightEar'),
]

FINGERS = ('thumb', 'index_finger', 'middle_finger', 'ring_finger', 'pinky')


class LandmarkAnnotator:
    """Draws detection results on BGR frames."""

    def __init__(self, options=None):
        self.options = options if options is not None else DrawOptions()

    def draw_hands(self, frame, hands, options=None):
        """Draw box, landmarks and per-finger curves for each Hand."""
        options = options or self.options
        for hand in hands:
            if options.draw_boxes:
                x, y, width, height = hand.box
                primitives.rect(frame, x, y, width, height, options)
                if options.draw_labels:
                    primitives.label(frame, f"hand {hand.confidence:.2f}", x + 3, y + 15, options)

            if options.draw_points:
                for landmark in hand.landmarks:
                    z = -landmark[2] if len(landmark) > 2 else 0
                    primitives.point(frame, landmark[0], landmark[1], z, options)

            if options.draw_polygons:
                palm_base = hand.annotations.get('palm_base', [])
                for finger in FINGERS:
                    points = palm_base + hand.annotations.get(finger, [])
                    primitives.curves(frame, points, options.copy(use_depth=False))

            if options.draw_direction and len(hand.landmarks) > MIDDLE_FINGER_BASE:
                # palm base to middle finger base, 0 degrees when the hand points up
                wrist = hand.landmarks[PALM_BASE]
                middle = hand.landmarks[MIDDLE_FINGER_BASE]
                primitives.arrow(frame, wrist, middle, options)
                if options.draw_labels:
                    angle = primitives.rad2deg(compute_rotation(wrist, middle))
                    primitives.label(frame, f"{angle} deg", wrist[0] + 4, wrist[1] + 16, options)

            if options.draw_labels:
                for finger in FINGERS:
                    tip = hand.annotations.get(finger)
                    if tip:
                        primitives.label(frame, finger.split('_')[0], tip[-1][0] + 4, tip[-1][1] + 4, options)
        return frame

    def draw_bodies(self, frame, bodies, options=None):
        """Draw keypoints, skeleton and box for each body prediction."""
        options = options or self.options
        for body in bodies:
            if not body.keypoints:
                continue
            positions = {k.part: k.position for k in body.keypoints}

            if options.draw_boxes:
                x, y, width, height = body.box
                primitives.rect(frame, x, y, width, height, options)
                if options.draw_labels:
                    primitives.label(frame, f"body {body.score:.2f}", x + 3, y + 15, options)

            if options.draw_polygons:
                for start, end in BODY_CONNECTIONS:
                    if start in positions and end in positions:
                        primitives.lines(frame, [positions[start], positions[end]], options)

            if options.draw_points:
                for keypoint in body.keypoints:
                    primitives.point(frame, keypoint.position[0], keypoint.position[1], 0, options)
        return frame
