"""
Mapping between landmark model space and source image pixels.
"""

from utils import box as box_utils
from utils.math_utils import build_rotation_matrix, dot, invert_transform_matrix, rotate_point

PALM_BOX_SHIFT_VECTOR = (0, -0.4)
PALM_BOX_ENLARGE_FACTOR = 3
HAND_BOX_SHIFT_VECTOR = (0, -0.1)  # move detected hand box up to ease landmark detection
HAND_BOX_ENLARGE_FACTOR = 1.65
# wrist, finger bases, thumb base and thumb joint
PALM_LANDMARK_IDS = (0, 5, 9, 13, 17, 1, 2)
PALM_LANDMARKS_INDEX_OF_PALM_BASE = 0
PALM_LANDMARKS_INDEX_OF_MIDDLE_FINGER_BASE = 2


def get_box_for_palm_landmarks(palm_landmarks, rotation_matrix):
    """Square crop box around the palm, in the rotated image."""
    rotated_palm_landmarks = [rotate_point(coord, rotation_matrix) for coord in palm_landmarks]
    box_around_palm = box_utils.calculate_landmarks_bounding_box(rotated_palm_landmarks)
    box_around_palm = box_utils.shift_box(box_around_palm, PALM_BOX_SHIFT_VECTOR)
    box_around_palm = box_utils.squarify_box(box_around_palm)
    return box_utils.enlarge_box(box_around_palm, PALM_BOX_ENLARGE_FACTOR)


def get_box_for_hand_landmarks(landmarks):
    """Box for the next frame derived from this frame's landmarks in image pixels."""
    bounding_box = box_utils.calculate_landmarks_bounding_box(landmarks)
    box_around_hand = box_utils.shift_box(bounding_box, HAND_BOX_SHIFT_VECTOR)
    box_around_hand = box_utils.squarify_box(box_around_hand)
    box_around_hand = box_utils.enlarge_box(box_around_hand, HAND_BOX_ENLARGE_FACTOR)
    palm_landmarks = [landmarks[i][:2] for i in PALM_LANDMARK_IDS]
    return box_utils.make_box(box_around_hand.start_point, box_around_hand.end_point, palm_landmarks)


def transform_raw_coords(raw_coords, box, angle, rotation_matrix, input_size):
    """Project model-space keypoints back into source image pixels.

    raw_coords are (x, y, z) rows in the input_size x input_size crop of `box`,
    which was cut from the image rotated by `rotation_matrix`. z is returned unchanged.
    """
    box_size = box_utils.get_box_size(box)
    scale_factor = (box_size[0] / input_size, box_size[1] / input_size)
    coords_scaled = [
        (scale_factor[0] * (coord[0] - input_size / 2),
         scale_factor[1] * (coord[1] - input_size / 2),
         coord[2])
        for coord in raw_coords
    ]

    coords_rotation_matrix = build_rotation_matrix(angle, (0, 0))
    coords_rotated = [rotate_point(coord, coords_rotation_matrix) + (coord[2],) for coord in coords_scaled]

    # The box center lives in the rotated image, undo that rotation for it too
    inverse_rotation_matrix = invert_transform_matrix(rotation_matrix)
    box_center = box_utils.get_box_center(box) + (1,)
    original_box_center = (
        dot(box_center, inverse_rotation_matrix[0]),
        dot(box_center, inverse_rotation_matrix[1]),
    )

    return [
        (coord[0] + original_box_center[0], coord[1] + original_box_center[1], coord[2])
        for coord in coords_rotated
    ]
