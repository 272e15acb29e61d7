"""
Mathematical utilities for hand tracking.

Transform matrices are 3x3 homogeneous affine matrices stored as numpy arrays.
"""

import math
import numpy as np


def normalize_radians(angle):
    """Wrap an angle into the [-pi, pi) range."""
    return angle - 2 * math.pi * math.floor((angle + math.pi) / (2 * math.pi))


def compute_rotation(point1, point2):
    """Angle of the vector point1 -> point2 measured from the vertical axis.

    Used to rotate a hand so the palm base to middle finger base line points up.
    """
    radians = math.pi / 2 - math.atan2(-(point2[1] - point1[1]), point2[0] - point1[0])
    return normalize_radians(radians)


def build_translation_matrix(x, y):
    """Homogeneous translation by (x, y)."""
    return np.array([[1.0, 0.0, x], [0.0, 1.0, y], [0.0, 0.0, 1.0]])


def dot(v1, v2):
    """Dot product of two equal-length vectors."""
    return float(sum(a * b for a, b in zip(v1, v2)))


def multiply_transform_matrices(mat1, mat2):
    """Matrix product mat1 @ mat2 of two 3x3 transforms."""
    return np.asarray(mat1, dtype=np.float64) @ np.asarray(mat2, dtype=np.float64)


def build_rotation_matrix(rotation, center):
    """Rotation by `rotation` radians around `center`."""
    cos_a = math.cos(rotation)
    sin_a = math.sin(rotation)
    rotation_matrix = np.array([[cos_a, -sin_a, 0.0], [sin_a, cos_a, 0.0], [0.0, 0.0, 1.0]])
    translation_matrix = build_translation_matrix(center[0], center[1])
    translation_times_rotation = multiply_transform_matrices(translation_matrix, rotation_matrix)
    negative_translation_matrix = build_translation_matrix(-center[0], -center[1])
    return multiply_transform_matrices(translation_times_rotation, negative_translation_matrix)


def invert_transform_matrix(matrix):
    """Invert a rotation + translation transform.

    Only valid for rigid transforms; the rotation block is inverted by transposing it.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    rotation_component = matrix[:2, :2].T
    translation_component = matrix[:2, 2]
    inverted_translation = -rotation_component @ translation_component
    inverse = np.eye(3)
    inverse[:2, :2] = rotation_component
    inverse[:2, 2] = inverted_translation
    return inverse


def rotate_point(point, rotation_matrix):
    """Apply a transform to an (x, y) or homogeneous (x, y, 1) point."""
    homogeneous = (point[0], point[1], 1.0)
    return (dot(homogeneous, rotation_matrix[0]), dot(homogeneous, rotation_matrix[1]))
