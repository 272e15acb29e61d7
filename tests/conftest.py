import numpy as np
import pytest

from utils.box import make_box

# wrist, thumb base and thumb joint, finger bases, in a 256 pixel crop
PALM_LANDMARKS = [(30, 45), (20, 30), (30, 25), (35, 28), (40, 30), (22, 40), (18, 35)]


def synthetic_hand_keypoints():
    """Upright open hand in landmark model space, depth equal to the landmark index."""
    keypoints = [(128.0, 210.0, 0.0)]
    for finger in range(5):
        base_x = 80.0 + finger * 24.0
        for joint in range(4):
            index = 1 + finger * 4 + joint
            keypoints.append((base_x, 145.0 - joint * 25.0, float(index)))
    return np.array(keypoints, dtype=np.float32).reshape(-1)


class FakeDetector:
    """Palm detector returning canned boxes and recording which frames called it."""

    def __init__(self, boxes=None, error=None):
        self.boxes = boxes if boxes is not None else []
        self.error = error
        self.calls = 0

    async def estimate_hand_bounds(self, image, config):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.boxes)


class FakePredictor:
    def __init__(self, confidence=0.9, keypoints=None):
        self.confidence = confidence
        self.keypoints = keypoints if keypoints is not None else synthetic_hand_keypoints()
        self.inputs = []

    def predict(self, hand_image):
        self.inputs.append(hand_image.shape)
        return np.array([self.confidence], dtype=np.float32), self.keypoints


class FakeLoader:
    """Stands in for ModelLoader with fixed outputs."""

    def __init__(self, outputs, input_shape=(256, 256), dtype=np.float32):
        self.outputs = outputs
        self.input_shape = input_shape
        self.dtype = dtype
        self.inputs = []

    def get_input_shape(self):
        return self.input_shape

    def get_input_dtype(self):
        return self.dtype

    def invoke(self, input_tensor):
        self.inputs.append(input_tensor)
        return self.outputs


@pytest.fixture
def palm_box():
    return make_box((10, 10), (50, 50), PALM_LANDMARKS, 0.95)


@pytest.fixture
def frame():
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    image[20:60, 15:45] = 200
    return image
