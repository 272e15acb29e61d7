import asyncio

import numpy as np
import pytest

from config.settings import BodyConfig
from detection.body_pose import BODY_PARTS, MoveNetBodyPose
from detection.landmark_model import HandLandmarkModel
from detection.model_loader import ModelLoader

from conftest import FakeLoader


class FakeInterpreter:
    def __init__(self, outputs):
        self.outputs = outputs
        self.tensors = {}
        self.invocations = 0

    def get_input_details(self):
        return [{'index': 0, 'shape': np.array([1, 192, 160, 3]), 'dtype': np.float32}]

    def get_output_details(self):
        return [{'index': 10 + i} for i in range(len(self.outputs))]

    def set_tensor(self, index, value):
        self.tensors[index] = value

    def invoke(self):
        self.invocations += 1

    def get_tensor(self, index):
        return self.outputs[index - 10]


def test_model_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ModelLoader(str(tmp_path / "missing.tflite")).load_model()


def test_model_loader_requires_load():
    loader = ModelLoader("unused.tflite")
    with pytest.raises(RuntimeError):
        loader.get_input_shape()
    with pytest.raises(RuntimeError):
        loader.invoke(np.zeros((1, 4)))


def test_model_loader_invokes_interpreter():
    outputs = [np.ones((1, 63)), np.array([[0.7]])]
    interpreter = FakeInterpreter(outputs)
    loader = ModelLoader("unused.tflite", interpreter=interpreter)
    tensor = np.zeros((1, 192, 160, 3), dtype=np.float32)

    assert loader.get_input_shape() == (192, 160)
    result = loader.invoke(tensor)
    assert interpreter.invocations == 1
    assert interpreter.tensors[0] is tensor
    assert [r.shape for r in result] == [(1, 63), (1, 1)]


def test_landmark_model_picks_keypoints_and_hand_flag():
    keypoints = np.arange(63, dtype=np.float32).reshape(1, 63)
    loader = FakeLoader([keypoints, np.array([[0.8]]), np.array([[0.1]]), np.zeros((1, 63))])
    confidence, flat = HandLandmarkModel(loader).predict(np.zeros((256, 256, 3), dtype=np.float32))
    assert confidence == pytest.approx(0.8)
    np.testing.assert_array_equal(flat, keypoints.reshape(-1))
    assert loader.inputs[0].shape == (1, 256, 256, 3)


def test_landmark_model_rejects_unknown_outputs():
    loader = FakeLoader([np.zeros((1, 5))])
    with pytest.raises(ValueError):
        HandLandmarkModel(loader).predict(np.zeros((256, 256, 3), dtype=np.float32))


def movenet_output(score=0.9):
    kpt = np.zeros((1, 1, 17, 3), dtype=np.float32)
    for part_id in range(17):
        kpt[0, 0, part_id] = (0.1 + part_id * 0.04, 0.2 + part_id * 0.02, score)
    kpt[0, 0, 0, 2] = 0.1  # nose below threshold
    return [kpt]


def test_body_pose_filters_keypoints_and_builds_boxes():
    loader = FakeLoader(movenet_output(), input_shape=(192, 192), dtype=np.int32)
    model = MoveNetBodyPose(loader)
    image = np.zeros((200, 100, 3), dtype=np.uint8)

    bodies = asyncio.run(model.predict(image, BodyConfig(min_confidence=0.3)))

    assert len(bodies) == 1
    body = bodies[0]
    parts = [k.part for k in body.keypoints]
    assert 'nose' not in parts
    assert parts == BODY_PARTS[1:]
    assert body.score == pytest.approx(0.9)
    first = body.keypoints[0]
    assert first.position_raw == pytest.approx((0.22, 0.14))
    assert first.position == (22, 28)
    assert body.box_raw[0] == pytest.approx(0.22)
    assert loader.inputs[0].shape == (1, 192, 192, 3)
    assert loader.inputs[0].dtype == np.int32


def test_body_pose_reuses_result_while_skipping():
    loader = FakeLoader(movenet_output(), input_shape=(192, 192), dtype=np.int32)
    model = MoveNetBodyPose(loader)
    image = np.zeros((64, 64, 3), dtype=np.uint8)
    config = BodyConfig(skip_frames=2)

    results = [asyncio.run(model.predict(image, config)) for _ in range(4)]
    assert len(loader.inputs) == 2
    assert results[1][0].keypoints == results[0][0].keypoints

    asyncio.run(model.predict(image, config, allow_skip=False))
    assert len(loader.inputs) == 3


def test_body_pose_instances_do_not_share_cache():
    image = np.zeros((64, 64, 3), dtype=np.uint8)
    first = MoveNetBodyPose(FakeLoader(movenet_output(), input_shape=(32, 32), dtype=np.int32))
    second = MoveNetBodyPose(FakeLoader(movenet_output(score=0.0), input_shape=(32, 32), dtype=np.int32))

    asyncio.run(first.predict(image, BodyConfig()))
    bodies = asyncio.run(second.predict(image, BodyConfig()))
    assert bodies[0].keypoints == []
    assert bodies[0].score == 0.0
    assert first.keypoints


def test_body_pose_reset():
    loader = FakeLoader(movenet_output(), input_shape=(32, 32), dtype=np.int32)
    model = MoveNetBodyPose(loader)
    image = np.zeros((64, 64, 3), dtype=np.uint8)
    asyncio.run(model.predict(image, BodyConfig(skip_frames=5)))
    model.reset()
    asyncio.run(model.predict(image, BodyConfig(skip_frames=5)))
    assert len(loader.inputs) == 2
