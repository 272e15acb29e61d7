import numpy as np
import pytest

from camera.frame_processor import FrameProcessor
from detection.body_pose import BodyKeypoint, BodyPrediction
from detection.handpose import MESH_ANNOTATIONS, Hand
from visualization import primitives
from visualization.landmark_annotator import LandmarkAnnotator
from visualization.primitives import DrawOptions
from visualization.status_display import StatusDisplay


def blank():
    return np.zeros((120, 160, 3), dtype=np.uint8)


def make_hand():
    landmarks = [(40.0 + (i % 5) * 10, 30.0 + (i // 5) * 15, float(-i)) for i in range(21)]
    annotations = {k: [landmarks[i] for i in v] for k, v in MESH_ANNOTATIONS.items()}
    return Hand(confidence=0.9, box=(30, 20, 70, 80), box_raw=(0.2, 0.2, 0.4, 0.7),
                landmarks=landmarks, annotations=annotations)


def test_color_depth_is_bgr_and_clamped():
    assert primitives.color_depth(0) == (255, 127, 127)
    assert primitives.color_depth(100) == (255, 0, 255)


def test_rad2deg():
    assert primitives.rad2deg(np.pi) == 180


def test_options_copy_overrides_without_mutating():
    options = DrawOptions(line_width=3)
    other = options.copy(use_curves=True)
    assert other.use_curves and not options.use_curves
    assert other.line_width == 3


@pytest.mark.parametrize("use_curves", [False, True])
def test_shapes_draw_pixels(use_curves):
    options = DrawOptions(use_curves=use_curves)
    frame = blank()
    primitives.rect(frame, 10, 10, 50, 40, options)
    primitives.curves(frame, [(10, 100), (40, 80), (70, 100), (100, 80)], options)
    primitives.arrow(frame, (120, 10), (150, 40), options)
    assert frame.any()


def test_lines_need_two_points():
    frame = blank()
    primitives.lines(frame, [(5, 5)], DrawOptions())
    assert not frame.any()


def test_annotator_draws_hands_and_bodies():
    annotator = LandmarkAnnotator()
    frame = annotator.draw_hands(blank(), [make_hand()])
    assert frame.any()

    keypoints = [BodyKeypoint('leftShoulder', 0.9, (20, 20), (0.1, 0.2)),
                 BodyKeypoint('rightShoulder', 0.8, (80, 20), (0.5, 0.2))]
    body = BodyPrediction(id=0, score=0.9, box=(20, 20, 60, 0), box_raw=(0.1, 0.2, 0.4, 0.0),
                          keypoints=keypoints)
    frame = annotator.draw_bodies(blank(), [body])
    assert frame[20, 50].any()


def test_annotator_skips_empty_bodies():
    frame = LandmarkAnnotator().draw_bodies(blank(), [BodyPrediction(0, 0.0, (0, 0, 0, 0), (0, 0, 0, 0))])
    assert not frame.any()


def test_status_display():
    frame = StatusDisplay().draw_status_box(blank().repeat(2, axis=1), hand_count=0, fps=29.7,
                                            inference_ms=12.0, body_score=0.5)
    assert frame.any()


def test_frame_processor_mirrors_and_converts():
    frame = blank()
    frame[0, 0] = (255, 0, 0)
    processor = FrameProcessor(mirror=True)
    display = processor.prepare_display(frame)
    assert tuple(display[0, -1]) == (255, 0, 0)
    assert tuple(processor.to_model_input(display)[0, -1]) == (0, 0, 255)
    assert FrameProcessor(mirror=False).prepare_display(frame) is frame


def test_hand_direction_arrow_from_palm_base_to_middle_finger():
    only_direction = DrawOptions(draw_boxes=False, draw_points=False, draw_polygons=False, draw_labels=False)
    frame = LandmarkAnnotator(only_direction).draw_hands(blank(), [make_hand()])
    # palm base (40, 30) to middle finger base (80, 45)
    assert frame[36:40, 58:62].any()
    assert frame[40:50, 76:85].any()
    assert not frame[80:, :].any()

    frame = LandmarkAnnotator(only_direction.copy(draw_direction=False)).draw_hands(blank(), [make_hand()])
    assert not frame.any()
