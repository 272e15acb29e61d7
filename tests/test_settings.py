from types import SimpleNamespace

import pytest

from config.settings import BodyConfig, HandConfig, Settings
from utils.arg_parser import parse_args


def test_resolution_parsing():
    assert Settings.get_resolution_as_tuple("1280x720") == (1280, 720)
    assert Settings.get_resolution_as_tuple() == (640, 480)
    assert Settings.get_resolution_as_tuple("bogus") == (640, 480)


def test_hand_config_defaults():
    config = HandConfig()
    assert config.skip_frames == Settings.DEFAULT_SKIP_FRAMES
    assert config.max_hands == Settings.DEFAULT_MAX_HANDS
    assert config.min_confidence == Settings.DEFAULT_MIN_CONFIDENCE


@pytest.mark.parametrize("kwargs", [
    {'skip_frames': -1},
    {'max_hands': 0},
    {'min_confidence': 1.5},
    {'iou_threshold': -0.1},
])
def test_hand_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        HandConfig(**kwargs)


def test_body_config_rejects_invalid_values():
    with pytest.raises(ValueError):
        BodyConfig(skip_frames=-2)
    with pytest.raises(ValueError):
        BodyConfig(min_confidence=2)


def test_hand_config_from_args():
    args = SimpleNamespace(skip_frames=3, max_hands=1, min_confidence=0.7)
    config = HandConfig.from_args(args)
    assert (config.skip_frames, config.max_hands, config.min_confidence) == (3, 1, 0.7)


def test_parse_args_defaults_and_overrides():
    args = parse_args([])
    assert args.source == '0'
    assert args.skip_frames == Settings.DEFAULT_SKIP_FRAMES
    assert not args.body

    args = parse_args(['--max_hands', '1', '--body', '--image', 'hand.jpg', '--headless'])
    assert args.max_hands == 1
    assert args.body
    assert args.image == 'hand.jpg'
    assert args.headless


def test_body_config_has_only_model_options():
    config = BodyConfig(skip_frames=0, min_confidence=0.4)
    assert (config.skip_frames, config.min_confidence) == (0, 0.4)
    with pytest.raises(TypeError):
        BodyConfig(enabled=False)
