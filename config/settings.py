"""
Configuration settings for the hand tracking application.
"""


class Settings:
    """Application configuration with default settings."""

    # Camera settings
    DEFAULT_FPS = 30
    DEFAULT_RESOLUTION = "640x480"

    # Model settings
    DEFAULT_PALM_MODEL_PATH = "models/palm_detection.tflite"
    DEFAULT_LANDMARK_MODEL_PATH = "models/hand_landmark.tflite"
    DEFAULT_BODY_MODEL_PATH = "models/movenet_lightning.tflite"
    PALM_INPUT_SIZE = 256
    LANDMARK_INPUT_SIZE = 256

    # Hand detection settings
    DEFAULT_SKIP_FRAMES = 5              # frames reusing tracked boxes between palm detector runs
    DEFAULT_MAX_HANDS = 2
    DEFAULT_MIN_CONFIDENCE = 0.5         # hand landmark acceptance threshold
    DEFAULT_IOU_THRESHOLD = 0.3          # palm detector non-max suppression
    DEFAULT_SCORE_THRESHOLD = 0.5        # palm detector candidate threshold

    # Body pose settings
    DEFAULT_BODY_SKIP_FRAMES = 2
    DEFAULT_BODY_MIN_CONFIDENCE = 0.3

    @classmethod
    def get_resolution_as_tuple(cls, resolution_str=None):
        """Convert resolution string to width, height tuple."""
        if resolution_str is None:
            resolution_str = cls.DEFAULT_RESOLUTION

        try:
            width, height = resolution_str.split('x')
            return int(width), int(height)
        except (ValueError, AttributeError):
            # Default to 640x480 if parsing fails
            return 640, 480


def _check_probability(name, value):
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


class HandConfig:
    """Per-call options for the hand pipeline and palm detector."""

    def __init__(self, skip_frames=Settings.DEFAULT_SKIP_FRAMES, max_hands=Settings.DEFAULT_MAX_HANDS,
                 min_confidence=Settings.DEFAULT_MIN_CONFIDENCE, iou_threshold=Settings.DEFAULT_IOU_THRESHOLD,
                 score_threshold=Settings.DEFAULT_SCORE_THRESHOLD):
        if skip_frames < 0:
            raise ValueError(f"skip_frames must be >= 0, got {skip_frames}")
        if max_hands < 1:
            raise ValueError(f"max_hands must be >= 1, got {max_hands}")
        _check_probability("min_confidence", min_confidence)
        _check_probability("iou_threshold", iou_threshold)
        _check_probability("score_threshold", score_threshold)

        self.skip_frames = int(skip_frames)
        self.max_hands = int(max_hands)
        self.min_confidence = float(min_confidence)
        self.iou_threshold = float(iou_threshold)
        self.score_threshold = float(score_threshold)

    @classmethod
    def from_args(cls, args):
        """Build from parsed command line arguments."""
        return cls(skip_frames=args.skip_frames, max_hands=args.max_hands,
                   min_confidence=args.min_confidence)

    def __repr__(self):
        return (f"HandConfig(skip_frames={self.skip_frames}, max_hands={self.max_hands}, "
                f"min_confidence={self.min_confidence})")


class BodyConfig:
    """Per-call options for the body pose model."""

    def __init__(self, skip_frames=Settings.DEFAULT_BODY_SKIP_FRAMES,
                 min_confidence=Settings.DEFAULT_BODY_MIN_CONFIDENCE):
        if skip_frames < 0:
            raise ValueError(f"skip_frames must be >= 0, got {skip_frames}")
        _check_probability("min_confidence", min_confidence)

        self.skip_frames = int(skip_frames)
        self.min_confidence = float(min_confidence)
