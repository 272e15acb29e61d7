"""
Command line argument parsing utilities.
"""

import argparse
from config.settings import Settings


def build_parser():
    """Argument parser for the hand tracking demo."""
    parser = argparse.ArgumentParser(description="Hand and body pose tracking demo")

    # Input settings
    parser.add_argument('--source', type=str, default='0',
                        help='Camera index or video file path (default: 0)')
    parser.add_argument('--image', type=str, default=None,
                        help='Process a single image instead of a video stream')
    parser.add_argument('--out', type=str, default=None,
                        help='Where to write the annotated image in --image mode')
    parser.add_argument('--res', type=str, default=Settings.DEFAULT_RESOLUTION,
                        help=f'Camera resolution WxH (default: {Settings.DEFAULT_RESOLUTION})')
    parser.add_argument('--fps', type=int, default=Settings.DEFAULT_FPS,
                        help=f'Camera framerate (default: {Settings.DEFAULT_FPS})')
    parser.add_argument('--no_mirror', action='store_true',
                        help='Disable horizontal mirroring of camera frames')

    # Model settings
    parser.add_argument('--palm_model', type=str, default=Settings.DEFAULT_PALM_MODEL_PATH,
                        help=f'Palm detection TFLite model (default: {Settings.DEFAULT_PALM_MODEL_PATH})')
    parser.add_argument('--landmark_model', type=str, default=Settings.DEFAULT_LANDMARK_MODEL_PATH,
                        help=f'Hand landmark TFLite model (default: {Settings.DEFAULT_LANDMARK_MODEL_PATH})')
    parser.add_argument('--body_model', type=str, default=Settings.DEFAULT_BODY_MODEL_PATH,
                        help=f'MoveNet TFLite model (default: {Settings.DEFAULT_BODY_MODEL_PATH})')
    parser.add_argument('--body', action='store_true',
                        help='Also run body pose estimation')

    # Tracking settings
    parser.add_argument('--skip_frames', type=int, default=Settings.DEFAULT_SKIP_FRAMES,
                        help=f'Frames between palm detector runs (default: {Settings.DEFAULT_SKIP_FRAMES})')
    parser.add_argument('--max_hands', type=int, default=Settings.DEFAULT_MAX_HANDS,
                        help=f'Maximum number of tracked hands (default: {Settings.DEFAULT_MAX_HANDS})')
    parser.add_argument('--min_confidence', type=float, default=Settings.DEFAULT_MIN_CONFIDENCE,
                        help=f'Minimum hand confidence (0-1, default: {Settings.DEFAULT_MIN_CONFIDENCE})')

    # Display settings
    parser.add_argument('--headless', action='store_true',
                        help='Run without GUI display')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug output')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write logs to this file')

    return parser


def parse_args(argv=None):
    """Parse command line arguments for the hand tracking application."""
    return build_parser().parse_args(argv)
