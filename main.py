#!/usr/bin/env python3
"""
Hand and body pose tracking demo.

Reads frames from a camera, a video file or a single image, runs the hand
pipeline (and optionally body pose) and draws the results.
"""

import asyncio
import logging
import signal
import sys

import cv2

from camera import FrameProcessor, VideoCapture
from config.settings import BodyConfig, HandConfig, Settings
from detection import load_body_pose, load_handpose
from utils import FPSCounter, Timer, configure_logging, log_performance, parse_args
from visualization import LandmarkAnnotator, StatusDisplay

logger = logging.getLogger('handpose')


class HandTrackingApp:
    """Hand tracking application loop."""

    def __init__(self, args):
        """Initialize models and display helpers from parsed arguments."""
        self.args = args
        self.hand_config = HandConfig.from_args(args)
        self.body_config = BodyConfig() if args.body else None

        self.handpose = load_handpose(args.palm_model, args.landmark_model)
        self.body_pose = load_body_pose(args.body_model) if args.body else None

        self.frame_processor = FrameProcessor(mirror=not args.no_mirror and args.image is None)
        self.annotator = LandmarkAnnotator()
        self.status_display = StatusDisplay()
        self.fps_counter = FPSCounter(window_size=30)
        self.frame_count = 0
        self.running = True

        signal.signal(signal.SIGINT, self.stop)
        signal.signal(signal.SIGTERM, self.stop)

    async def process_frame(self, frame):
        """Run the models on one BGR frame and return the annotated display frame."""
        display = self.frame_processor.prepare_display(frame).copy()
        rgb = self.frame_processor.to_model_input(display)

        with Timer() as timer:
            hands = await self.handpose.estimate_hands(rgb, self.hand_config)
            bodies = []
            if self.body_pose is not None:
                bodies = await self.body_pose.predict(rgb, self.body_config)
        del rgb
        log_performance(logger, "inference", timer.elapsed_ms())

        self.annotator.draw_hands(display, hands)
        body_score = None
        if bodies:
            self.annotator.draw_bodies(display, bodies)
            body_score = bodies[0].score
        self.status_display.draw_status_box(display, len(hands), self.fps_counter.get_fps(),
                                            timer.elapsed_ms(), body_score)
        return display, hands

    async def run_image(self):
        frame = cv2.imread(self.args.image)
        if frame is None:
            raise RuntimeError(f"Could not read image: {self.args.image}")

        display, hands = await self.process_frame(frame)
        logger.info("Hands: %d", len(hands))
        for i, hand in enumerate(hands):
            logger.info("[%d] confidence=%.2f box=%s", i, hand.confidence,
                        tuple(round(v, 1) for v in hand.box))

        if self.args.out:
            if not cv2.imwrite(self.args.out, display):
                raise RuntimeError(f"Could not write output image: {self.args.out}")
        elif not self.args.headless:
            cv2.imshow("Hand Tracking", display)
            cv2.waitKey(0)

    async def run_stream(self):
        width, height = Settings.get_resolution_as_tuple(self.args.res)
        logger.info("Starting hand tracking with %r", self.hand_config)

        with VideoCapture(self.args.source, width, height, self.args.fps) as capture:
            while self.running:
                ok, frame = capture.read()
                if not ok or frame is None:
                    logger.info("End of stream")
                    break

                self.fps_counter.update()
                display, hands = await self.process_frame(frame)

                if not self.args.headless:
                    cv2.imshow("Hand Tracking", display)
                    key = cv2.waitKey(1) & 0xFF
                    if key in (ord('q'), 27):
                        break
                elif self.frame_count % 30 == 0:
                    logger.info("Hands: %d, FPS: %.1f", len(hands), self.fps_counter.get_fps())

                self.frame_count += 1

    async def run(self):
        try:
            if self.args.image:
                await self.run_image()
            else:
                await self.run_stream()
        finally:
            if not self.args.headless:
                cv2.destroyAllWindows()

    def stop(self, signum=None, frame=None):
        """Ask the frame loop to finish after the current frame."""
        logger.info("Shutting down...")
        self.running = False


def main(argv=None):
    args = parse_args(argv)
    configure_logging(debug=args.debug, log_to_file=args.log_file is not None,
                      filename=args.log_file or "hand_tracking_debug.log")
    try:
        app = HandTrackingApp(args)
    except (FileNotFoundError, RuntimeError, ValueError) as e:
        logger.error("%s", e)
        return 1

    asyncio.run(app.run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
