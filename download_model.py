#!/usr/bin/env python3
"""
Download the MediaPipe hand landmarker bundle and extract the palm detection
and hand landmark TFLite models into models/.
"""

import logging
import sys
import tempfile
import urllib.request
import zipfile
from pathlib import Path

from config.settings import Settings
from utils.debug_logger import configure_logging

logger = logging.getLogger('handpose')

BUNDLE_URL = (
    "https://storage.googleapis.com/mediapipe-models/hand_landmarker/hand_landmarker/float16/latest/hand_landmarker.task"
)

# bundle member -> destination path
BUNDLE_MEMBERS = {
    'hand_detector.tflite': Settings.DEFAULT_PALM_MODEL_PATH,
    'hand_landmarks_detector.tflite': Settings.DEFAULT_LANDMARK_MODEL_PATH,
}


def extract_models(bundle_path, root_dir, members=None):
    """Extract the TFLite models of a .task bundle (a zip archive).

    Returns the list of written paths. Raises KeyError if a member is missing.
    """
    members = members or BUNDLE_MEMBERS
    written = []
    with zipfile.ZipFile(bundle_path, 'r') as zip_ref:
        file_list = zip_ref.namelist()
        logger.info("Bundle contents: %s", file_list)
        for member, destination in members.items():
            if member not in file_list:
                raise KeyError(f"{member} not found in bundle {bundle_path}")
            target = Path(root_dir) / destination
            target.parent.mkdir(parents=True, exist_ok=True)
            with zip_ref.open(member) as source, open(target, 'wb') as output:
                output.write(source.read())
            logger.info("Extracted %s -> %s", member, target)
            written.append(target)
    return written


def download_models(root_dir=Path(__file__).parent, url=BUNDLE_URL):
    """Download the bundle unless both models already exist."""
    targets = [Path(root_dir) / p for p in BUNDLE_MEMBERS.values()]
    if all(t.exists() for t in targets):
        logger.info("Models already present: %s", ", ".join(str(t) for t in targets))
        return targets

    with tempfile.TemporaryDirectory() as temp_dir:
        bundle_path = Path(temp_dir) / 'hand_landmarker.task'
        logger.info("Downloading from: %s", url)
        urllib.request.urlretrieve(url, bundle_path)
        return extract_models(bundle_path, root_dir)


def main():
    configure_logging()
    try:
        paths = download_models()
    except Exception as e:
        logger.error("Failed to download/extract models: %s", e)
        return 1

    for path in paths:
        logger.info("Model %s: %s bytes", path, f"{path.stat().st_size:,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
