"""
Hand landmark model: 21 keypoints for a cropped, upright hand.
"""

import numpy as np

NUM_HAND_LANDMARKS = 21


class HandLandmarkModel:
    """Runs the hand landmark model on a crop prepared by the hand pipeline."""

    def __init__(self, model_loader):
        """Initialize with a loaded ModelLoader for the hand landmark model."""
        self.model_loader = model_loader

    def predict(self, hand_image):
        """Return (confidence, flat keypoints) for one HxWx3 crop scaled to [0, 1].

        Keypoints are 63 values (x, y, z per landmark) in crop pixels.
        """
        input_tensor = np.expand_dims(np.asarray(hand_image, dtype=np.float32), axis=0)
        outputs = self.model_loader.invoke(input_tensor)

        keypoints = None
        confidence = None
        for output in outputs:
            values = np.asarray(output).reshape(-1)
            if keypoints is None and values.size == NUM_HAND_LANDMARKS * 3:
                keypoints = values
            elif confidence is None and values.size == 1:
                # first single value output is the hand presence flag
                confidence = float(values[0])

        if keypoints is None or confidence is None:
            raise ValueError(f"Unexpected hand landmark outputs: {[np.shape(o) for o in outputs]}")
        return confidence, keypoints
