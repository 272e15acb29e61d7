"""
SSD anchor grid used by the palm detection model.
"""

import math
import numpy as np

# Layer strides per palm model input size
PALM_ANCHOR_STRIDES = {
    256: (8, 16, 32, 32, 32),
    192: (8, 16, 16, 16),
}


def generate_anchors(input_size=256, strides=None, anchor_offset=0.5, anchors_per_layer=2):
    """Generate normalized (x_center, y_center) anchors.

    Consecutive layers sharing a stride are merged into one feature map with
    their anchors stacked per cell. With fixed anchor sizes only the centers matter.
    256 pixels gives 32*32*2 + 16*16*2 + 8*8*6 = 2944 anchors,
    192 pixels gives 24*24*2 + 12*12*6 = 2016.
    """
    if strides is None:
        if input_size not in PALM_ANCHOR_STRIDES:
            raise ValueError(f"No palm anchor layout for input size {input_size}, pass strides explicitly")
        strides = PALM_ANCHOR_STRIDES[input_size]

    anchors = []
    layer_id = 0
    while layer_id < len(strides):
        stride = strides[layer_id]
        per_cell = 0
        while layer_id < len(strides) and strides[layer_id] == stride:
            per_cell += anchors_per_layer
            layer_id += 1

        feature_map_size = int(math.ceil(input_size / stride))
        for y in range(feature_map_size):
            y_center = (y + anchor_offset) / feature_map_size
            for x in range(feature_map_size):
                x_center = (x + anchor_offset) / feature_map_size
                anchors.extend([(x_center, y_center)] * per_cell)

    return np.array(anchors, dtype=np.float32)
