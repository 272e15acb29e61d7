"""
TensorFlow Lite model loading and invocation.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _load_interpreter_class():
    try:
        from tflite_runtime.interpreter import Interpreter
    except ImportError:
        from tensorflow.lite.python.interpreter import Interpreter
    return Interpreter


class ModelLoader:
    """Loads a TFLite model and runs it on a single input tensor."""

    def __init__(self, model_path, interpreter=None):
        """Initialize model loader.

        Args:
            model_path: path of the .tflite file
            interpreter: already constructed interpreter, skips loading from disk
        """
        self.model_path = model_path
        self.interpreter = interpreter
        self.input_details = None
        self.output_details = None
        self.input_shape = None
        if interpreter is not None:
            self._read_details()

    def load_model(self):
        """Load the model from disk and allocate its tensors."""
        if not os.path.exists(self.model_path):
            raise FileNotFoundError(f"Model file not found: {self.model_path}")

        try:
            interpreter_class = _load_interpreter_class()
            self.interpreter = interpreter_class(model_path=self.model_path)
            self.interpreter.allocate_tensors()
        except Exception as e:
            logger.error("Failed to load model %s: %s", self.model_path, e)
            self.interpreter = None
            return False

        self._read_details()
        logger.info("Model loaded: %s", self.model_path)
        logger.info("Input shape: %s, outputs: %d", self.input_shape, len(self.output_details))
        return True

    def _read_details(self):
        self.input_details = self.interpreter.get_input_details()
        self.output_details = self.interpreter.get_output_details()
        self.input_shape = tuple(int(v) for v in self.input_details[0]['shape'][1:3])  # [height, width]

    def get_input_shape(self):
        """Get the (height, width) input size of the model."""
        if self.input_details is None:
            raise RuntimeError("Model not loaded. Call load_model() first.")
        return self.input_shape

    def get_input_dtype(self):
        if self.input_details is None:
            raise RuntimeError("Model not loaded. Call load_model() first.")
        return self.input_details[0]['dtype']

    def invoke(self, input_tensor):
        """Run the model and return all output tensors in output_details order."""
        if self.interpreter is None:
            raise RuntimeError("Model not loaded. Call load_model() first.")

        self.interpreter.set_tensor(self.input_details[0]['index'], input_tensor)
        self.interpreter.invoke()
        return [self.interpreter.get_tensor(detail['index']) for detail in self.output_details]
