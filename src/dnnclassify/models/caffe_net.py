# src/dnnclassify/models/caffe_net.py
from __future__ import annotations
import cv2
import numpy as np

from ..errors import InferenceError, ModelLoadError
from ..utils.logging import get_logger


class CaffeClassifier:
    """Thin wrapper around a ``cv2.dnn.Net`` read from Caffe files.

    Use as a context manager so the network is released on every exit path:

        with CaffeClassifier.load(proto, model, opencl=True) as net:
            prob = net.forward(blob)
    """

    def __init__(self, net, proto: str = "", model: str = ""):
        self.net = net
        self.proto, self.model = proto, model
        self.logger = get_logger("dnnclassify.CaffeClassifier")

    @classmethod
    def load(cls, proto: str, model: str, opencl: bool = False) -> "CaffeClassifier":
        reader = getattr(cv2.dnn, "readNetFromCaffe", None)
        if reader is None:
            raise ModelLoadError(proto, model, f"OpenCV {cv2.__version__} has no Caffe importer (need opencv-python<5)")
        try:
            net = reader(proto, model)
        except cv2.error as e:
            raise ModelLoadError(proto, model, str(e).strip()) from e
        if net is None or net.empty():
            raise ModelLoadError(proto, model)
        self = cls(net, proto, model)
        self.logger.info("Loaded network from %s / %s", proto, model)
        if opencl:
            self.set_opencl()
        return self

    def set_opencl(self):
        # Advisory only: OpenCV falls back to CPU if no OpenCL device exists
        self.net.setPreferableTarget(cv2.dnn.DNN_TARGET_OPENCL)
        self.logger.info("Preferable target set to OpenCL")

    def forward(self, blob: np.ndarray, input_name: str = "data", output_name: str = "prob") -> np.ndarray:
        try:
            self.net.setInput(blob, input_name)
            return self.net.forward(output_name)
        except cv2.error as e:
            raise InferenceError(input_name, output_name, str(e).strip()) from e

    def close(self):
        self.net = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
