# src/dnnclassify/data_processing/preprocess.py
from __future__ import annotations
from typing import Sequence, Tuple
import cv2
import numpy as np

from ..errors import ImageReadError
from ..utils.logging import get_logger

log = get_logger(__name__)

# GoogLeNet expects 224x224 BGR with the ImageNet mean removed
INPUT_SIZE: Tuple[int, int] = (224, 224)
MEAN_BGR: Tuple[float, float, float] = (104.0, 117.0, 123.0)


def load_image(path: str) -> np.ndarray:
    """Read an image as BGR uint8 (H,W,3)."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise ImageReadError(path)
    log.info("Loaded image %s (%dx%d)", path, img.shape[1], img.shape[0])
    return img


def image_to_blob(
    img: np.ndarray,
    size: Sequence[int] = INPUT_SIZE,
    mean: Sequence[float] = MEAN_BGR,
    scale: float = 1.0,
    swap_rb: bool = False,
    crop: bool = True,
) -> np.ndarray:
    """Resize to ``size`` (w,h), subtract ``mean`` and return an NCHW float32 blob.

    With ``crop`` the image is scaled to cover ``size`` and center-cropped, the
    OpenCV 3.4 default; otherwise it is stretched.
    """
    blob = cv2.dnn.blobFromImage(
        img,
        scalefactor=float(scale),
        size=(int(size[0]), int(size[1])),
        mean=tuple(float(m) for m in mean),
        swapRB=bool(swap_rb),
        crop=bool(crop),
    )
    log.debug("Input blob shape %s", blob.shape)
    return blob
