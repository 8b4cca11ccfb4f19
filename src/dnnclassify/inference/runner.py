# src/dnnclassify/inference/runner.py
from __future__ import annotations
import time
import numpy as np

from ..utils.logging import get_logger

log = get_logger(__name__)


def run_inference(net, blob: np.ndarray, input_name: str = "data", output_name: str = "prob",
                  repeats: int = 10) -> np.ndarray:
    """Feed ``blob`` and run the forward pass ``1 + repeats`` times; return the last output.

    The extra passes only show up as per-pass timings in the DEBUG log.
    """
    repeats = int(repeats)
    if repeats < 0:
        raise ValueError(f"repeats must be >= 0, got {repeats}")
    prob = None
    for i in range(1 + repeats):
        t0 = time.perf_counter()
        prob = net.forward(blob, input_name, output_name)
        log.debug("Forward pass %d: %.2f ms", i, (time.perf_counter() - t0) * 1e3)
    return prob
