# src/dnnclassify/inference/report.py
from typing import Sequence, Tuple
import numpy as np

from ..errors import LabelLookupError


def best_class(prob: np.ndarray) -> Tuple[int, float]:
    """Return (index, value) of the maximum; ties go to the lowest index."""
    row = np.asarray(prob).reshape(1, -1)
    class_id = int(np.argmax(row[0]))
    return class_id, float(row[0, class_id])


def lookup_label(names: Sequence[str], class_id: int) -> str:
    if not 0 <= class_id < len(names):
        raise LabelLookupError(class_id, len(names))
    return names[class_id]


def format_report(class_id: int, name: str, prob: float) -> str:
    # %g mirrors the default iostream float formatting (6 significant digits)
    return (f"Best class: #{class_id} '{name}'\n"
            f"Probability: {prob * 100:g}%")
