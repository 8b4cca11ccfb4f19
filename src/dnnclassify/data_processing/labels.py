# src/dnnclassify/data_processing/labels.py
from typing import List

from ..errors import LabelFileError
from ..utils.logging import get_logger

__all__ = ["read_class_names", "parse_label_line"]

log = get_logger(__name__)


def parse_label_line(line: str) -> str:
    """Drop everything up to and including the first space ("n01440764 tench" -> "tench")."""
    return line.split(" ", 1)[-1]


def read_class_names(path: str) -> List[str]:
    """Read one label per line; empty lines are skipped, index = class id."""
    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise LabelFileError(path) from e
    names = []
    with f:
        for line in f:
            line = line.rstrip("\r\n")
            if line:
                names.append(parse_label_line(line))
    log.debug("Read %d class names from %s", len(names), path)
    return names
