# src/dnnclassify/cli.py
"""Classify one image with a Caffe model (default: BVLC GoogLeNet on ImageNet).

Model files:
  https://raw.githubusercontent.com/opencv/opencv/master/samples/data/dnn/bvlc_googlenet.prototxt
  http://dl.caffe.berkeleyvision.org/bvlc_googlenet.caffemodel
"""
import argparse, sys
from typing import Any, Dict, List, Optional, Tuple

from .data_processing.labels import read_class_names
from .data_processing.preprocess import image_to_blob, load_image
from .errors import ClassifyError, ConfigError
from .inference.report import best_class, format_report, lookup_label
from .inference.runner import run_inference
from .models.caffe_net import CaffeClassifier
from .utils.config import load_config, merge_config
from .utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    # Defaults live in utils.config.DEFAULTS so that a YAML config can fill
    # anything not given on the command line.
    ap = argparse.ArgumentParser(prog="dnnclassify",
                                 description="Sample app for loading googlenet model")
    ap.add_argument("--proto", default=None, help="model configuration (.prototxt)")
    ap.add_argument("--model", default=None, help="model weights (.caffemodel)")
    ap.add_argument("--image", default=None, help="path to image file")
    ap.add_argument("--labels", default=None, help="class names, one per line")
    ap.add_argument("--opencl", action=argparse.BooleanOptionalAction, default=None,
                    help="enable OpenCL (--no-opencl overrides the config)")
    ap.add_argument("--repeats", type=int, default=None,
                    help="extra forward passes after the first one (default 10)")
    ap.add_argument("--config", default=None, help="optional YAML config")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def _require_bool(opts, section, key):
    # YAML "false" in quotes is a truthy string
    val = opts[section][key]
    if not isinstance(val, bool):
        raise ConfigError(f"{section}.{key} must be true or false, got {val!r}")


def resolve_options(args: argparse.Namespace, cfg: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Command line beats config beats built-in defaults."""
    opts = merge_config(cfg)
    runtime = opts["runtime"]
    for key in ("proto", "model", "image", "labels", "opencl", "repeats"):
        val = getattr(args, key, None)
        if val is not None:
            runtime[key] = val
    _require_bool(opts, "runtime", "opencl")
    _require_bool(opts, "preprocess", "swap_rb")
    _require_bool(opts, "preprocess", "crop")
    try:
        runtime["repeats"] = int(runtime["repeats"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"repeats must be an integer, got {runtime['repeats']!r}") from e
    if runtime["repeats"] < 0:
        raise ConfigError(f"repeats must be >= 0, got {runtime['repeats']}")
    return opts


def classify(opts: Dict[str, Dict[str, Any]]) -> Tuple[int, str, float]:
    """Run the whole pipeline and return (class id, class name, probability)."""
    runtime, pre, netcfg = opts["runtime"], opts["preprocess"], opts["network"]
    with CaffeClassifier.load(runtime["proto"], runtime["model"], opencl=runtime["opencl"]) as net:
        img = load_image(runtime["image"])
        blob = image_to_blob(img, size=pre["size"], mean=pre["mean"],
                             scale=pre["scale"], swap_rb=pre["swap_rb"], crop=pre["crop"])
        prob = run_inference(net, blob, netcfg["input"], netcfg["output"], runtime["repeats"])

    class_id, class_prob = best_class(prob)
    names = read_class_names(runtime["labels"])
    return class_id, lookup_label(names, class_id), class_prob


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger("dnnclassify", args.log_level)
    try:
        opts = resolve_options(args, load_config(args.config))
        logger.info("Options: %s", opts["runtime"])
        class_id, name, prob = classify(opts)
    except ClassifyError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    print(format_report(class_id, name, prob))
    return 0


if __name__ == "__main__":
    sys.exit(main())
