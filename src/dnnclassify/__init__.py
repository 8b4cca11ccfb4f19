"""Classify a single image with a pre-trained Caffe network through OpenCV DNN."""
__version__ = "0.1.0"
