# src/dnnclassify/errors.py
"""Fatal conditions of a classification run.

Helpers raise these; only ``dnnclassify.cli.main`` turns them into a
diagnostic on stderr and a process exit status.
"""


class ClassifyError(RuntimeError):
    # exit(-1) as seen by a POSIX shell
    exit_code = 255


class ConfigError(ClassifyError):
    pass


class LabelFileError(ClassifyError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"File with classes labels not found: {path}")


class ModelLoadError(ClassifyError):
    def __init__(self, proto, model, reason=""):
        self.proto, self.model, self.reason = proto, model, reason
        lines = []
        if reason:
            lines.append(f"Exception: {reason}")
        lines += [
            "Can't load network by using the following files: ",
            f"prototxt:   {proto}",
            f"caffemodel: {model}",
            "bvlc_googlenet.caffemodel can be downloaded here:",
            "http://dl.caffe.berkeleyvision.org/bvlc_googlenet.caffemodel",
        ]
        super().__init__("\n".join(lines))


class ImageReadError(ClassifyError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Can't read image from the file: {path}")


class LabelLookupError(ClassifyError):
    def __init__(self, class_id, num_labels):
        self.class_id, self.num_labels = class_id, num_labels
        super().__init__(f"Class id {class_id} is out of range for {num_labels} labels")


class InferenceError(ClassifyError):
    def __init__(self, input_name, output_name, reason=""):
        self.input_name, self.output_name = input_name, output_name
        super().__init__(f"Forward pass failed (input '{input_name}', output '{output_name}'): {reason}")
