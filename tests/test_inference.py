import numpy as np, pytest
from dnnclassify.models.caffe_net import CaffeClassifier
from dnnclassify.inference.runner import run_inference
from dnnclassify.inference.report import best_class, lookup_label, format_report
from dnnclassify.errors import LabelLookupError

def test_eleven_passes_by_default(fake_net, peaked_prob):
    blob = np.zeros((1, 3, 224, 224), dtype=np.float32)
    prob = run_inference(CaffeClassifier(fake_net), blob)
    assert [c for c in fake_net.calls if c[0] == "forward"] == [("forward", "prob")] * 11
    assert [c[1] for c in fake_net.calls if c[0] == "setInput"] == ["data"] * 11
    assert np.array_equal(prob.reshape(-1), peaked_prob)

def test_zero_repeats_single_pass(fake_net):
    run_inference(CaffeClassifier(fake_net), np.zeros((1, 3, 2, 2)), repeats=0)
    assert len(fake_net.calls) == 2
    with pytest.raises(ValueError):
        run_inference(CaffeClassifier(fake_net), np.zeros((1, 3, 2, 2)), repeats=-1)

def test_best_class_flattens_and_prefers_lowest_index():
    prob = np.array([[[[0.1]], [[0.4]], [[0.4]], [[0.1]]]])
    assert best_class(prob) == (1, pytest.approx(0.4))

def test_lookup_out_of_range():
    assert lookup_label(["a", "b"], 1) == "b"
    with pytest.raises(LabelLookupError):
        lookup_label(["a", "b"], 2)

def test_format_report():
    out = format_report(812, "space shuttle", 0.9991234567)
    assert out.splitlines() == ["Best class: #812 'space shuttle'", "Probability: 99.9123%"]
    assert format_report(0, "x", 1.0).endswith("Probability: 100%")
