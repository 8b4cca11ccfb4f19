import cv2
import numpy as np
import pytest


class FakeNet:
    """Stands in for cv2.dnn.Net; returns a fixed (1, N) probability row."""
    def __init__(self, prob):
        self.prob = np.asarray(prob, dtype=np.float32).reshape(1, -1)
        self.calls = []
        self.target = None

    def empty(self):
        return False

    def setPreferableTarget(self, target):
        self.target = target

    def setInput(self, blob, name=""):
        self.calls.append(("setInput", name, blob.shape))

    def forward(self, name=""):
        self.calls.append(("forward", name))
        return self.prob.copy()


@pytest.fixture
def peaked_prob():
    p = np.full(1000, 0.0001, dtype=np.float32)
    p[812] = 0.9001
    return p


@pytest.fixture
def fake_net(peaked_prob):
    return FakeNet(peaked_prob)


@pytest.fixture
def patch_reader(monkeypatch, fake_net):
    seen = []
    def reader(proto, model):
        seen.append((proto, model))
        return fake_net
    monkeypatch.setattr(cv2.dnn, "readNetFromCaffe", reader)
    return seen


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "shuttle.jpg"
    img = np.zeros((300, 400, 3), dtype=np.uint8)
    img[:, :200] = (255, 128, 0)
    cv2.imwrite(str(path), img)
    return str(path)


@pytest.fixture
def labels_file(tmp_path):
    path = tmp_path / "synset_words.txt"
    lines = [f"n{i:08d} class_{i}" for i in range(1000)]
    lines[812] = "n04266014 space shuttle"
    path.write_text("\n".join(lines) + "\n")
    return str(path)
