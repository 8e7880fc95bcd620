"""
tests/conftest
~~~~~~~~~~~~~~
"""

import dataclasses

import pytest

from heatgrid import Heatmap


class RecordingCanvas:
    """
    Canvas double that records draw calls instead of rasterizing them.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.dpi = None
        self.calls = []
        self.saves = 0
        self.closes = 0

    def set_dpi(self, dpi):
        self.dpi = dpi

    def draw_box(self, box, style):
        self.calls.append(("box", box, style))

    def draw_text(self, text, x, y, style):
        self.calls.append(("text", text, x, y, style))

    def save(self, sink):
        self.saves += 1
        # Font objects repr with identities; drop them so equal draws serialize equally
        calls = [c[:-1] + (dataclasses.replace(c[-1], font=None),) for c in self.calls]
        sink.write(repr(calls).encode("utf-8"))

    def close(self):
        self.closes += 1

    @property
    def boxes(self):
        return [c for c in self.calls if c[0] == "box"]

    @property
    def texts(self):
        return [c for c in self.calls if c[0] == "text"]


class RecordingFactory:
    """
    Canvas factory handing out RecordingCanvas instances and keeping them for inspection.
    """

    def __init__(self):
        self.canvases = []

    def __call__(self, width, height):
        canvas = RecordingCanvas(width, height)
        self.canvases.append(canvas)
        return canvas

    @property
    def canvas(self):
        assert len(self.canvases) == 1, f"expected one canvas, got {len(self.canvases)}"
        return self.canvases[0]


class FailingSink:
    """
    Byte sink whose writes always fail.
    """

    def write(self, data):
        raise OSError("disk full")


@pytest.fixture
def recording_factory():
    """
    Returns a fresh recording canvas factory.

    Returns:
        RecordingFactory: Factory recording every canvas it creates.
    """
    return RecordingFactory()


@pytest.fixture(scope="session")
def toy_heatmap():
    """
    Returns the 2x2 heatmap used across render tests.

    Returns:
        Heatmap: Grid [[1, 2], [3, 4]] on a 600x600 canvas.
    """
    return Heatmap(
        grid=[[1.0, 2.0], [3.0, 4.0]],
        row_labels=["r0", "r1"],
        col_labels=["c0", "c1"],
        width=600,
        height=600,
    )
