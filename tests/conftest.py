import numpy as np
import pytest

from freqcall.analysis.core import WaveSignal


def integer_triangle(n_rows: int = 99, period: int = 10) -> WaveSignal:
    """Triangle 0..period/2..0 sampled at integer times, starting at its minimum."""
    half = period // 2
    t = np.arange(n_rows, dtype=float)
    v = half - np.abs((t % period) - half)
    return WaveSignal(time=t, value=v, name="triangle.csv")


@pytest.fixture
def triangle() -> WaveSignal:
    return integer_triangle()


@pytest.fixture
def triangle_csv(tmp_path, triangle):
    path = tmp_path / "triangle.csv"
    lines = ["time,value"] + [f"{tm:g},{vl:g}" for tm, vl in zip(triangle.time, triangle.value)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
