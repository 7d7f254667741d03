"""
Synthetic wave generation for demos and tests.
"""

from typing import Optional

import numpy as np
from scipy import signal

from freqcall.analysis.core import WaveSignal


def time_axis(duration: float, dt: float, start: float = 0.0) -> np.ndarray:
    n = int(round(duration / dt))
    return start + np.arange(n) * dt


def sine_wave(freq_hz: float, duration: float, dt: float, amplitude: float = 1.0) -> WaveSignal:
    t = time_axis(duration, dt)
    return WaveSignal(time=t, value=amplitude * np.sin(2 * np.pi * freq_hz * t), name="sine")


def triangle_wave(
    freq_hz: float, duration: float, dt: float, amplitude: float = 1.0
) -> WaveSignal:
    """Symmetric triangle starting at its minimum and rising."""
    t = time_axis(duration, dt)
    phase = 2 * np.pi * freq_hz * t
    return WaveSignal(
        time=t, value=amplitude * signal.sawtooth(phase, width=0.5), name="triangle"
    )


def square_wave(freq_hz: float, duration: float, dt: float, amplitude: float = 1.0) -> WaveSignal:
    """Square wave starting at its high level."""
    t = time_axis(duration, dt)
    return WaveSignal(
        time=t, value=amplitude * signal.square(2 * np.pi * freq_hz * t), name="square"
    )


def modulated_wave(
    freq_hz: float,
    mod_freq_hz: float,
    duration: float,
    dt: float,
    depth: float = 0.5,
) -> WaveSignal:
    """Amplitude-modulated sine: (1 + depth * sin(mod)) * sin(carrier)."""
    t = time_axis(duration, dt)
    envelope = 1.0 + depth * np.sin(2 * np.pi * mod_freq_hz * t)
    return WaveSignal(
        time=t, value=envelope * np.sin(2 * np.pi * freq_hz * t), name="modulated"
    )


def add_noise(wave: WaveSignal, std: float, seed: Optional[int] = 0) -> WaveSignal:
    rng = np.random.default_rng(seed)
    noisy = wave.value + rng.normal(0.0, std, size=len(wave))
    return WaveSignal(time=wave.time, value=noisy, name=f"{wave.name}_noisy")


def write_wave_csv(wave: WaveSignal, path: str, title: str = "time,value") -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(title + "\n")
        for tm, vl in zip(wave.time.tolist(), wave.value.tolist()):
            f.write(f"{tm!r},{vl!r}\n")
