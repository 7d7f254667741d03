"""
Debug Visualizer for a single wave file.
Prints the classification and plots the raw wave, the values used for event
counting and the registered events.
Use this to diagnose why a specific file is failing or producing weird results.

Usage:
    python scripts/debug_visualizer.py <path_to_wave.csv>
"""

import argparse
import os
import sys

import matplotlib.pyplot as plt
import numpy as np

from freqcall.analysis.classifier import SignalClassifier
from freqcall.analysis.estimator import FrequencyEstimator
from freqcall.analysis.loader import load_wave_csv


def diagnose_wave(path):
    print(f"\n{'=' * 50}")
    print(f"[*] Diagnosing {os.path.basename(path)}...")

    # 1. 파일 로드
    signal = load_wave_csv(path)
    if signal is None:
        print("[!] Error: file could not be parsed")
        return

    # 2. 신호 판별
    shape = SignalClassifier().classify(signal)
    if shape is None:
        print(f"[!] Classification failed ({len(signal)} points)")
        return

    print(f"[*] Points: {len(signal)}  dt: {signal.dt:g}")
    print(
        f"[*] noisy: {'YES' if shape.noisy else 'NO'}  jumped: {'YES' if shape.jumped else 'NO'}"
        f"  superpos: {'YES' if shape.superposed else 'NO'}"
    )
    print(
        f"[*] period points: {shape.approx_period_points}  tolerance: {shape.tolerance:.6g}"
        f"  sign factor: {shape.sign_factor:+d}  spliced: {shape.splice}"
    )

    # 3. 주파수 계산
    estimator = FrequencyEstimator()
    estimate = estimator.estimate(signal, shape)
    print(f"[*] Events: {estimate.event_count}  frequency: {estimate.frequency_hz} Hz")

    effective = list(estimator.effective_values(signal, shape))
    eff_time = np.array([tm for tm, _ in effective])
    eff_value = np.array([vl for _, vl in effective])

    # 4. 그래프 그리기 (Visual Debugging)
    fig, ax = plt.subplots(figsize=(12, 6))
    ax.plot(signal.time, signal.value, label="Raw", color="lightgray")
    if shape.splice:
        ax.plot(eff_time, eff_value, label="Median + Average", color="red", linewidth=2)
    for tm in estimate.event_times:
        ax.axvline(tm, color="green", alpha=0.4)
    ax.set_xlabel("Time")
    ax.set_ylabel("Value")
    ax.set_title(f"{signal.name} - {estimate.event_count} events")
    ax.legend()
    ax.grid(True)

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plot one wave file with its counted events.")
    parser.add_argument("path", type=str, help="Path to the wave CSV file.")

    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args = parser.parse_args()
    diagnose_wave(args.path)
