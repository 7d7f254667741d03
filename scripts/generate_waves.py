"""
Demo Wave Generator.
Writes a directory of synthetic wave files (one per signal shape) that
freqcall can be run against.

Usage:
    python scripts/generate_waves.py [output_dir]
"""

import argparse
import os

from freqcall.analysis.synth import (
    add_noise,
    modulated_wave,
    sine_wave,
    square_wave,
    triangle_wave,
    write_wave_csv,
)


def main():
    parser = argparse.ArgumentParser(description="Write synthetic wave CSV files.")
    parser.add_argument("output_dir", nargs="?", default="waves", help="target directory")
    args = parser.parse_args()

    os.makedirs(args.output_dir, exist_ok=True)

    # time in seconds, so the reported kHz are the real ones
    waves = {
        "sine_1k.csv": sine_wave(1000.0, 0.01, 1e-5),
        "triangle_2k.csv": triangle_wave(2000.0, 0.01, 1e-5),
        "square_5k.csv": square_wave(5000.0, 0.01, 1e-6),
        "modulated_1k.csv": modulated_wave(1000.0, 1000.0 / 6, 0.006, 2e-6),
        "noisy_sine_500.csv": add_noise(sine_wave(500.0, 0.02, 2e-6), std=0.05),
    }

    for file_name, wave in waves.items():
        path = os.path.join(args.output_dir, file_name)
        write_wave_csv(wave, path)
        print(f"[*] {path}: {len(wave)} points")

    print("\n[Done] Run: freqcall " + args.output_dir)


if __name__ == "__main__":
    main()
