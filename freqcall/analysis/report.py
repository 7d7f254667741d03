"""
Result table: ordering, printing and export of recognized frequencies.
"""

from typing import Callable, Iterable, List

import pandas as pd

from freqcall.analysis.pipeline import FileFrequency

TABLE_HEADER = "file\t\tfreq, kHz"


def by_frequency(result: FileFrequency) -> float:
    """Sort key: frequency in Hz, an unknown frequency counts as 0"""
    return result.frequency_hz or 0.0


def sort_results(
    results: Iterable[FileFrequency],
    key: Callable[[FileFrequency], float] = by_frequency,
    descending: bool = True,
) -> List[FileFrequency]:
    return sorted(results, key=key, reverse=descending)


def format_khz(result: FileFrequency) -> str:
    return f"{result.frequency_khz:.4g}"


def format_results(results: Iterable[FileFrequency]) -> str:
    """
    Table with one line per file: name, tab, frequency in kHz.
    Empty string if there are no results.
    """
    lines = [f"{r.file_name}\t{format_khz(r)}" for r in results]
    if not lines:
        return ""
    return "\n".join([TABLE_HEADER] + lines) + "\n"


def print_results(results: Iterable[FileFrequency]) -> None:
    table = format_results(results)
    if table:
        print(table, end="")


def results_to_frame(results: Iterable[FileFrequency]) -> pd.DataFrame:
    rows = []
    for r in results:
        shape = r.shape
        rows.append(
            {
                "file": r.file_name,
                "frequency_hz": r.frequency_hz,
                "frequency_khz": r.frequency_khz,
                "noisy": shape.noisy if shape else None,
                "jumped": shape.jumped if shape else None,
                "superposed": shape.superposed if shape else None,
            }
        )
    return pd.DataFrame(
        rows,
        columns=["file", "frequency_hz", "frequency_khz", "noisy", "jumped", "superposed"],
    )


def save_results_csv(results: Iterable[FileFrequency], path: str) -> None:
    results_to_frame(results).to_csv(path, index=False)
    print(f"[*] Saved results to '{path}'.")
