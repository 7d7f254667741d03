"""
Wave file loading.

A wave file is a two-column CSV: the first line is a title and is skipped,
every other line is ``time,value``.
"""

import os
from typing import Optional

import numpy as np
import pandas as pd
from loguru import logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from freqcall.analysis.core import WaveSignal

COLUMNS = ("time", "value")


@retry(
    stop=stop_after_attempt(3),
    wait=wait_fixed(0.1),
    retry=retry_if_exception_type(OSError),
    reraise=True,
)
def _read_frame(path: str) -> pd.DataFrame:
    return pd.read_csv(
        path,
        header=None,
        skiprows=1,
        dtype=str,
        skipinitialspace=True,
        skip_blank_lines=False,
    )


def load_wave_csv(path: str) -> Optional[WaveSignal]:
    """
    Read a wave file into a WaveSignal.

    Returns None if the file cannot be read or any line is malformed
    (missing, extra or non-numeric field, or a blank line
    before the last sample). Blank lines after the last sample are ignored.
    """
    name = os.path.basename(path)
    try:
        frame = _read_frame(path)
    except pd.errors.EmptyDataError:
        # title only (or nothing at all)
        return WaveSignal.from_samples([], [], name=name)
    except pd.errors.ParserError as e:
        logger.warning(f"Malformed wave file: {path} -> {e}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read wave file: {path} -> {e}")
        return None

    # trailing blank lines end the file, a blank line inside it is malformed
    last = frame.last_valid_index()
    if last is None:
        return WaveSignal.from_samples([], [], name=name)
    frame = frame.loc[:last]

    if frame.shape[1] != len(COLUMNS):
        logger.warning(
            f"Malformed wave file: {path} -> expected {len(COLUMNS)} columns, got {frame.shape[1]}"
        )
        return None

    frame.columns = list(COLUMNS)
    numeric = frame.apply(lambda col: pd.to_numeric(col.str.strip(), errors="coerce"))
    bad_rows = numeric.isna().any(axis=1) | ~np.isfinite(numeric).all(axis=1)
    if bad_rows.any():
        # +2: one for the title, one for 1-based line numbers
        line_no = int(np.flatnonzero(bad_rows.to_numpy())[0]) + 2
        logger.warning(f"Malformed wave file: {path} -> bad value at line {line_no}")
        return None

    return WaveSignal.from_samples(
        numeric["time"].to_numpy(dtype=float),
        numeric["value"].to_numpy(dtype=float),
        name=name,
    )
