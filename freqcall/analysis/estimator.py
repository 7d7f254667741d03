"""
Frequency estimation by counting fall-onset events.
"""

import math
from typing import Iterator, List, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, Field

from freqcall.analysis.classifier import SignalClassifier, SignalShape
from freqcall.analysis.core import WaveSignal
from freqcall.analysis.filters import SlidingAverage, SlidingMedian, window_from_half

LONG_SIGNAL = 2000  # longer signals get the wide average splicer
NOISY_MEDIAN_DIVISOR = 40  # median half-width = period points / 40 for noisy waves
SUPERPOSED_MEDIAN_HALF = 7
DEFAULT_MEDIAN_HALF = 1
WIDE_AVERAGE_HALF = 20
NARROW_AVERAGE_HALF = 4


class FrequencyEstimate(BaseModel):
    """
    Output data model for frequency estimation.
    """

    frequency_hz: Optional[float] = None
    event_count: int = 0
    first_event_time: Optional[float] = None
    last_event_time: Optional[float] = None
    event_times: List[float] = Field(default_factory=list)

    @property
    def is_known(self) -> bool:
        return self.frequency_hz is not None


class FrequencyEstimator:
    """
    Counts the beginnings of falls (or rises, for a negative sign factor)
    and turns their rate into a frequency.
    """

    @staticmethod
    def median_half_width(shape: SignalShape) -> int:
        if shape.noisy:
            return shape.approx_period_points // NOISY_MEDIAN_DIVISOR
        if shape.superposed:
            return SUPERPOSED_MEDIAN_HALF
        return DEFAULT_MEDIAN_HALF

    @staticmethod
    def average_half_width(n_points: int, shape: SignalShape) -> int:
        if n_points > LONG_SIGNAL or shape.superposed:
            return WIDE_AVERAGE_HALF
        return NARROW_AVERAGE_HALF

    @staticmethod
    def unblock_level(shape: SignalShape) -> float:
        """
        Largest step that unblocks counting once an event was registered.

        A raw wave unblocks on any step within tolerance, a spliced wave only
        once its direction reverses by more than the tolerance.
        """
        if shape.splice:
            return -shape.tolerance
        return shape.tolerance

    def effective_values(
        self, signal: WaveSignal, shape: SignalShape
    ) -> Iterator[Tuple[float, float]]:
        """
        Yields (time, value) pairs that take part in event counting.

        Without splicing these are the raw samples. With splicing each sample
        goes through the median splicer and then the average splicer, and is
        skipped until both produce an output.
        """
        times = signal.time.tolist()
        values = signal.value.tolist()
        if not shape.splice:
            yield from zip(times, values)
            return

        smm = SlidingMedian(window_from_half(self.median_half_width(shape)), values)
        sma = SlidingAverage(window_from_half(self.average_half_width(len(values), shape)))
        for i, tm in enumerate(times):
            median = smm.push(i)
            if median is None:
                break  # the rest of the wave is shorter than the median window
            average = sma.push(median)
            if average is not None:
                yield tm, average

    def estimate(self, signal: WaveSignal, shape: SignalShape) -> FrequencyEstimate:
        first_tm: Optional[float] = None
        last_tm: Optional[float] = None
        event_times: List[float] = []
        grow = True  # if true then signal is growing
        prev_vl: Optional[float] = None
        unblock = self.unblock_level(shape)

        for tm, vl in self.effective_values(signal, shape):
            if prev_vl is None:
                prev_vl = vl
                continue
            delta = shape.sign_factor * (prev_vl - vl)
            if delta > shape.tolerance:
                # the beginning of the fall (growth) is counted once,
                # after which counting is blocked
                if grow:
                    if event_times:
                        last_tm = tm
                    else:
                        first_tm = tm
                    event_times.append(tm)
                    grow = False
            elif delta <= unblock:
                # direction changed: unblock counting
                grow = True
            prev_vl = vl

        n = len(event_times)
        frequency = None
        if n >= 2 and last_tm is not None:
            span = last_tm - first_tm
            if span > 0:
                frequency = (n - 1) / span
                if not math.isfinite(frequency):
                    frequency = None

        logger.debug(f"{signal.name or '<signal>'}  events: {n}  frequency: {frequency}")
        return FrequencyEstimate(
            frequency_hz=frequency,
            event_count=n,
            first_event_time=first_tm,
            last_event_time=last_tm,
            event_times=event_times,
        )


def estimate_frequency(signal: WaveSignal) -> Optional[float]:
    """
    Classify the signal and estimate its frequency.

    Returns None when the frequency cannot be recognized.
    """
    shape = SignalClassifier().classify(signal)
    if shape is None:
        return None
    return FrequencyEstimator().estimate(signal, shape).frequency_hz
