"""
Signal shape classification.

Inspects the first part of a wave and decides how it should be treated by
the estimator: whether it is noisy, jumping (square-like) or a superposition
of several frequencies, which direction of change marks an event, and how
large a step must be to count as one.
"""

from typing import Literal, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from freqcall.analysis.core import WaveSignal

AR_PART = 3  # minimum part of amplitude range defining a jump
NOISE_PAIRS = 10  # leading sample pairs checked for noise
NOISE_FLIPS = 2  # more sign flips than this means noisy
LONG_SIGNAL = 1000  # longer signals are scanned by a quarter instead of a half
MAX_EQ_EPS = 1e-4  # value tolerance when comparing against the maximum


class SignalShape(BaseModel):
    """
    Output data model for signal classification.
    """

    model_config = ConfigDict(frozen=True)

    noisy: bool = False
    jumped: bool = False
    superposed: bool = False
    # 1: count summits (beginning of the fall), -1: count bottoms (beginning of the rise)
    sign_factor: Literal[1, -1] = 1
    tolerance: float = Field(..., gt=0)
    approx_period_points: int = Field(0, ge=0)
    amplitude_range: float = Field(..., gt=0)

    @property
    def splice(self) -> bool:
        """True if the wave has to be smoothed before counting"""
        return self.superposed or (self.noisy and not self.jumped)


def _diff_sign(a: float, b: float) -> bool:
    return a * b < 0.0


def _values_eq(a: float, b: float) -> bool:
    return abs(a - b) < MAX_EQ_EPS


class SignalClassifier:
    """신호 형태 판별 전용 클래스"""

    @staticmethod
    def is_noisy(values) -> bool:
        flips = 0
        prev_diff = None
        for i in range(1, min(len(values), NOISE_PAIRS + 1)):
            diff = values[i - 1] - values[i]
            if prev_diff is not None and _diff_sign(diff, prev_diff):
                flips += 1
            prev_diff = diff
        return flips > NOISE_FLIPS

    @staticmethod
    def scan_size(n_points: int) -> int:
        part = 4 if n_points > LONG_SIGNAL else 2
        return n_points // part

    def classify(self, signal: WaveSignal) -> Optional[SignalShape]:
        """
        Define signal signs and factors from the first part of the wave.

        Returns None if the wave is too short or too flat to be classified.
        """
        name = signal.name or "<signal>"
        if len(signal) < 3:
            logger.debug(f"{name}: only {len(signal)} points, cannot classify")
            return None

        dt = signal.dt
        if not dt > 0:
            logger.debug(f"{name}: non-positive time step {dt}")
            return None

        times = signal.time.tolist()
        values = signal.value.tolist()
        noisy = self.is_noisy(values)
        end = self.scan_size(len(values))

        # 1. 첫 구간의 최대/최소값 탐색
        max_vl: Optional[float] = None
        min_vl: Optional[float] = None
        min_tm = 0.0  # time of the latest min (or of a max reached after a min)
        for tm, vl in zip(times[:end], values[:end]):
            if max_vl is None or vl >= max_vl:
                if min_vl is not None:
                    min_tm = tm
                max_vl = vl
            elif min_vl is None or vl <= min_vl:
                min_vl = vl
                min_tm = tm

        if max_vl is None or min_vl is None:
            logger.debug(f"{name}: no min/max alternation in the first {end} points")
            return None
        amplitude_range = max_vl - min_vl
        if not amplitude_range > 0:
            logger.debug(f"{name}: flat signal")
            return None

        # 2. 점프 신호 여부 (square-like)
        crit_diff = amplitude_range / AR_PART
        jumped = False
        sign_factor = 1
        prev_vl = values[1]
        for vl in values[2:end]:
            diff = prev_vl - vl
            if abs(diff) > crit_diff:
                jumped = True
                if diff < 0:
                    sign_factor = -1
                break
            prev_vl = vl

        period_points = int(min_tm / dt)

        # 3. 주파수 중첩(변조) 여부
        superposed = False
        if not jumped and not noisy:
            prev_vl = values[0]
            for vl in values[1:end]:
                if vl < max_vl and prev_vl - vl > 0:
                    superposed = True
                    break
                if _values_eq(vl, max_vl):
                    break
                prev_vl = vl

        tolerance = amplitude_range / AR_PART
        if not jumped:
            if period_points < 1:
                logger.debug(f"{name}: period shorter than one sample")
                return None
            tolerance /= period_points

        shape = SignalShape(
            noisy=noisy,
            jumped=jumped,
            superposed=superposed,
            sign_factor=sign_factor,
            tolerance=tolerance,
            approx_period_points=max(period_points, 0),
            amplitude_range=amplitude_range,
        )
        logger.debug(
            f"{name}  noisy: {noisy}  jumped: {jumped}  superpos: {superposed}"
            f"  points: {period_points}  min_tm: {min_tm}  tolerance: {tolerance:.6g}"
        )
        return shape
