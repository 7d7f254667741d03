"""
Core data structures for frequency recognition.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class WaveSignal:
    """
    파형 신호 데이터 컨테이너.
    이 객체 하나만 있으면 분류기(Classifier)와 추정기(Estimator)가 동작합니다.
    """

    time: np.ndarray  # 시간 (source unit, usually seconds)
    value: np.ndarray  # 측정값 (volts)
    name: str = ""  # 원본 파일 이름

    @classmethod
    def from_samples(cls, time, value, name: str = "") -> "WaveSignal":
        time_arr = np.asarray(time, dtype=float)
        value_arr = np.asarray(value, dtype=float)
        if time_arr.shape != value_arr.shape or time_arr.ndim != 1:
            raise ValueError(
                f"time and value must be 1-D arrays of equal length, "
                f"got {time_arr.shape} and {value_arr.shape}"
            )
        return cls(time=time_arr, value=value_arr, name=name)

    def __len__(self) -> int:
        return len(self.value)

    @property
    def dt(self) -> float:
        """Time step between the first two samples"""
        if len(self.time) < 2:
            return 0.0
        return float(self.time[1] - self.time[0])
