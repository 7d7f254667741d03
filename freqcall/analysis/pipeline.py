"""
Frequency Recognition Pipeline Manager.
Loads wave files, classifies them and estimates their frequencies.
"""

import os
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel
from tqdm import tqdm

from freqcall.analysis.classifier import SignalClassifier, SignalShape
from freqcall.analysis.estimator import FrequencyEstimator
from freqcall.analysis.files import find_wave_files
from freqcall.analysis.loader import load_wave_csv


class FileFrequency(BaseModel):
    """
    Recognized frequency of one wave file.
    frequency_hz is None when the frequency could not be recognized.
    """

    file_name: str
    frequency_hz: Optional[float] = None
    shape: Optional[SignalShape] = None

    @property
    def frequency_khz(self) -> float:
        return (self.frequency_hz or 0.0) / 1000


class FrequencyPipeline:
    def __init__(self):
        self.classifier = SignalClassifier()
        self.estimator = FrequencyEstimator()

    def run(self, path: str) -> FileFrequency:
        """
        파일 하나를 읽어 신호 판별 후 주파수를 계산합니다.
        어떤 실패도 예외로 전파하지 않고 frequency_hz=None 으로 반환합니다.
        """
        result = FileFrequency(file_name=os.path.basename(path))

        # 1. 파일 로드
        signal = load_wave_csv(path)
        if signal is None:
            return result

        try:
            # 2. 신호 판별 (Classification)
            shape = self.classifier.classify(signal)
            if shape is None:
                return result
            result.shape = shape

            # 3. 주파수 계산 (Event Counting)
            estimate = self.estimator.estimate(signal, shape)
            result.frequency_hz = estimate.frequency_hz
        except Exception as e:
            logger.error(f"Frequency recognition failed for {path} -> {e}")

        return result

    def run_directory(
        self, directory: str, ext: str = "csv", show_progress: bool = True
    ) -> List[FileFrequency]:
        """
        Process every wave file of the directory in turn.
        Returns an empty list (after logging) if no file matches.
        """
        paths = find_wave_files(directory, ext)
        if not paths:
            logger.warning(f"No files *.{ext} in directory '{directory}'")
            return []

        results = []
        for path in tqdm(paths, disable=not show_progress, unit="file"):
            results.append(self.run(path))
        return results
