"""Rolling history of evaluated frames for trend charts and session summaries."""

import numpy as np
from collections import deque
from dataclasses import dataclass
from typing import Dict, List

from ..core.posture_evaluator import EvaluationResult
from ..core.status import StatusLabel


@dataclass
class LoadSummary:
    mean_load: float
    peak_load: float
    mean_posture_score: float
    status_share: Dict[str, float]
    count: int

    def to_dict(self):
        return {
            'mean_load': self.mean_load,
            'peak_load': self.peak_load,
            'mean_posture_score': self.mean_posture_score,
            'status_share': dict(self.status_share),
            'count': self.count
        }


class LoadHistory:
    """Time-windowed store of (timestamp_ms, EvaluationResult)."""

    def __init__(self, window_seconds: float = 300.0):
        self.window_ms = window_seconds * 1000
        self._data: deque = deque()

    def add(self, result: EvaluationResult, timestamp: float):
        self._data.append((timestamp, result))
        cutoff = timestamp - self.window_ms
        while self._data and self._data[0][0] < cutoff:
            self._data.popleft()

    @property
    def timestamps(self) -> List[float]:
        return [t for t, _ in self._data]

    @property
    def load_scores(self) -> List[float]:
        return [r.load_score for _, r in self._data]

    @property
    def trunk_angles(self) -> List[float]:
        return [r.trunk_angle for _, r in self._data]

    @property
    def count(self) -> int:
        return len(self._data)

    def summary(self) -> LoadSummary:
        if not self._data:
            return LoadSummary(0.0, 0.0, 0.0, {s.value: 0.0 for s in StatusLabel}, 0)

        loads = np.array(self.load_scores)
        scores = np.array([r.posture_score for _, r in self._data])
        n = len(self._data)
        share = {s.value: sum(1 for _, r in self._data if r.load_status is s) / n
                 for s in StatusLabel}
        return LoadSummary(
            mean_load=round(float(loads.mean()), 1),
            peak_load=float(loads.max()),
            mean_posture_score=round(float(scores.mean()), 1),
            status_share=share,
            count=n
        )

    def reset(self):
        self._data.clear()
