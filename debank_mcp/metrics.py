"""Minimal in-process metrics recorder (not suitable for multi-process aggregation)."""

from __future__ import annotations

from collections import Counter, deque
from threading import Lock
from typing import Deque, Dict, Tuple

TOOL_OUTCOMES = ("success", "error", "failure", "not_found")
MAX_RECENT_DURATIONS = 100


class MetricsRecorder:
    def __init__(self, max_recent_durations: int = MAX_RECENT_DURATIONS) -> None:
        self._lock = Lock()
        self._requests = 0
        self._request_durations_ms: Deque[Tuple[str, float]] = deque(maxlen=max_recent_durations)
        self._tool_outcomes: Dict[str, Counter[str]] = {outcome: Counter() for outcome in TOOL_OUTCOMES}

    def incr_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_duration(self, request_id: str, duration_ms: float) -> None:
        with self._lock:
            self._request_durations_ms.append((request_id, duration_ms))

    def record_tool(self, tool: str, *, outcome: str) -> None:
        """Count one tool invocation; ``error`` is a parameter error, ``failure`` a raised exception."""
        with self._lock:
            self._tool_outcomes.setdefault(outcome, Counter())[tool] += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "requests": self._requests,
                **{f"tool_{outcome}": dict(counts) for outcome, counts in self._tool_outcomes.items()},
                "recent_request_durations_ms": dict(self._request_durations_ms),
            }

    def reset(self) -> None:
        with self._lock:
            self._requests = 0
            self._request_durations_ms.clear()
            for counts in self._tool_outcomes.values():
                counts.clear()


default_metrics = MetricsRecorder()
