import time
from typing import Any, Dict


class DiagnosticManager:
    """
    Collects simple run diagnostics: wall time, completed stages and
    arbitrary records (shapes, stats, funnel coverage).
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.start_time: float = 0.0
        self.elapsed: float = 0.0
        self.stages: list[str] = []
        self.records: Dict[str, Any] = {}

    def start(self) -> None:
        self.start_time = time.perf_counter()

    def stop(self) -> None:
        self.elapsed = time.perf_counter() - self.start_time

    def stage(self, name: str) -> None:
        """Note that a named pipeline stage finished."""
        self.stages.append(name)

    def record(self, key: str, value: Any) -> None:
        self.records[key] = value

    def summary(self) -> Dict[str, Any]:
        return {
            "stages": list(self.stages),
            "elapsed_s": round(self.elapsed, 6),
            **self.records,
        }

    def __repr__(self) -> str:
        return f"DiagnosticManager(stages={self.stages}, elapsed={self.elapsed:.3f}s)"
