"""Buffered CSV logging of nice-path searches."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence


class RunLogger:
    """Buffered logger that stores search diagnostics to CSV files.

    Each logger gets its own folder under ``root_dir`` named ``run_id`` (or
    ``YYYYmmdd_HHMMSS_run``), suffixed ``_1``, ``_2``, ... if that folder
    already exists. The chosen name is written to ``last_run.txt``.
    """

    CANDIDATES_HEADER = ["attempt", "x", "y", "ccw", "score", "switches", "penalty", "points"]
    EVENTS_HEADER = ["attempt", "type", "score", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        candidates_flush_threshold: int = 200,
        events_flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        base = run_id or datetime.now().strftime("%Y%m%d_%H%M%S_run")
        self.run_id = base
        suffix = 1
        while (self.root_dir / self.run_id).exists():
            self.run_id = f"{base}_{suffix}"
            suffix += 1
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True)

        self.candidates_path = self.run_dir / "candidates.csv"
        self.events_path = self.run_dir / "events.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._files = {
            "candidates": self._open_csv(self.candidates_path, self.CANDIDATES_HEADER),
            "events": self._open_csv(self.events_path, self.EVENTS_HEADER),
        }
        self._buffers: dict[str, list[str]] = {"candidates": [], "events": []}
        self._thresholds = {
            "candidates": max(1, candidates_flush_threshold),
            "events": max(1, events_flush_threshold),
        }

        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    @staticmethod
    def _open_csv(path: Path, header: Sequence[str]):
        fh = path.open("w", newline="")
        fh.write(",".join(header) + "\n")
        return fh

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_candidate(self, values: Sequence[object]) -> None:
        """Buffer one row per scored start point."""

        self._append("candidates", values)

    def log_event(self, values: Sequence[object]) -> None:
        """Buffer one row per search event, e.g. a new best candidate."""

        self._append("events", values)

    def close(self) -> None:
        for name, fh in self._files.items():
            if not fh.closed:
                self._flush(name)
                fh.close()

    def _append(self, name: str, values: Sequence[object]) -> None:
        buffer = self._buffers[name]
        buffer.append(",".join(self._format_value(v) for v in values))
        if len(buffer) >= self._thresholds[name]:
            self._flush(name)

    def _flush(self, name: str) -> None:
        buffer = self._buffers[name]
        if buffer:
            fh = self._files[name]
            fh.write("\n".join(buffer) + "\n")
            fh.flush()
            buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, bool):
            return str(int(value))
        if isinstance(value, (int, float)):
            return f"{value:.10g}"
        return str(value)

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["RunLogger"]
