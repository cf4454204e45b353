"""Run logger for recording every per-day request of a search to JSON files."""

import dataclasses
import uuid
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from newsriver.data import Credentials, DayWindow, SearchRequest


class DayRecord(BaseModel):
    """Record of the request issued for a single DayWindow."""

    day: str
    query: str
    status_code: int
    rows: int = 0
    ok: bool = True
    timestamp: str = ""
    duration_seconds: float = 0.0


class RunRecord(BaseModel):
    """Record of a complete search run."""

    run_id: str
    request: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    days: list[DayRecord] = []
    total_rows: int = 0
    failed_days: int = 0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, dates, lists, dicts, and primitives.
    Credentials are never written out.
    """
    if obj is None:
        return None
    if isinstance(obj, Credentials):
        return {"user_agent": obj.user_agent}
    if isinstance(obj, SearchRequest):
        return {
            f.name: _serialize(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
            if f.name != "credentials"
        }
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _serialize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class RunLogger:
    """Accumulates per-day request records and writes a JSON log file per run.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: RunRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, request: SearchRequest) -> None:
        """Initialize a new run record for a validated request."""
        if not self._enabled:
            return

        self._record = RunRecord(
            run_id=str(uuid.uuid4()),
            request=_serialize(request),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_day(
        self,
        window: DayWindow,
        *,
        status_code: int,
        rows: int,
        duration_seconds: float,
    ) -> None:
        """Append the outcome of one DayWindow request to the current run."""
        if not self._enabled or self._record is None:
            return

        ok = status_code < 400
        self._record.days.append(
            DayRecord(
                day=window.day.isoformat(),
                query=window.query,
                status_code=status_code,
                rows=rows,
                ok=ok,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )
        if not ok:
            self._record.failed_days += 1

    def finish_run(self, total_rows: int) -> Path | None:
        """Write the run record to a JSON file.

        Args:
            total_rows: Number of rows in the combined table.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.total_rows = total_rows

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # run_2026-02-12T14-30-00.json (colons -> dashes)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"run_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
