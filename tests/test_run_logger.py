"""Tests for RunLogger and serialization helpers."""

import json
from datetime import date
from pathlib import Path

from newsriver.data import Credentials, DayWindow, SearchRequest
from newsriver.run_logger import RunLogger, _serialize

REQUEST = SearchRequest(
    query="Google",
    from_date=date(2026, 10, 1),
    to_date=date(2026, 10, 2),
    language="en",
    limit=100,
    credentials=Credentials(token="secret-token", user_agent="me@example.com"),
)
WINDOW = DayWindow(day=date(2026, 10, 1), query="q")

# -- _serialize tests --


def test_serialize_none() -> None:
    assert _serialize(None) is None


def test_serialize_primitive() -> None:
    assert _serialize(42) == 42
    assert _serialize("hello") == "hello"
    assert _serialize(True) is True


def test_serialize_date() -> None:
    assert _serialize(date(2026, 10, 1)) == "2026-10-01"


def test_serialize_nested_containers() -> None:
    assert _serialize({"a": [date(2026, 1, 1), None]}) == {"a": ["2026-01-01", None]}


def test_serialize_dataclass() -> None:
    assert _serialize(WINDOW) == {"day": "2026-10-01", "query": "q"}


def test_serialize_request_drops_credentials() -> None:
    result = _serialize(REQUEST)
    assert result == {
        "query": "Google",
        "from_date": "2026-10-01",
        "to_date": "2026-10-02",
        "language": "en",
        "limit": 100,
    }


def test_serialize_credentials_hides_token() -> None:
    assert _serialize(REQUEST.credentials) == {"user_agent": "me@example.com"}


def test_serialize_path() -> None:
    assert _serialize(Path("/tmp/x")) == "/tmp/x"


# -- RunLogger tests --


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(tmp_path, enabled=False)
    run_logger.start_run(REQUEST)
    run_logger.log_day(WINDOW, status_code=200, rows=1, duration_seconds=0.1)
    assert run_logger.finish_run(1) is None
    assert run_logger.last_log_path is None
    assert list(tmp_path.iterdir()) == []


def test_finish_without_start_is_noop(tmp_path: Path) -> None:
    assert RunLogger(tmp_path).finish_run(0) is None


def test_writes_run_record(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"
    run_logger = RunLogger(log_dir)
    run_logger.start_run(REQUEST)
    run_logger.log_day(WINDOW, status_code=200, rows=3, duration_seconds=0.123456)
    run_logger.log_day(
        DayWindow(day=date(2026, 10, 2), query="q2"),
        status_code=429,
        rows=0,
        duration_seconds=0.05,
    )
    path = run_logger.finish_run(3)

    assert path is not None
    assert path.parent == log_dir
    assert path.name.startswith("run_")
    assert run_logger.last_log_path == path

    record = json.loads(path.read_text())
    assert record["request"]["query"] == "Google"
    assert record["total_rows"] == 3
    assert record["failed_days"] == 1
    assert record["days"][0]["day"] == "2026-10-01"
    assert record["days"][0]["duration_seconds"] == 0.1235
    assert record["days"][1]["ok"] is False
    assert record["completed_at"] is not None
    assert "secret-token" not in path.read_text()
