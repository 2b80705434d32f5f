from pathlib import Path

import pytest

import view_logs
from restweb.config import get_app_config


ACCESS_LINES = [
    "2026-10-19 10:00:00 | ACCESS | method=GET | path=/api/hello | client=10.0.0.1 | status=200 | response_time=0.002s",
    "2026-10-19 10:00:01 | ACCESS | method=GET | path=/api/greet/John | client=10.0.0.1 | status=200 | response_time=0.004s",
    "2026-10-19 10:00:02 | ACCESS | method=GET | path=/api/greet/Mary%20Ann | client=10.0.0.2 | status=200 | response_time=0.003s",
    "2026-10-19 10:00:03 | ACCESS | method=POST | path=/api/echo | client=10.0.0.2 | status=200 | response_time=0.005s",
    "2026-10-19 10:00:04 | ACCESS | method=POST | path=/api/echo | client=unknown | status=400 | response_time=0.001s",
    "2026-10-19 10:00:05 | ACCESS | method=GET | path=/api/health | client=10.0.0.3 | status=200 | response_time=0.001s",
    "2026-10-19 10:00:06 | ACCESS | method=GET | path=/api/hellothere | client=10.0.0.3 | status=404 | response_time=0.001s",
]

MAIN_LINES = [
    "2026-10-19 10:00:00 | restweb.config | INFO | Server started at 2026-10-19T10:00:00",
    "2026-10-19 10:00:04 | restweb.config | WARNING | POST /api/echo rejected: unreadable request body",
    "2026-10-19 10:00:07 | restweb.config | ERROR | GET /api/hello failed: boom (0.001s)",
    "2026-10-19 10:00:08 | restweb.api.health | INFO | ERROR in a message is not an error line",
]


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    (tmp_path / "restweb_access.log").write_text("\n".join(ACCESS_LINES) + "\n", encoding="utf-8")
    (tmp_path / "restweb.log").write_text("\n".join(MAIN_LINES) + "\n", encoding="utf-8")
    return tmp_path


def test_parse_access_line():
    fields = view_logs.parse_access_line(ACCESS_LINES[2])
    assert fields == {
        "method": "GET",
        "path": "/api/greet/Mary%20Ann",
        "client": "10.0.0.2",
        "status": "200",
        "response_time": "0.003s",
    }


def test_collect_stats_counts_endpoints(log_dir):
    stats = view_logs.collect_stats(log_dir)
    assert stats['total_requests'] == 7
    assert stats['hello'] == 1
    assert stats['greet'] == 2
    assert stats['echo'] == 2
    assert stats['health'] == 1
    assert stats['other'] == 1
    assert stats['bad_requests'] == 1


def test_collect_stats_clients_and_names(log_dir):
    stats = view_logs.collect_stats(log_dir)
    assert stats['clients'] == {"10.0.0.1", "10.0.0.2", "10.0.0.3"}
    assert stats['greeted_names'] == {"John", "Mary Ann"}
    assert stats['response_times'] == [0.002, 0.004, 0.003, 0.005, 0.001, 0.001, 0.001]


def test_collect_stats_errors_and_warnings(log_dir):
    stats = view_logs.collect_stats(log_dir)
    assert stats['errors'] == 1
    assert stats['warnings'] == 1


def test_collect_stats_missing_logs(tmp_path):
    stats = view_logs.collect_stats(tmp_path)
    assert stats['total_requests'] == 0
    assert stats['response_times'] == []


@pytest.mark.parametrize("raw, decoded", [
    ("Mary%20Ann", "Mary Ann"),
    ("x%20%7C%20status%3D400", "x | status=400"),
    ("y%20%7C%20path%3D/api/echo%20%7C%20status%3D200", None),
    ("ERROR", "ERROR"),
])
def test_greeted_names_survive_served_requests(client, raw, decoded):
    logs_dir = Path(get_app_config().logs_dir)
    before = view_logs.collect_stats(logs_dir)

    response = client.get(f"/api/greet/{raw}")
    after = view_logs.collect_stats(logs_dir)

    if decoded is None:
        # an encoded slash splits the segment, so nothing is greeted
        assert response.status_code == 404
        assert after['greet'] == before['greet']
    else:
        assert response.status_code == 200
        assert decoded in after['greeted_names']
        assert after['greet'] == before['greet'] + 1
    assert after['total_requests'] == before['total_requests'] + 1
    assert after['bad_requests'] == before['bad_requests']


def test_analyze_logs_prints_summary(log_dir, capsys):
    view_logs.analyze_logs(log_dir)
    out = capsys.readouterr().out
    assert "RESTWEB LOG ANALYSIS" in out
    assert "Greeted Names:      'John', 'Mary Ann'" in out
    assert "max 0.005s" in out


def test_main_analyzes_log_dir(log_dir, capsys):
    view_logs.main(["--log-dir", str(log_dir)])
    assert "Total Requests:     7" in capsys.readouterr().out


def test_main_missing_log_dir_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        view_logs.main(["--log-dir", str(tmp_path / "absent")])
    assert exc_info.value.code == 1
    assert "Log directory not found" in capsys.readouterr().out
