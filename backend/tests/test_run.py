import pytest

import run
from expense_tracker.config import get_settings


@pytest.fixture
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults_come_from_settings(fresh_settings):
    fresh_settings.setenv("EXPENSE_TRACKER_HOST", "0.0.0.0")
    fresh_settings.setenv("EXPENSE_TRACKER_PORT", "9100")

    args = run.parse_args([])

    assert (args.host, args.port) == ("0.0.0.0", 9100)
    assert args.reload is False


def test_main_passes_settings_to_uvicorn(fresh_settings):
    fresh_settings.setenv("EXPENSE_TRACKER_LOG_LEVEL", "WARNING")
    fresh_settings.setenv("EXPENSE_TRACKER_DATABASE_URL", "postgresql://app:secret@db/expenses")
    calls = []
    fresh_settings.setattr(run.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    run.main(["--port", "8123", "--reload"])

    assert calls == [(
        "expense_tracker.main:app",
        {"host": "127.0.0.1", "port": 8123, "reload": True, "log_level": "warning"},
    )]


def test_database_password_hidden(fresh_settings, capsys):
    fresh_settings.setenv("EXPENSE_TRACKER_DATABASE_URL", "postgresql://app:secret@db/expenses")
    fresh_settings.setattr(run.uvicorn, "run", lambda target, **kwargs: None)

    run.main([])

    assert "secret" not in capsys.readouterr().out


def test_qr_skipped_for_loopback(fresh_settings, capsys):
    printed = []
    fresh_settings.setattr(run, "print_qr_code", printed.append)
    fresh_settings.setattr(run.uvicorn, "run", lambda target, **kwargs: None)

    run.main(["--qr"])
    run.main(["--qr", "--host", "192.168.1.20"])

    assert printed == ["http://192.168.1.20:8000"]
    assert "QR code skipped" in capsys.readouterr().out
