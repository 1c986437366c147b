"""Unit tests for the command line entry point and configuration."""

import importlib

import pytest

from log_callback import config
from log_callback.adapters import StdoutAdapter, WebhookAdapter
from log_callback.main import build_sink, coerce_arg, main


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config from the (patched) environment, restore afterwards."""
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_coerce_arg():
    """Words become int, float or str."""
    assert coerce_arg("1000") == 1000
    assert coerce_arg("-42") == -42
    assert coerce_arg("15.67") == 15.67
    assert coerce_arg("products") == "products"
    assert coerce_arg("nan") == "nan"
    assert coerce_arg("1.2.3") == "1.2.3"


def test_build_sink_table():
    """Known names build adapters, unknown names do not."""
    assert isinstance(build_sink("stdout"), StdoutAdapter)
    assert build_sink("syslog") is None


def test_build_sink_webhook_needs_url(monkeypatch):
    """Webhook sink requires LOG_WEBHOOK_URL."""
    monkeypatch.setattr(config, "LOG_WEBHOOK_URL", "")
    assert build_sink("webhook") is None

    monkeypatch.setattr(config, "LOG_WEBHOOK_URL", "http://test:8080/logs")
    sink = build_sink("webhook")
    assert isinstance(sink, WebhookAdapter)
    assert sink.url == "http://test:8080/logs"


def test_main_renders_to_stdout(monkeypatch, capsys):
    """CLI renders the template with coerced arguments."""
    monkeypatch.setattr(config, "LOG_SINK", "stdout")
    monkeypatch.setattr(config, "LOG_BUFFER_SIZE", 1024)

    main(["notice", "Index %s has %d documents", "products", "1000"])

    assert "NOTICE: Index products has 1000 documents" in capsys.readouterr().out


def test_main_respects_buffer_size(monkeypatch, capsys):
    """LOG_BUFFER_SIZE caps the message."""
    monkeypatch.setattr(config, "LOG_SINK", "stdout")
    monkeypatch.setattr(config, "LOG_BUFFER_SIZE", 6)

    main(["debug", "%s", "truncated"])

    assert capsys.readouterr().out.endswith("DEBUG: trunc\n")


def test_main_usage_error(capsys):
    """Missing arguments exit with status 1."""
    with pytest.raises(SystemExit) as exc:
        main(["debug"])

    assert exc.value.code == 1
    assert "ERROR: usage" in capsys.readouterr().err


def test_main_unknown_sink(monkeypatch, capsys):
    """Unknown sink names exit with status 1."""
    monkeypatch.setattr(config, "LOG_SINK", "syslog")
    monkeypatch.setattr(config, "LOG_BUFFER_SIZE", 1024)

    with pytest.raises(SystemExit) as exc:
        main(["debug", "hello"])

    assert exc.value.code == 1
    assert "sink 'syslog' unavailable" in capsys.readouterr().err


def test_main_rejects_zero_buffer(monkeypatch):
    """A buffer without room for the terminator is a config error."""
    monkeypatch.setattr(config, "LOG_BUFFER_SIZE", 0)

    with pytest.raises(SystemExit) as exc:
        main(["debug", "hello"])

    assert exc.value.code == 1


def test_config_reads_environment(monkeypatch, reload_config):
    """Environment variables override defaults."""
    monkeypatch.setenv("LOG_BUFFER_SIZE", "64")
    monkeypatch.setenv("LOG_SINK", "logging")
    monkeypatch.setenv("LOG_WEBHOOK_TIMEOUT", "oops")
    reload_config()

    assert config.LOG_BUFFER_SIZE == 64
    assert config.LOG_SINK == "logging"
    assert config.LOG_WEBHOOK_TIMEOUT == 10


def test_config_defaults(monkeypatch, reload_config):
    """Unset variables fall back to defaults."""
    for name in ("LOG_BUFFER_SIZE", "LOG_SINK", "LOG_WEBHOOK_URL"):
        monkeypatch.delenv(name, raising=False)
    reload_config()

    assert config.LOG_BUFFER_SIZE == 1024
    assert config.LOG_SINK == "stdout"
    assert config.LOG_WEBHOOK_URL == ""
