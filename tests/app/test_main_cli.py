from __future__ import annotations

import pytest

from service_registration import main as main_module
from service_registration.config import (
    AmbariConfig,
    ConsulConfig,
    MalformedConfigurationError,
    SyncConfig,
)


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main_module, "configure_logging", lambda: None)


@pytest.mark.parametrize(
    "argv", [["version"], ["--version"], ["print-version"]], ids=["command", "flag", "suffix"]
)
def test_version_prints_and_returns(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], argv: list[str]
) -> None:
    def fail(**_: object) -> None:
        raise AssertionError("reconciliation must not start")

    monkeypatch.setattr(main_module, "run_service_registration", fail)

    main_module.main(argv)

    output = capsys.readouterr().out
    assert output.startswith("Version: ")
    assert output.strip() == main_module.version_string()


def test_unknown_command_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["status"])

    assert excinfo.value.code == 2


def test_main_runs_reconciliation_with_resolved_config(monkeypatch: pytest.MonkeyPatch) -> None:
    ambari = AmbariConfig(server="ambari.local", username="admin", password="secret")
    captured: dict[str, object] = {}

    def fake_run(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr(main_module, "get_ambari_config", lambda: ambari)
    monkeypatch.setattr(main_module, "run_service_registration", fake_run)
    monkeypatch.setenv("SERVICE_CHECK_POLL_INTERVAL", "2s")
    monkeypatch.setenv("REGISTRY_CONCURRENCY", "3")

    main_module.main([])

    assert captured == {
        "ambari": ambari,
        "consul": ConsulConfig(),
        "sync": SyncConfig(poll_interval=2.0, registry_concurrency=3),
    }


def test_configuration_error_exits_with_status_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> AmbariConfig:
        raise MalformedConfigurationError("Cannot parse file: /srv/pillar/ambari/server.sls")

    monkeypatch.setattr(main_module, "get_ambari_config", broken)

    with pytest.raises(SystemExit) as excinfo:
        main_module.main([])

    assert excinfo.value.code == 1


def test_shutdown_handler_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main_module.shutdown_handler(15, None)

    assert excinfo.value.code == 0
