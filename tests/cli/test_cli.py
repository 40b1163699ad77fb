import json

from typer.testing import CliRunner

from hppshield.cli import app

runner = CliRunner()


def test_collapse_prints_last_values() -> None:
    result = runner.invoke(
        app, ["--log-level", "ERROR", "collapse", "username=admin&role=admin&username=guest"]
    )
    assert result.exit_code == 0
    assert json.loads(result.output.strip()) == {"username": "guest", "role": "admin"}


def test_collapse_strict_failure_exits_with_error() -> None:
    result = runner.invoke(app, ["--log-level", "CRITICAL", "collapse", "--strict", "a=%FF"])
    assert result.exit_code == 2


def test_classify() -> None:
    ok = runner.invoke(
        app, ["--log-level", "ERROR", "classify", "application/x-www-form-urlencoded; charset=UTF-8"]
    )
    assert ok.exit_code == 0
    assert ok.output.strip() == "true"

    rejected = runner.invoke(app, ["--log-level", "ERROR", "classify", "application/json"])
    assert rejected.exit_code == 1
    assert rejected.output.strip() == "false"


def test_accessors_lists_builtins() -> None:
    result = runner.invoke(app, ["--log-level", "ERROR", "accessors"])
    assert result.exit_code == 0
    assert {"raw_body", "url_search", "wsgi_query"} <= set(result.output.split())
