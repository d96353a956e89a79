"""Tests for the command-line entry point."""

import json
import logging

import pytest

from nodeflow.cli import main


def test_kinds(capsys) -> None:
    assert main(["kinds"]) == 0
    catalogue = json.loads(capsys.readouterr().out)
    assert catalogue["numberNode"]["name"] == "Number"
    assert catalogue["outputNode"]["autoEvaluateOnConnect"] is True


def test_run(tmp_path, capsys) -> None:
    path = tmp_path / "s.yaml"
    path.write_text(
        "nodes:\n  a: {kind: numberNode, data: [2]}\n  m: {kind: multiplicationNode, data: [0, 21]}\n"
        "edges:\n  - [a, 0, m, 0]\nevaluate: [m]\n"
    )
    assert main(["run", str(path)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["traces"]["m"]["m"]["outputs"] == [42]


def test_run_with_override_reports_error(tmp_path, capsys) -> None:
    path = tmp_path / "s.yaml"
    path.write_text(
        "nodes:\n  a: {kind: additionNode}\n  b: {kind: additionNode}\n"
        "edges:\n  - [a, 0, b, 0]\n  - [b, 0, a, 0]\n"
    )
    assert main(["run", str(path), "--set", "detect_cycles=true"]) == 1
    err = json.loads(capsys.readouterr().err)
    assert err["error"]["kind"] == "InvalidOperation"


def test_validate(tmp_path, capsys) -> None:
    path = tmp_path / "s.yaml"
    path.write_text("nodes:\n  a: {kind: nopeNode}\n")
    assert main(["validate", str(path)]) == 1
    assert json.loads(capsys.readouterr().out)["valid"] is False


@pytest.mark.parametrize(
    "script,args,kind",
    [
        ("steps:\n  - explode: {}\n", [], "ValueError"),
        ("nodes:\n  a: {data: [1]}\n", [], "KeyError"),
        ("nodes: {}\n", ["--set", "no_such_option=1"], "ConfigKeyError"),
    ],
)
def test_run_reports_malformed_input(tmp_path, capsys, package_logger, script, args, kind) -> None:
    path = tmp_path / "s.yaml"
    path.write_text(script)
    assert main(["run", str(path), *args]) == 1
    err = json.loads(capsys.readouterr().err)
    assert err["error"]["kind"] == kind
    assert err["error"]["message"]


def test_script_log_level_applies_unless_flag_given(tmp_path, capsys, package_logger) -> None:
    path = tmp_path / "s.yaml"
    path.write_text("config: {log_level: DEBUG}\nnodes: {}\n")
    assert main(["run", str(path)]) == 0
    assert package_logger.level == logging.DEBUG
    assert main(["--log-level", "ERROR", "run", str(path)]) == 0
    assert package_logger.level == logging.ERROR
