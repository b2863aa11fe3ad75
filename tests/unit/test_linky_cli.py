"""Tests for the linky command line."""

import json
import logging

from typer.testing import CliRunner

from linky.api.link.FragmentError import FragmentError
from linky.api.link.LinkError import LinkError
from linky.cli import main
from linky.cli._create_app import _create_app
from linky.cli._log_error_chain import _log_error_chain

runner = CliRunner()


def _docs(tmp_path):
    guide = tmp_path / "guide.md"
    guide.write_text("# Intro\n\nSome text.\n", encoding="utf-8")
    readme = tmp_path / "README.md"
    readme.write_text(
        "[ok](guide.md#intro)\n[bad](guide.md#nope)\n[top](guide.md#)\n[gone](missing.md)\n",
        encoding="utf-8",
    )
    return readme


def test_extract_only_prints_every_link(tmp_path):
    readme = _docs(tmp_path)

    result = runner.invoke(_create_app(), [str(readme)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        f"{readme}:1:  guide.md#intro",
        f"{readme}:2:  guide.md#nope",
        f"{readme}:3:  guide.md#",
        f"{readme}:4:  missing.md",
    ]


def test_check_tags_broken_links(tmp_path):
    readme = _docs(tmp_path)

    result = runner.invoke(_create_app(), ["--check", str(readme)])

    assert result.exit_code == 1
    assert result.stdout.splitlines() == [
        f"{readme}:1:  guide.md#intro",
        f"{readme}:2: fragment-not-found guide.md#nope",
        f"{readme}:3: fragment-empty guide.md#",
        f"{readme}:4: no-document missing.md",
    ]


def test_muted_tags_are_hidden(tmp_path):
    readme = _docs(tmp_path)

    result = runner.invoke(
        _create_app(),
        ["-c", "-m", "fragment-empty", "-m", "fragment-not-found", "--mute", "no-document", str(readme)],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [f"{readme}:1:  guide.md#intro"]


def test_unknown_mute_tag_is_usage_error(tmp_path):
    result = runner.invoke(_create_app(), ["-m", "loud", str(_docs(tmp_path))])
    assert result.exit_code == 2


def test_root_and_prefix_options(tmp_path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "page.html").write_text('<h2 id="user-content-setup">Setup</h2>', encoding="utf-8")
    readme = tmp_path / "README.md"
    readme.write_text("[setup](/page.html#setup)\n", encoding="utf-8")

    unprefixed = runner.invoke(_create_app(), ["-c", "-r", str(site), str(readme)])
    prefixed = runner.invoke(_create_app(), ["-c", "-r", str(site), "-p", "user-content-", str(readme)])

    assert unprefixed.stdout == f"{readme}:1: fragment-not-found /page.html#setup\n"
    assert prefixed.exit_code == 0
    assert prefixed.stdout == f"{readme}:1:  /page.html#setup\n"


def test_stdin_triples_without_files():
    result = runner.invoke(_create_app(), [], input="docs/a.md:12: x http://example.com\n")

    assert result.exit_code == 0
    assert result.stdout == "docs/a.md:12:  http://example.com\n"


def test_malformed_stdin_is_fatal():
    result = runner.invoke(_create_app(), [], input="docs/a.md:1: x a.md\nnot a triple\n")

    assert result.exit_code == 2
    assert result.stdout == ""


def test_unreadable_document_does_not_stop_the_run(tmp_path):
    readme = _docs(tmp_path)

    result = runner.invoke(_create_app(), [str(tmp_path / "absent.md"), str(readme)])

    assert result.exit_code == 1
    assert len(result.stdout.splitlines()) == 4


def test_config_file_settings(tmp_path):
    readme = _docs(tmp_path)
    config = tmp_path / "linky.json"
    config.write_text(json.dumps({"check": True, "mute": ["fragment-empty", "fragment-not-found"]}), encoding="utf-8")

    result = runner.invoke(_create_app(), ["--config", str(config), str(readme)])

    assert result.exit_code == 1
    assert result.stdout.splitlines() == [
        f"{readme}:1:  guide.md#intro",
        f"{readme}:4: no-document missing.md",
    ]


def test_config_file_from_environment(tmp_path, monkeypatch):
    readme = _docs(tmp_path)
    config = tmp_path / "linky.json"
    config.write_text(json.dumps({"check": True}), encoding="utf-8")
    monkeypatch.setenv("LINKY_CONFIG", str(config))

    result = runner.invoke(_create_app(), ["-m", "no-document", str(readme)])

    assert "no-document" not in result.stdout
    assert "fragment-empty" in result.stdout


def test_invalid_config_file(tmp_path):
    config = tmp_path / "linky.json"
    config.write_text("{}}", encoding="utf-8")

    result = runner.invoke(_create_app(), ["--config", str(config), "x.md"])

    assert result.exit_code == 2
    assert result.stdout == ""


def test_cause_chain_is_logged_with_depth(caplog):
    error = LinkError("docs/b.md", "resolving fragment", FragmentError("x"))

    with caplog.at_level(logging.WARNING, logger="linky"):
        _log_error_chain(error, logging.getLogger("linky.cli"))

    assert caplog.messages == ["error: resolving fragment: docs/b.md", "  caused by: fragment not found: #x"]


def test_check_logs_cause_chain_for_unmuted_errors(tmp_path, caplog):
    readme = _docs(tmp_path)

    with caplog.at_level(logging.WARNING, logger="linky"):
        runner.invoke(_create_app(), ["-c", "-m", "fragment-empty", "-m", "no-document", str(readme)])

    assert f"error: resolving fragment: {tmp_path / 'guide.md'}" in caplog.messages
    assert "  caused by: fragment not found: #nope" in caplog.messages
    assert not any("empty fragment" in message for message in caplog.messages)


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "linky 0.1.0\n"


def test_main_returns_exit_code(tmp_path):
    readme = _docs(tmp_path)
    assert main([str(readme)]) == 0
    assert main(["--check", str(readme)]) == 1
    assert main(["--mute", "loud", str(readme)]) == 2
