"""Tests for the command-line interface."""

import io
import sys

import pytest

from orgtextile.cli import build_parser, main
from orgtextile.org_textile_settings import OrgTextileSettings


@pytest.fixture
def org_file(tmp_path):
    """Provide a small org-mode file."""
    path = tmp_path / "notes.org"
    path.write_text("* Title\nSome /text/\nwrapped.\n\n- item\n", encoding='utf-8')
    return path


def test_parser_defaults():
    """Test arguments are optional."""
    args = build_parser().parse_args([])
    assert args.input is None
    assert args.output is None
    assert args.config is None
    assert args.verbose is False


def test_convert_to_stdout(org_file, capsys):
    """Test converting a file prints Textile."""
    assert main([str(org_file)]) == 0
    assert capsys.readouterr().out == "h1. Title\nSome _text_ wrapped.\n\n\n* item\n"


def test_convert_to_file(org_file, tmp_path):
    """Test converting into an output file."""
    output = tmp_path / "notes.textile"
    assert main([str(org_file), "-o", str(output)]) == 0
    assert output.read_text(encoding='utf-8').startswith("h1. Title\n")


def test_convert_from_stdin(monkeypatch, capsys):
    """Test input is read from stdin when no file is given."""
    monkeypatch.setattr(sys, 'stdin', io.StringIO("1. one\n2. two\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "# one\n# two\n"


def test_config_applied(org_file, tmp_path, capsys):
    """Test settings from a YAML file change the output."""
    config = tmp_path / "settings.yaml"
    OrgTextileSettings(inline_substitution=False).save_to_file(str(config))

    assert main([str(org_file), "-c", str(config)]) == 0
    assert "Some /text/ wrapped." in capsys.readouterr().out


def test_write_config(tmp_path):
    """Test the effective settings can be saved."""
    config = tmp_path / "settings.yaml"
    assert main(["--write-config", str(config)]) == 0
    assert OrgTextileSettings.load_from_file(str(config)) == OrgTextileSettings()


def test_missing_input_fails(tmp_path, capsys):
    """Test an unreadable input file reports an error."""
    assert main([str(tmp_path / "absent.org")]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_bad_config_fails(org_file, tmp_path, capsys):
    """Test an invalid config file reports an error."""
    config = tmp_path / "settings.yaml"
    config.write_text("unknown: 1\n", encoding='utf-8')

    assert main([str(org_file), "-c", str(config)]) == 1
    assert "Unknown settings" in capsys.readouterr().out


def test_log_file(org_file, tmp_path):
    """Test verbose logs go to the requested file."""
    log_file = tmp_path / "orgtextile.log"
    assert main([str(org_file), "-v", "--log-file", str(log_file), "-o", str(tmp_path / "out.textile")]) == 0
    assert "OrgTextileConverter" in log_file.read_text(encoding='utf-8')


def test_non_utf8_input_fails(tmp_path, capsys):
    """Test undecodable input reports an error."""
    bad_input = tmp_path / "bad.org"
    bad_input.write_bytes(b"caf\xe9\n")

    assert main([str(bad_input)]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_non_utf8_config_fails(org_file, tmp_path, capsys):
    """Test an undecodable config file reports an error."""
    config = tmp_path / "settings.yaml"
    config.write_bytes(b'paragraph_join: "\xe9"\n')

    assert main([str(org_file), "-c", str(config)]) == 1
    assert "Failed to read configuration file" in capsys.readouterr().out
