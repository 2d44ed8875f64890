import io
import json

import pytest

from repertoire.cli import build_parser, main


def _opening_file(tmp_path):
    path = tmp_path / "study.opening"
    path.write_text(
        json.dumps(
            {
                "author": "Tester",
                "date_modified": 1700000000,
                "name": "Caro Kann",
                "description": "Solid defence",
                "moves": {"e4": {"note": "King pawn"}, "e4-c6": {"note": "Reply"}},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_parser_study_option():
    args = build_parser().parse_args(["-s", "x.opening"])
    assert args.study == "x.opening"
    assert args.new is False


def test_parser_new_option():
    args = build_parser().parse_args(["--new"])
    assert args.new is True
    assert args.study is None


def test_both_options_rejected(capsys):
    assert main(["-s", "x.opening", "-n"]) == 1
    assert "Cannot specify both --study and --new options" in capsys.readouterr().err


def test_no_option_rejected(capsys):
    assert main([]) == 1
    assert "Must specify either --study or --new option" in capsys.readouterr().err


def test_new_session(capsys):
    assert main(["--new"]) == 0
    assert "Starting new opening study session" in capsys.readouterr().out


def test_bad_extension(tmp_path, capsys):
    assert main(["--study", str(tmp_path / "study.txt")]) == 1
    err = capsys.readouterr().err
    assert "Error loading opening file: Invalid file extension. Expected .opening, got txt" in err


def test_missing_file(tmp_path, capsys):
    assert main(["--study", str(tmp_path / "absent.opening")]) == 1
    assert "Error loading opening file: Failed to read file" in capsys.readouterr().err


def test_study_session(tmp_path, capsys, monkeypatch):
    path = _opening_file(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("list\nquit\n"))
    assert main(["-s", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Studying: Caro Kann" in out
    assert "  e4-c6\n" in out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "repertoire" in capsys.readouterr().out