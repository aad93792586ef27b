import io
import json
from pathlib import Path

import pytest

from sequence_splitter import __version__
from sequence_splitter.presentation.cli.main import create_parser, main


def run(capsys, argv):
    exit_code = main(argv)
    return exit_code, capsys.readouterr()


def test_cli_version_output(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_cli_split_on_text(capsys) -> None:
    exit_code, captured = run(capsys, ["--on", ", ", "--text", "a, b, , c"])
    assert exit_code == 0
    assert json.loads(captured.out) == ["a", "b", "", "c"]


def test_cli_policy_flags(capsys) -> None:
    exit_code, captured = run(
        capsys,
        ["--one-of", ":", "--drop-blanks", "--text", "::a:::b::"],
    )
    assert exit_code == 0
    assert json.loads(captured.out) == ["a", "b"]


def test_cli_disposition_and_lines_format(capsys) -> None:
    exit_code, captured = run(
        capsys,
        [
            "--one-of",
            ".!",
            "--disposition",
            "keep_with_preceding",
            "--drop-final-blank",
            "--format",
            "lines",
            "--text",
            "Hi.Yes!",
        ],
    )
    assert exit_code == 0
    assert captured.out.splitlines() == ["Hi.", "Yes!"]


def test_cli_when_class(capsys) -> None:
    exit_code, captured = run(capsys, ["--when", "digit", "--condense", "--text", "a12b3c"])
    assert exit_code == 0
    assert json.loads(captured.out) == ["a", "b", "c"]


def test_cli_reads_stdin(capsys, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("x|y"))
    exit_code, captured = run(capsys, ["--on", "|"])
    assert exit_code == 0
    assert json.loads(captured.out) == ["x", "y"]


def test_cli_reads_input_file(capsys, tmp_path: Path) -> None:
    source = tmp_path / "input.txt"
    source.write_text("one;two", encoding="utf-8")
    exit_code, captured = run(capsys, ["--one-of", ";", "--input", str(source)])
    assert exit_code == 0
    assert json.loads(captured.out) == ["one", "two"]


def test_cli_config_file_with_override(capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "splitter.json"
    config_path.write_text(json.dumps({"on": "::"}), encoding="utf-8")
    exit_code, captured = run(
        capsys,
        ["--config", str(config_path), "--disposition", "keep", "--text", "a::b"],
    )
    assert exit_code == 0
    assert json.loads(captured.out) == ["a", "::", "b"]


def test_cli_chunk_modes(capsys) -> None:
    exit_code, captured = run(capsys, ["--chunk-every", "2", "--text", "abcde"])
    assert exit_code == 0
    assert json.loads(captured.out) == ["ab", "cd", "e"]

    exit_code, captured = run(capsys, ["--chunk-sizes", "1,2,10", "--text", "abcde"])
    assert exit_code == 0
    assert json.loads(captured.out) == ["a", "bc"]


def test_cli_invalid_config_returns_error(capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "splitter.json"
    config_path.write_text(json.dumps({"on": ":", "run_policy": "squash"}), encoding="utf-8")
    exit_code, captured = run(capsys, ["--config", str(config_path), "--text", "a:b"])
    assert exit_code == 2
    assert "Invalid run_policy" in captured.err


def test_cli_missing_input_file(capsys, tmp_path: Path) -> None:
    exit_code, captured = run(capsys, ["--on", ":", "--input", str(tmp_path / "missing.txt")])
    assert exit_code == 2
    assert captured.err.startswith("Error:")


def test_parser_rejects_two_delimiters() -> None:
    parser = create_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--on", ":", "--one-of", ";"])


def test_parser_rejects_bad_sizes() -> None:
    parser = create_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--chunk-every", "0"])
    with pytest.raises(SystemExit):
        parser.parse_args(["--chunk-sizes", "1,-2"])


def test_cli_verbose_logs_splitter(capsys) -> None:
    exit_code, captured = run(capsys, ["--on", ":", "--verbose", "--text", "a:b"])
    assert exit_code == 0
    assert "Using splitter" in captured.err


def test_cli_rejects_non_utf8_input(capsys, tmp_path: Path) -> None:
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"caf\xe9;x")
    exit_code, captured = run(capsys, ["--one-of", ";", "--input", str(source)])
    assert exit_code == 2
    assert captured.err.startswith("Error:")
    assert captured.out == ""


def test_cli_rejects_non_string_delimiter_in_config(capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "splitter.json"
    config_path.write_text(json.dumps({"one_of": 5}), encoding="utf-8")
    exit_code, captured = run(capsys, ["--config", str(config_path), "--text", "a5b"])
    assert exit_code == 2
    assert "Delimiter must be a string" in captured.err


@pytest.mark.parametrize(
    "policy",
    [
        ["--disposition", "keep"],
        ["--condense"],
        ["--drop-init-blank"],
        ["--drop-final-blank"],
        ["--drop-blanks"],
    ],
)
def test_cli_rejects_policies_with_fixed_size_chunking(capsys, policy) -> None:
    for mode in (["--chunk-every", "2"], ["--chunk-sizes", "1,2"]):
        with pytest.raises(SystemExit) as exc:
            main(mode + policy + ["--text", "abc"])
        assert exc.value.code == 2
        assert "cannot be combined" in capsys.readouterr().err
