import pytest

from _oliword.cli import main
from _oliword.writing import RTF_PREAMBLE


@pytest.mark.parametrize("argv", [[], ["letter.doc"]])
def test_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
    assert "usage: oliword2rtf" in capsys.readouterr().err


def test_converts_file(tmp_path, capsys):
    in_file = tmp_path / "letter.doc"
    out_file = tmp_path / "letter.rtf"
    in_file.write_bytes(b"\x1b\x1bCiao\x0c")

    assert main([str(in_file), str(out_file)]) == 0

    out = capsys.readouterr().out
    assert f"Input file: {in_file}" in out
    assert f"Output file: {out_file}" in out
    assert out_file.read_text(encoding="utf-8") == (
        RTF_PREAMBLE + "\n{\\pard \\pagebb \\qj Ciao \\par}\n}\n"
    )


def test_missing_input(tmp_path, capsys):
    in_file = tmp_path / "missing.doc"
    with pytest.raises(SystemExit) as exc_info:
        main([str(in_file), str(tmp_path / "out.rtf")])
    assert exc_info.value.code == 1
    assert str(in_file) in capsys.readouterr().err


def test_output_cannot_be_created(tmp_path, capsys):
    in_file = tmp_path / "letter.doc"
    in_file.write_bytes(b"\x1b\x1bCiao")
    out_file = tmp_path / "no_such_dir" / "out.rtf"
    with pytest.raises(SystemExit) as exc_info:
        main([str(in_file), str(out_file)])
    assert exc_info.value.code == 1
    assert str(out_file) in capsys.readouterr().err
