import io

import pytest

import oliword
from _oliword.reading import read_bytes
from oliword import Token, TokenKind

CONTENTS = b"\x1b\x1bCiao\n"
EXPECTED = [
    Token(TokenKind.FILE_HEADER),
    Token.printable("C"),
    Token.printable("i"),
    Token.printable("a"),
    Token.printable("o"),
    Token(TokenKind.NEWLINE),
]


@pytest.fixture(params=["bytes", "stream", "path", "str"])
def filelike(request, tmp_path):
    if request.param == "bytes":
        return CONTENTS
    if request.param == "stream":
        return io.BytesIO(CONTENTS)
    in_file = tmp_path / "letter.doc"
    in_file.write_bytes(CONTENTS)
    if request.param == "path":
        return in_file
    return str(in_file)


def test_tokenize(filelike):
    assert oliword.tokenize(filelike) == EXPECTED


def test_lazy_tokenize(filelike):
    with oliword.lazy_tokenize(filelike) as tokens:
        assert next(tokens) == Token(TokenKind.FILE_HEADER)
        assert list(tokens) == EXPECTED[1:]


def test_read_bytes_from_path(tmp_path):
    in_file = tmp_path / "letter.doc"
    in_file.write_bytes(b"\xff\x00\x04")
    assert read_bytes(in_file) == b"\xff\x00\x04"


def test_missing_file_header_warns():
    with pytest.warns(UserWarning, match="file header"):
        assert oliword.tokenize(b"Ciao") == EXPECTED[1:5]


def test_missing_input_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        oliword.tokenize(tmp_path / "missing.doc")


def test_convert(tmp_path):
    in_file = tmp_path / "letter.doc"
    out_file = tmp_path / "letter.rtf"
    in_file.write_bytes(CONTENTS)

    oliword.convert(in_file, out_file)

    assert out_file.read_text(encoding="utf-8") == oliword.render(EXPECTED)


def test_convert_to_stream():
    out = io.StringIO()
    oliword.convert(CONTENTS, out)
    assert "{\\pard \\qj Ciao \\par}\n" in out.getvalue()


def test_convert_does_not_create_output_for_missing_input(tmp_path):
    out_file = tmp_path / "letter.rtf"
    with pytest.raises(FileNotFoundError):
        oliword.convert(tmp_path / "missing.doc", out_file)
    assert not out_file.exists()
