from contextlib import contextmanager

from _oliword.header_check import FileHeaderCheck
from _oliword.tokenizer import OliwordTokenizer
from _oliword.writing import takes_stream, write


@takes_stream(0, "rb")
def read_bytes(file_stream):
    """
    Reads the entire document into memory.

    :param file_stream: A file-like object, (string to path, pathlib.Path
        or opened binary stream).
    """
    return file_stream.read()


@contextmanager
def lazy_tokenize(filelike):
    """
    Tokenizes an oliword document, ie.

    >>> with lazy_tokenize("/my/file.doc") as tokens:
    ...     for token in tokens:
    ...         print(token.kind)

    :param filelike: Path, opened binary stream or the bytes of the document.
    """
    if isinstance(filelike, (bytes, bytearray)):
        contents = filelike
    else:
        contents = read_bytes(filelike)

    yield iter(FileHeaderCheck(OliwordTokenizer(contents)))


def tokenize(filelike):
    """
    :param filelike: Path, opened binary stream or the bytes of the document.
    :returns: List of the tokens in the document.
    """
    with lazy_tokenize(filelike) as tokens:
        return list(tokens)


def convert(input_filelike, output_filelike):
    """
    Converts an oliword document to RTF, ie. convert("letter.doc", "letter.rtf").

    :param input_filelike: Path, opened binary stream or the bytes of the
        document.
    :param output_filelike: Path or opened text stream for the RTF output.
    """
    # The input is fully read before the output file is created.
    tokens = tokenize(input_filelike)
    write(output_filelike, tokens)
