import warnings

from _oliword.tokenizer.token_kind import TokenKind


class FileHeaderCheck:
    """
    An iterator that passes through the tokens from a tokenizer and emits
    a warning if the document turns out to have no file header, which
    every oliword document has. The tokens are still generated, as the
    decoding is best-effort.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.found_header = False

    def __iter__(self):
        for token in self.tokens:
            if token.kind == TokenKind.FILE_HEADER:
                self.found_header = True
            yield token
        if not self.found_header:
            warnings.warn(
                "Did not find a file header, the input may not be an oliword document."
            )
