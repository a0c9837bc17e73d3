from enum import IntEnum, unique
from functools import cached_property

import numpy as np

from _oliword.tokenizer.cursor import ByteCursor
from _oliword.tokenizer.errors import TokenizationError
from _oliword.tokenizer.token import Token
from _oliword.tokenizer.token_kind import TokenKind

TAG_END = 0x7F
TAG_INDENT = 0x23
TAG_ALIGN_LEFT = 0x28
CARRIAGE_RETURN = 0x0D
BACKTICK = 0x60


@unique
class ByteClass(IntEnum):
    """
    The decoding rule selected by the leading byte of a sequence.
    """

    IGNORED = 0
    ZERO_TAG = 1
    FORMAT_TAG = 2
    ESCAPE = 3
    SECTION_END = 4
    UNDERLINE = 5
    PRINTABLE = 6
    TAB = 7
    NEWLINE = 8
    VERTICAL_TAB = 9
    NEW_PAGE = 10
    SPACE_LIKE = 11


def make_byte_classes():
    """
    :returns: Lookup table from byte value to ByteClass.
    """
    table = np.full(256, ByteClass.IGNORED, dtype=np.uint8)
    table[0x00] = ByteClass.ZERO_TAG
    table[0x04] = ByteClass.FORMAT_TAG
    table[0x1B] = ByteClass.ESCAPE
    table[0xFF] = ByteClass.SECTION_END
    table[0x1E] = ByteClass.UNDERLINE
    table[0x20:0x7F] = ByteClass.PRINTABLE
    table[0x09] = ByteClass.TAB
    table[[0x0A, 0x0D]] = ByteClass.NEWLINE
    table[0x0B] = ByteClass.VERTICAL_TAB
    table[0x0C] = ByteClass.NEW_PAGE
    # Appear where spaces are expected, their real meaning is unknown.
    table[0x80:0x8E] = ByteClass.SPACE_LIKE
    return table


byte_classes = make_byte_classes()


def is_visible(byte):
    """
    :returns: Whether byte is a printable non-space ascii character.
    """
    return byte is not None and 0x20 < byte <= 0x7E


def is_space_like(byte):
    return byte is not None and byte_classes[byte] == ByteClass.SPACE_LIKE


class OliwordTokenizer:
    """
    Iterable of tokens for the bytes of an oliword document.

    Every byte is consumed exactly once. Bytes that do not match any
    known rule are dropped, so tokenization never fails.

    >>> [t.value for t in OliwordTokenizer(b"Hi\\xff\\xff")]
    ['H', 'i', None]

    """

    def __init__(self, buffer):
        """
        :param buffer: The complete contents of the document as bytes.
        """
        self.cursor = ByteCursor(buffer)
        self.last_token = None

    @cached_property
    def tokenize_byte_class(self):
        return {
            ByteClass.IGNORED: self.tokenize_ignored,
            ByteClass.ZERO_TAG: self.tokenize_zero_tag,
            ByteClass.FORMAT_TAG: self.tokenize_format_tag,
            ByteClass.ESCAPE: self.tokenize_file_header,
            ByteClass.SECTION_END: self.tokenize_section_end,
            ByteClass.UNDERLINE: self.tokenize_underline,
            ByteClass.PRINTABLE: self.tokenize_printable,
            ByteClass.TAB: self.tokenize_tab,
            ByteClass.NEWLINE: self.single(TokenKind.NEWLINE),
            ByteClass.VERTICAL_TAB: self.tokenize_raw,
            ByteClass.NEW_PAGE: self.single(TokenKind.NEW_PAGE),
            ByteClass.SPACE_LIKE: self.tokenize_space_like,
        }

    def __iter__(self):
        while not self.cursor.at_end:
            byte_class = ByteClass(int(byte_classes[self.cursor.peek()]))
            try:
                tokens = list(self.tokenize_byte_class[byte_class]())
            except TokenizationError:
                continue
            for token in tokens:
                self.last_token = token
                yield token

    def single(self, kind):
        """
        Combinator for tokenizers that consume one byte and yield
        a token of the given kind.
        """

        def single_tokenizer():
            self.cursor.advance()
            yield Token(kind)

        return single_tokenizer

    def tokenize_ignored(self):
        self.cursor.advance()
        return iter([])

    def tokenize_raw(self):
        yield Token.printable(self.cursor.advance())

    def tokenize_space_like(self):
        self.cursor.advance()
        yield Token.printable(" ")

    def match_expected(self, *expected):
        """
        Consume one byte for each expected byte, stopping early only at the
        end of input. Running out of input counts as a match.

        :raises TokenizationError: If any consumed byte differs from
            the expected one.
        """
        start = self.cursor.position
        matched = True
        for expected_byte in expected:
            byte = self.cursor.advance()
            if byte is not None and byte != expected_byte:
                matched = False
        if not matched:
            raise TokenizationError(f"Expected {bytes(expected)} at {start}")

    def scan_tag(self, unknown_kind=None):
        """
        Scan the interior of a formatting tag up to and including the
        0x7F terminator.

        :param unknown_kind: The kind of token an unrecognized interior
            byte sets. If None, an unrecognized byte aborts the tag.
        :returns: The TokenKind set last before the terminator.
        :raises TokenizationError: If the tag is aborted, empty or
            not terminated.
        """
        start = self.cursor.position
        kind = None
        byte = self.cursor.advance()
        while byte is not None:
            if byte == TAG_END:
                if kind is None:
                    raise TokenizationError(f"Empty tag at {start}")
                return kind
            elif byte == TAG_INDENT:
                kind = TokenKind.INDENT
            elif byte == TAG_ALIGN_LEFT:
                kind = TokenKind.ALIGN_LEFT
            elif unknown_kind is None:
                raise TokenizationError(f"Unknown byte {byte:#04x} in tag at {start}")
            else:
                kind = unknown_kind
            byte = self.cursor.advance()
        raise TokenizationError(f"Reached end of input while reading tag at {start}")

    def tokenize_zero_tag(self):
        """
        Tokenize b"\\0" followed by tag contents, ie. yields
        Token(TokenKind.INDENT) for b"\\0#\\x7f".
        """
        self.cursor.advance()
        yield Token(self.scan_tag())

    def tokenize_format_tag(self):
        """
        Tokenize b"\\x04\\0" followed by tag contents and terminator. The
        tag ends a line, so a newline token follows unless the document
        has a carriage return right after the tag.
        """
        start = self.cursor.position
        self.cursor.advance()
        if self.cursor.peek() != 0x00:
            raise TokenizationError(f"Expected 0x00 after 0x04 at {start}")
        # TODO: find out which interior bytes select centering, any unknown
        # byte is taken to mean center for now.
        yield Token(self.scan_tag(unknown_kind=TokenKind.ALIGN_CENTER))
        if self.cursor.peek() != CARRIAGE_RETURN:
            yield Token(TokenKind.NEWLINE)

    def tokenize_file_header(self):
        self.cursor.advance()
        self.match_expected(0x1B)
        yield Token(TokenKind.FILE_HEADER)

    def tokenize_section_end(self):
        self.cursor.skip_run(0xFF)
        yield Token(TokenKind.END_SECTION)

    def tokenize_underline(self):
        self.cursor.advance()
        self.match_expected(0x02, 0x1F)
        yield Token(TokenKind.UNDERLINE)

    def tokenize_tab(self):
        self.cursor.advance()
        if self.last_token is not None and self.last_token.kind == TokenKind.NEWLINE:
            yield Token(TokenKind.INDENT)
        else:
            yield Token.printable("\t")

    def tokenize_printable(self):
        """
        Tokenize a printable character. Accented letters are written as
        the letter followed by a backtick, except é which is written as
        "he`" and yields [Token.printable("h"), Token(TokenKind.E_ACUTE)].
        Words are not reliably delimited after an accented letter, so a
        space is inserted when another visible character follows.
        """
        byte = self.cursor.advance()
        graves = TokenKind.graves()
        if byte == ord("h"):
            yield Token.printable(byte)
            accented = yield from self.tokenize_after_h()
        elif byte in graves and self.cursor.peek() == BACKTICK:
            self.cursor.advance()
            yield Token(graves[byte])
            accented = True
        else:
            yield Token.printable(byte)
            return

        if accented and is_visible(self.cursor.peek()):
            yield Token.printable(" ")

    def tokenize_after_h(self):
        """
        Tokenize what follows an "h", where "e`" is an e-acute.

        :returns: Whether an e-acute was found.
        """
        byte = self.cursor.advance()
        if byte is None:
            return False
        if byte != ord("e"):
            yield Token.printable(byte)
            return False

        byte = self.cursor.advance()
        if byte is None:
            return False
        if byte == BACKTICK:
            yield Token(TokenKind.E_ACUTE)
            return True

        yield Token.printable("e")
        if is_visible(byte):
            yield Token.printable(byte)
        elif is_space_like(byte):
            yield Token.printable(" ")
        return False
