from dataclasses import dataclass
from typing import Optional

from _oliword.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in an oliword document. Only tokens of kind TokenKind.PRINTABLE
    carry a value, the character to be printed.
    """

    kind: TokenKind
    value: Optional[str] = None

    @classmethod
    def printable(cls, char):
        """
        :param char: Either a one character string or a byte value.
        """
        if isinstance(char, int):
            char = chr(char)
        return cls(TokenKind.PRINTABLE, char)
