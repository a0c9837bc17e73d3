"""
In this module, a tokenizer is a generator that consumes bytes from a
ByteCursor and generates tokens.

The oliword format is undocumented and only partly understood, so
tokenization is best-effort: any byte that does not fit a known rule is
dropped. Multi-byte tags are read with at most one byte of lookahead and no
backtracking; when a tag turns out not to be valid, the consumed bytes stay
consumed, a TokenizationError is raised internally and no token is
generated for the tag.

Apart from printable characters, the format contains:

* 0x00 ... 0x7F and 0x04 0x00 ... 0x7F formatting tags (indent, alignment),
* 0x1B 0x1B starting the file header,
* runs of 0xFF ending a section,
* 0x1E 0x02 0x1F underlining the following character,
* accented letters written as the letter followed by a backtick.
"""

from .oliword_tokenizer import OliwordTokenizer
from .token import Token
from .token_kind import TokenKind

__all__ = ["OliwordTokenizer", "Token", "TokenKind"]
