import oliword.version
from _oliword.reading import convert, lazy_tokenize, tokenize
from _oliword.rendering import Alignment
from _oliword.tokenizer import Token, TokenKind
from _oliword.writing import render, write

__author__ = """Oliword developers"""

__version__ = oliword.version.version

__all__ = [
    "Alignment",
    "Token",
    "TokenKind",
    "convert",
    "lazy_tokenize",
    "render",
    "tokenize",
    "write",
]
