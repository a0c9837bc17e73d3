"""
A renderer consumes from an iterator of tokens (see _oliword.tokenizer) and
generates RTF paragraph groups, one for every line, page or section that
ends in the document.

Only the first and third sections of a document contain the text, the
other sections are dropped.
"""

from dataclasses import dataclass
from enum import Enum, unique
from itertools import tee, zip_longest

from _oliword.tokenizer.token_kind import TokenKind

RENDERED_SECTIONS = (0, 2)

EMPHASIS_OPEN = "{{\\ul "
EMPHASIS_CLOSE = "}}"
INDENT = "  \t"


@unique
class Alignment(Enum):
    JUSTIFY = "j"
    CENTER = "c"
    LEFT = "l"


def paragraph_group(text, alignment=Alignment.JUSTIFY, page_break=False):
    """
    :returns: The RTF paragraph group containing text, ie.
        "{\\pard \\qc Title \\par}" for paragraph_group("Title", Alignment.CENTER).
    """
    page_break_directive = "\\pagebb " if page_break else ""
    if not text:
        return f"{{\\pard {page_break_directive}\\par}}"
    return f"{{\\pard {page_break_directive}\\q{alignment.value} {text} \\par}}"


def unicode_escape(code_point):
    return f"\\u{code_point}  "


@dataclass
class RenderState:
    """
    The state of the renderer between two tokens.

    :param section_index: The number of sections ended so far.
    :param paragraph: The RTF text of the paragraph being built.
    :param alignment: The alignment used when the paragraph is flushed.
    :param emphasis: Whether paragraph has an open underline group.
    """

    section_index: int = 0
    paragraph: str = ""
    alignment: Alignment = Alignment.JUSTIFY
    emphasis: bool = False

    @property
    def is_rendering(self):
        return self.section_index in RENDERED_SECTIONS

    def flush(self, page_break=False):
        """
        End the current paragraph.

        :returns: The RTF paragraph group for the paragraph.
        """
        group = paragraph_group(self.paragraph, self.alignment, page_break)
        self.paragraph = ""
        self.alignment = Alignment.JUSTIFY
        return group


def transition(state, token, next_token=None):
    """
    Apply one token to the render state.

    :param state: The RenderState, updated in place.
    :param token: The token to apply.
    :param next_token: The token following token, or None at the end
        of the stream.
    :returns: The RTF paragraph group flushed by the token, or None.
    """
    kind = token.kind
    if kind == TokenKind.END_SECTION:
        group = state.flush() if state.paragraph else None
        state.section_index += 1
        return group

    if not state.is_rendering:
        return None

    if kind == TokenKind.PRINTABLE:
        state.paragraph += token.value
        if (
            state.emphasis
            and next_token is not None
            and next_token.kind != TokenKind.UNDERLINE
        ):
            state.paragraph += EMPHASIS_CLOSE
            state.emphasis = False
    elif kind in TokenKind.accents():
        state.paragraph += unicode_escape(TokenKind.accents()[kind])
    elif kind == TokenKind.NEWLINE:
        return state.flush()
    elif kind == TokenKind.NEW_PAGE:
        return state.flush(page_break=True)
    elif kind == TokenKind.ALIGN_CENTER:
        state.alignment = Alignment.CENTER
    elif kind == TokenKind.ALIGN_LEFT:
        state.alignment = Alignment.LEFT
    elif kind == TokenKind.INDENT:
        state.paragraph += INDENT
    elif kind == TokenKind.UNDERLINE:
        if not state.emphasis:
            state.paragraph += EMPHASIS_OPEN
            state.emphasis = True
    return None


class RtfRenderer:
    """
    Iterable of RTF paragraph groups for an iterable of tokens.

    >>> tokens = [Token.printable("A"), Token(TokenKind.NEWLINE)]
    >>> list(RtfRenderer(tokens))
    ['{\\\\pard \\\\qj A \\\\par}']

    """

    def __init__(self, tokens, state=None):
        """
        :param tokens: iterable of tokens.
        :param state: The RenderState to start from, defaults to the
            state at the start of a document.
        """
        self.tokens = tokens
        self.state = RenderState() if state is None else state

    def __iter__(self):
        tokens, lookahead = tee(self.tokens)
        next(lookahead, None)
        for token, next_token in zip_longest(tokens, lookahead):
            group = transition(self.state, token, next_token)
            if group is not None:
                yield group
