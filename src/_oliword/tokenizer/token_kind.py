from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    PRINTABLE = auto()
    END_SECTION = auto()
    FILE_HEADER = auto()
    UNDERLINE = auto()
    INDENT = auto()
    NEWLINE = auto()
    ALIGN_CENTER = auto()
    ALIGN_LEFT = auto()
    NEW_PAGE = auto()
    A_GRAVE = auto()
    E_GRAVE = auto()
    E_ACUTE = auto()
    I_GRAVE = auto()
    O_GRAVE = auto()
    U_GRAVE = auto()

    @classmethod
    def accents(cls):
        """
        :returns: Map from accented letter kinds to their unicode code point.
        """
        return {
            cls.A_GRAVE: 224,
            cls.E_GRAVE: 232,
            cls.E_ACUTE: 233,
            cls.I_GRAVE: 236,
            cls.O_GRAVE: 242,
            cls.U_GRAVE: 249,
        }

    @classmethod
    def graves(cls):
        """
        :returns: Map from the vowels written as letter + backtick to the
            kind of the accented letter.
        """
        return {
            ord("a"): cls.A_GRAVE,
            ord("e"): cls.E_GRAVE,
            ord("i"): cls.I_GRAVE,
            ord("o"): cls.O_GRAVE,
            ord("u"): cls.U_GRAVE,
        }
