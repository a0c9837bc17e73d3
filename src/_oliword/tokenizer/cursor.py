import numpy as np


class ByteCursor:
    """
    A position in an in-memory byte buffer with one byte of lookahead.

    >>> cursor = ByteCursor(b"ab")
    >>> cursor.peek()
    97
    >>> cursor.advance()
    97
    >>> cursor.advance()
    98
    >>> cursor.advance() is None
    True

    """

    def __init__(self, buffer):
        """
        :param buffer: bytes, bytearray or anything else supporting the
            buffer protocol.
        """
        self.buffer = np.frombuffer(bytes(buffer), dtype=np.uint8)
        self.position = 0

    def __len__(self):
        return len(self.buffer)

    @property
    def at_end(self):
        return self.position >= len(self.buffer)

    def peek(self):
        """
        :returns: The next byte as an int without consuming it,
            or None at the end of the buffer.
        """
        if self.at_end:
            return None
        return int(self.buffer[self.position])

    def advance(self):
        """
        Consume the next byte.

        :returns: The consumed byte as an int, or None at the end of the buffer.
        """
        byte = self.peek()
        if byte is not None:
            self.position += 1
        return byte

    def skip_run(self, byte):
        """
        Consume all bytes equal to byte from the current position.

        :returns: The number of bytes consumed.
        """
        rest = self.buffer[self.position :]
        different = np.flatnonzero(rest != byte)
        run_length = int(different[0]) if len(different) else len(rest)
        self.position += run_length
        return run_length
