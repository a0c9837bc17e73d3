class TokenizationError(Exception):
    """
    Raised inside the tokenizer when a multi-byte tag is aborted. The
    bytes read so far stay consumed and no token is produced for the tag.
    The error never escapes OliwordTokenizer.
    """

    pass
