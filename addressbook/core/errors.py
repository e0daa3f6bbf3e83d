"""Error taxonomy for codec operations.

Every failure surfaced by a codec is a ``CodecError``; the low-level cause
is chained with ``raise ... from exc`` for diagnostics.
"""


class CodecError(Exception):
    """A codec operation failed."""


class SchemaError(CodecError):
    """The record schema artifact is missing or malformed."""


class CodecIOError(CodecError):
    """A file could not be opened, read or written."""


class MalformedInputError(CodecError):
    """JSON handed to ``write_string`` could not be parsed into entries."""


class EncodeError(CodecError):
    """An entry cannot be represented in the codec's wire format."""


class DecodeError(CodecError):
    """Decoded bytes could not be mapped back to an entry."""
