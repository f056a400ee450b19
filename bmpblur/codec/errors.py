from __future__ import annotations


class FormatError(ValueError):
    """Input could not be decoded as a supported bitmap."""


class OpenFailed(FormatError):
    pass


class BadMagic(FormatError):
    pass


class UnsupportedDepth(FormatError):
    pass


class UnsupportedCompression(FormatError):
    pass


class BadDimensions(FormatError):
    pass


class Truncated(FormatError):
    pass


class SaveFailed(RuntimeError):
    """Encoded bitmap could not be written to its destination."""
