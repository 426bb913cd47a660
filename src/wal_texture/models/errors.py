"""Exceptions raised while decoding WAL textures."""


class WalError(Exception):
    """Base class for everything the WAL decoder raises."""


class SourceUnavailable(WalError):
    """The byte source could not be opened or read."""


class WalFormatError(WalError, ValueError):
    """The source was readable but its contents are not a decodable WAL."""


class TruncatedHeader(WalFormatError):
    """Fewer than 100 bytes were available for the header."""


class InvalidDimensions(WalFormatError):
    """width/height are non-positive or their product is not addressable."""


class InvalidOffset(WalFormatError):
    """A mip offset is negative or points past the end of the source."""


class TruncatedPixelData(WalFormatError):
    """The source ends before width * height pixel bytes could be read."""
