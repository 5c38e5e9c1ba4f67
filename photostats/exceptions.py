"""
Custom exception hierarchy for photostats.

Only ScanRootError ever reaches the command line; the others are raised
at a seam and absorbed by the layer directly above it.
"""


class PhotoStatsError(Exception):
    """Base exception for all photostats errors."""
    pass


class ScanRootError(PhotoStatsError):
    """Raised when the scan root is missing or is not a directory."""
    pass


class DimensionProbeError(PhotoStatsError):
    """Raised when the pixel dimensions of an image cannot be read."""
    pass


class FilenameEncodingError(PhotoStatsError):
    """Raised when an entry path cannot be represented as UTF-8 text."""
    pass


class EmptyCollectionError(PhotoStatsError):
    """Raised when extrema are requested for an empty set of images."""
    pass
