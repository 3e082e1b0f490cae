"""Exceptions raised by the golfcup scoring engine."""


class GolfCupError(Exception):
    """Base exception for all golfcup errors."""


class DataIntegrityError(GolfCupError, ValueError):
    """Raised when score data violates the fixed 18-hole shape or its validation flags.

    Never raised for sparse or partially entered data; only for input that breaks the
    data model (wrong array lengths, validated holes without scores, negative strokes).
    """


class UnknownFormatError(GolfCupError, ValueError):
    """Raised for a competition format or scoring basis that has no rule."""


class UnknownTeeError(GolfCupError, KeyError):
    """Raised when a tee name has no rating or stroke table."""
