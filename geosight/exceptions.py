class GeoSightError(Exception):
    """Base class for every failure surfaced to callers."""


class InvalidInputError(GeoSightError):
    """Raised when the selected file is not a usable image."""


class AuthenticationError(GeoSightError):
    """Raised when the Gemini API key is missing."""


class TransportError(GeoSightError):
    """Raised when the Gemini API cannot be reached or rejects the call."""


class EmptyResponseError(GeoSightError):
    """Raised when Gemini answers without any text."""


class MalformedResponseError(GeoSightError):
    """Raised when Gemini's text does not match the response schema."""


class AnalysisInProgressError(GeoSightError):
    """Raised when an analysis is submitted while another is outstanding."""


class CoordinateDefaultedWarning(UserWarning):
    """Emitted when a non-finite latitude or longitude is replaced by 0.0."""
