class SumcheckPolyError(Exception):
    """Base exception class."""


class ConfigurationError(SumcheckPolyError):
    """Raise for configuration errors."""


class FieldRepresentationError(SumcheckPolyError):
    """Raised when an integer cannot be embedded into the field exactly."""


class FieldsNotIdentical(SumcheckPolyError):
    """Raised when elements of two different fields are combined."""


class SingularSystemError(SumcheckPolyError):
    """Raised when a linear system has no unique solution."""


class ZeroPolynomialError(SumcheckPolyError):
    """Raised when the degree of the zero polynomial is requested."""


class CompressionError(SumcheckPolyError):
    """Raised when a polynomial is too short to drop its linear term."""


class DeserializationError(SumcheckPolyError):
    """Base class for wire decoding errors."""


class MalformedCompressedPolynomial(DeserializationError):
    """Raised when a compressed polynomial has an inconsistent length."""
