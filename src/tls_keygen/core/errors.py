"""Exception hierarchy for tls-keygen."""


class TLSKeygenError(Exception):
    """Base exception for all tls-keygen errors."""

    pass


# Input errors
class InvalidParameterError(TLSKeygenError):
    """Unknown algorithm, unknown curve or otherwise unusable parameter."""

    pass


class ConfigurationError(TLSKeygenError):
    """Key request configuration could not be loaded."""

    pass


# Key material errors
class GenerationError(TLSKeygenError):
    """The underlying primitive refused the requested parameters."""

    pass


class EncodingError(TLSKeygenError):
    """Serializing generated key material failed."""

    pass


class KeyParseError(EncodingError):
    """Failed to parse a PEM encoded private key."""

    pass


# Lifecycle errors
class ResourceStateError(TLSKeygenError):
    """Operation is not valid for the current resource state."""

    pass
