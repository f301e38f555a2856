"""
Exceptions for the Stark Name Codec

The codec itself raises a single error, UnknownCharacter. The remaining
classes belong to the resolving layer and never derive from it, so callers
can tell a bad label apart from a failed lookup.
"""


class UnknownCharacter(ValueError):
    """
    Raised by the encoder for the first character outside the alphabet.

    Attributes:
        char: The offending character
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unknown character {char!r} in label")


class NamingError(Exception):
    """Base class for resolving layer failures."""


class ProviderError(NamingError):
    """The contract-call provider failed (connection, transport, node error)."""


class InvalidContractResult(NamingError):
    """The naming contract returned data that does not have the expected shape."""


class InvalidDomain(NamingError):
    """The domain cannot be encoded, is outside .stark, or is not registered."""


class ResolutionNotSupported(NamingError):
    """No naming contract is known for the requested network."""
