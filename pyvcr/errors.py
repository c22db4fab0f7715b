"""Errors raised by the pyvcr configuration layer."""


class VCRError(Exception):
    """Base class for every pyvcr error."""


class InvalidArgumentError(VCRError, ValueError):
    """An unknown capability name or a malformed matcher was supplied."""


class KeyNotFoundError(InvalidArgumentError, KeyError):
    """A name was looked up in a registry that does not contain it."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class ConfigurationError(VCRError):
    """The configuration cannot be used as it stands (e.g. missing cassette dir)."""
