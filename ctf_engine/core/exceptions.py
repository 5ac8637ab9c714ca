"""
Custom Exceptions - CTF Event Engine
ctf_engine/core/exceptions.py

Exception classes raised while loading the event configuration.
"""

from typing import Optional


class ConfigurationException(Exception):
    """Base exception for event configuration loading."""

    pass


class MalformedDocumentException(ConfigurationException):
    """The YAML stream violates the two-document event protocol."""

    def __init__(self, message: str = "YAML configuration is malformed.", location: Optional[str] = None):
        self.message = message
        self.location = location
        if location:
            message = f"{message} ({location})"
        super().__init__(message)


class MalformedScalarException(ConfigurationException):
    """A scalar value does not match the textual form its target type requires."""

    def __init__(self, value: str, expected: str, location: Optional[str] = None):
        self.value = value
        self.expected = expected
        self.location = location
        message = f"Malformed scalar {value!r}: expected {expected}"
        if location:
            message = f"{message} ({location})"
        super().__init__(message)


class ConfigurationIOException(ConfigurationException):
    """The event configuration file could not be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read event configuration {path}: {reason}")
