"""
Core Package - CTF Event Engine
ctf_engine/core/__init__.py

Core infrastructure: exceptions, logging.

The event context lives in ctf_engine.core.context and is imported from
there directly, since it depends on the loader package.
"""

from ctf_engine.core.exceptions import (
    ConfigurationException,
    ConfigurationIOException,
    MalformedDocumentException,
    MalformedScalarException,
)
from ctf_engine.core.logging import configure_logging

__all__ = [
    # Exceptions
    "ConfigurationException",
    "ConfigurationIOException",
    "MalformedDocumentException",
    "MalformedScalarException",
    # Logging
    "configure_logging",
]
