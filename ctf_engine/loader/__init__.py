"""
Loader Package - CTF Event Engine
ctf_engine/loader/__init__.py

YAML event definition loading: scalar converters, object factory,
document decoder, and the configuration loader.
"""

from ctf_engine.loader.configuration_loader import YamlCtfConfigurationLoader, link_challenges
from ctf_engine.loader.converters import (
    DateTimeOffsetConverter,
    ScalarConverter,
    TimeSpanConverter,
    UriConverter,
)
from ctf_engine.loader.decoder import DocumentDecoder
from ctf_engine.loader.object_factory import YamlObjectFactory

__all__ = [
    "DateTimeOffsetConverter",
    "DocumentDecoder",
    "ScalarConverter",
    "TimeSpanConverter",
    "UriConverter",
    "YamlCtfConfigurationLoader",
    "YamlObjectFactory",
    "link_challenges",
]
