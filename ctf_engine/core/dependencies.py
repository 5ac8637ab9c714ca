"""
Dependencies - CTF Event Engine
ctf_engine/core/dependencies.py

Process-wide accessors for shared, read-only objects.
"""

from functools import lru_cache

from ctf_engine.core.context import EventContext, create_event_context


@lru_cache()
def get_event_context() -> EventContext:
    """Get the cached EventContext built from the current settings."""
    return create_event_context()
