# tests/conftest.py

"""
Pytest Fixtures - Shared event definitions for loader, scoring and context tests

SAMPLE EVENT REFERENCE:
- Event:      "Sample CTF", 2021-01-01T00:00:00+00:00 to 2021-01-02T00:00:00+00:00
- Categories: "misc" (hidden, ordinality 0), "pwn" (ordinality 1)
- Challenges: "sanity" (baseScore 1, baseline), "pwn1" (baseScore 500), "pwn2" (baseScore 1000)
"""

import pytest
import structlog

from ctf_engine.config import get_settings
from ctf_engine.core.dependencies import get_event_context
from ctf_engine.loader.configuration_loader import YamlCtfConfigurationLoader


# =============================================================================
# YAML DOCUMENTS
# =============================================================================

MINIMAL_EVENT_YAML = """\
name: Minimal CTF
startTime: 2021-01-01T00:00:00+00:00
endTime: 2021-01-02T00:00:00+00:00
---
- id: pwn
  name: Pwn
  challenges:
    - id: pwn1
      title: First blood
      flag: "flag{x}"
      baseScore: 500
"""

SAMPLE_EVENT_YAML = """\
name: Sample CTF
organizers:
  - Team Rosetta
  - Team Stone
startTime: 2021-01-01T00:00:00+00:00
endTime: 2021-01-02T00:00:00+00:00
scoring: jeopardy
countries: [PL, DE]
---
- id: pwn
  name: Pwn
  ordinality: 1
  challenges:
    - id: pwn1
      title: Baby overflow
      flag: "flag{x}"
      difficulty: easy
      description: Smash the stack.
      baseScore: 500
      hints:
        - contents: Look at the return address.
          release_after: 3600
        - contents: ret2win
          cost: 50
      attachments:
        - filename: pwn1.tar.gz
          type: application/gzip
          length: 1024
          sha256: 9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08
          sha1: a94a8fe5ccb19ba61c4c0873d391e987982fbbd3
          url: https://files.example.com/pwn1.tar.gz
          decompressed:
            filename: pwn1.tar
            length: 4096
      endpoint:
        type: netcat
        host: pwn1.example.com
        port: 31337
    - id: pwn2
      title: Heap feng shui
      flag: "flag{y}"
      difficulty: very_hard
      baseScore: 1000
      endpoint:
        type: https
        host: pwn2.example.com
        port: 443
- id: misc
  name: Misc
  hidden: true
  ordinality: 0
  challenges:
    - id: sanity
      title: Sanity check
      flag: "flag{welcome}"
      baseScore: 1
"""


# =============================================================================
# FILE FIXTURES
# =============================================================================

@pytest.fixture
def write_event(tmp_path):
    """Write YAML text to a file under tmp_path and return its path."""
    def _write(text: str, name: str = "event.yml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def minimal_event_path(write_event):
    return write_event(MINIMAL_EVENT_YAML)


@pytest.fixture
def sample_event_path(write_event):
    return write_event(SAMPLE_EVENT_YAML)


@pytest.fixture
def sample_loader(sample_event_path):
    """Loader over the sample event (keeps the graph alive for the test)."""
    return YamlCtfConfigurationLoader(sample_event_path)


# =============================================================================
# SETTINGS ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Drop cached settings, context and logging setup so each test sees its own environment."""
    get_settings.cache_clear()
    get_event_context.cache_clear()
    yield
    get_settings.cache_clear()
    get_event_context.cache_clear()
    structlog.reset_defaults()
