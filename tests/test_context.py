# tests/test_context.py

"""
Event Context Tests - startup wiring, lookups and the inspect_event script
"""

import dataclasses

import pytest
import structlog

from ctf_engine.config import Settings
from ctf_engine.core.context import EventContext, create_event_context
from ctf_engine.core.dependencies import get_event_context
from ctf_engine.core.exceptions import ConfigurationIOException
from ctf_engine.core.logging import configure_logging
from ctf_engine.scoring.linear_decay import LinearDecayScoringModel
from ctf_engine.scoring.logistic_decay import SlowLogisticDecayScoringModel
from ctf_engine.scripts import inspect_event


def make_settings(path, **overrides):
    return Settings(_env_file=None, EVENT_CONFIGURATION=str(path), **overrides)


# =============================================================================
# CONTEXT CONSTRUCTION
# =============================================================================

class TestCreateEventContext:
    """Tests for create_event_context."""

    def test_builds_from_settings(self, sample_event_path):
        context = create_event_context(make_settings(sample_event_path, SCORING_MODEL="linear"))

        assert isinstance(context, EventContext)
        assert context.event.name == "Sample CTF"
        assert len(context.categories) == 2
        assert isinstance(context.scoring_model, LinearDecayScoringModel)

    def test_default_model_is_slow_logistic(self, sample_event_path):
        context = create_event_context(make_settings(sample_event_path))
        assert isinstance(context.scoring_model, SlowLogisticDecayScoringModel)

    def test_uses_given_loader(self, sample_loader, tmp_path):
        settings = make_settings(tmp_path / "ignored.yml")
        context = create_event_context(settings, loader=sample_loader)
        assert context.categories is sample_loader.load_challenges()

    def test_missing_file_aborts_startup(self, tmp_path):
        with pytest.raises(ConfigurationIOException):
            create_event_context(make_settings(tmp_path / "missing.yml"))

    def test_builds_with_logging_configured(self, sample_event_path, capsys):
        configure_logging("INFO", "json")
        context = create_event_context(make_settings(sample_event_path, SCORING_MODEL="linear"))

        assert context.event.name == "Sample CTF"
        out = capsys.readouterr().out
        assert "event_context_ready" in out
        assert '"event_name": "Sample CTF"' in out

    def test_cached_dependency(self, sample_event_path, monkeypatch):
        monkeypatch.setenv("EVENT_CONFIGURATION", str(sample_event_path))
        assert get_event_context() is get_event_context()
        assert get_event_context().event.name == "Sample CTF"


# =============================================================================
# LOOKUPS
# =============================================================================

class TestEventContextLookups:
    """Tests for EventContext helpers."""

    @pytest.fixture
    def context(self, sample_loader, sample_event_path):
        return create_event_context(
            make_settings(sample_event_path, SCORING_MODEL="linear"), loader=sample_loader
        )

    def test_challenges_in_document_order(self, context):
        assert [c.id for c in context.challenges()] == ["pwn1", "pwn2", "sanity"]

    def test_get_challenge(self, context):
        challenge = context.get_challenge("pwn2")
        assert challenge.title == "Heap feng shui"
        assert challenge.category is context.get_category("pwn")

    def test_get_missing(self, context):
        assert context.get_challenge("nope") is None
        assert context.get_category("nope") is None

    def test_compute_score(self, context):
        pwn1 = context.get_challenge("pwn1")
        assert context.compute_score(pwn1, 0.0) == 500
        assert context.compute_score(pwn1, 1.0) == 50

    def test_context_is_frozen(self, context):
        with pytest.raises(dataclasses.FrozenInstanceError):
            context.scoring_model = LinearDecayScoringModel()


# =============================================================================
# INSPECT SCRIPT
# =============================================================================

class TestInspectEventScript:
    """Tests for python -m ctf_engine.scripts.inspect_event."""

    def test_prints_summary(self, sample_event_path, capsys):
        exit_code = inspect_event.main(
            [str(sample_event_path), "--model", "linear", "--rates", "0", "1"]
        )
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Sample CTF" in out
        assert "Team Rosetta, Team Stone" in out
        assert "2021-01-01T00:00:00+00:00" in out
        assert "[misc] Misc [hidden]" in out
        assert "pwn1" in out
        assert "Very hard" in out
        # misc (ordinality 0) is listed before pwn (ordinality 1)
        assert out.index("[misc]") < out.index("[pwn]")

    def test_unloadable_file_exits_with_error(self, tmp_path, capsys):
        exit_code = inspect_event.main([str(tmp_path / "missing.yml")])
        assert exit_code == 1
        assert "Cannot load" in capsys.readouterr().err

    def test_malformed_file_exits_with_error(self, write_event):
        path = write_event("name: Only the event\n")
        assert inspect_event.main([str(path)]) == 1
