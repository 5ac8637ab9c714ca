"""
YAML Configuration Loader - CTF Event Engine
ctf_engine/loader/configuration_loader.py

Loads the event definition once: open the file as UTF-8, decode both
documents, link every challenge back to its category, then hand out the
cached results.
"""

from pathlib import Path
from typing import Optional, Tuple, Union

import structlog

from ctf_engine.core.exceptions import ConfigurationException, ConfigurationIOException
from ctf_engine.loader.decoder import DocumentDecoder
from ctf_engine.models.challenge import CtfChallengeCategory, CtfEvent

logger = structlog.get_logger(__name__)


def link_challenges(categories: Tuple[CtfChallengeCategory, ...]) -> None:
    """Point each challenge's category back-reference at its containing category."""
    for category in categories:
        for challenge in category.challenges:
            challenge.attach_category(category)


class YamlCtfConfigurationLoader:
    """
    YAML-based event configuration loader.

    The whole graph is built in the constructor; a failure at any step raises
    and no loader is produced.
    """

    def __init__(self, path: Union[str, Path], decoder: Optional[DocumentDecoder] = None):
        self.path = Path(path)
        decoder = decoder or DocumentDecoder()

        logger.info("event_config_loading", path=str(self.path))
        try:
            with self.path.open("r", encoding="utf-8") as stream:
                event, categories = decoder.decode(stream)
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            logger.error("event_config_unreadable", path=str(self.path), reason=reason)
            raise ConfigurationIOException(str(self.path), reason) from exc
        except ConfigurationException as exc:
            logger.error("event_config_malformed", path=str(self.path), error=str(exc))
            raise

        link_challenges(categories)

        self._event = event
        self._categories = categories

        logger.info(
            "event_config_loaded",
            path=str(self.path),
            event_name=event.name,
            categories=len(categories),
            challenges=sum(len(c.challenges) for c in categories),
        )

    def load_event_data(self) -> CtfEvent:
        return self._event

    def load_challenges(self) -> Tuple[CtfChallengeCategory, ...]:
        return self._categories
