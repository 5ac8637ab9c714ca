"""
Load an event definition and print its categories, challenges and scores.

Usage:
    python -m ctf_engine.scripts.inspect_event                         # EVENT_CONFIGURATION from env/.env
    python -m ctf_engine.scripts.inspect_event event.yml               # explicit file
    python -m ctf_engine.scripts.inspect_event event.yml --model linear --rates 0 0.25 0.5
"""

import argparse
import sys
from typing import List, Optional, Sequence

import structlog
from dotenv import load_dotenv

from ctf_engine.config import get_settings
from ctf_engine.core.context import EventContext, create_event_context
from ctf_engine.core.exceptions import ConfigurationException
from ctf_engine.core.logging import configure_logging
from ctf_engine.loader.configuration_loader import YamlCtfConfigurationLoader
from ctf_engine.scoring.registry import SCORING_MODELS

logger = structlog.get_logger(__name__)

DEFAULT_RATES = (0.0, 0.1, 0.25, 0.5, 0.75, 1.0)


def _timestamp(value) -> str:
    return value.isoformat() if value is not None else "-"


def print_summary(context: EventContext, rates: Sequence[float]) -> None:
    event = context.event
    print(f"\n{'=' * 70}")
    print(f"  {event.name or '(unnamed event)'}")
    print(f"  Organizers : {', '.join(event.organizers) or '-'}")
    print(f"  Start      : {_timestamp(event.start_time)}")
    print(f"  End        : {_timestamp(event.end_time)}")
    print(f"  Scoring    : {event.scoring.display_name}")
    print(f"  Model      : {context.scoring_model.name}")
    print(f"{'=' * 70}")

    header = "".join(f"{f'r={rate:g}':>9}" for rate in rates)
    for category in sorted(context.categories, key=lambda c: c.ordinality):
        hidden = " [hidden]" if category.is_hidden else ""
        print(f"\n  [{category.id}] {category.name}{hidden}")
        print(f"  {'Challenge':<20} {'Difficulty':<16} {'Base':>6}{header}")
        print(f"  {'-' * 20} {'-' * 16} {'-' * 6}{'-' * 9 * len(rates)}")
        for challenge in category.challenges:
            scores = "".join(
                f"{context.compute_score(challenge, rate):>9}" for rate in rates
            )
            print(
                f"  {challenge.id:<20} {challenge.difficulty.display_name:<16} "
                f"{challenge.base_score:>6}{scores}"
            )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    settings = get_settings()

    ap = argparse.ArgumentParser(description="Inspect a CTF event definition")
    ap.add_argument("path", nargs="?", default=None,
                    help="Event YAML file (default: EVENT_CONFIGURATION)")
    ap.add_argument("--model", choices=sorted(SCORING_MODELS), default=None,
                    help="Scoring model (default: SCORING_MODEL)")
    ap.add_argument("--rates", nargs="+", type=float, default=list(DEFAULT_RATES),
                    help="Solve rates to tabulate")
    args = ap.parse_args(argv)

    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    overrides = {}
    if args.path:
        overrides["EVENT_CONFIGURATION"] = args.path
    if args.model:
        overrides["SCORING_MODEL"] = args.model
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        loader = YamlCtfConfigurationLoader(settings.EVENT_CONFIGURATION)
    except ConfigurationException as e:
        logger.error("event_config_failed", path=settings.EVENT_CONFIGURATION, error=str(e))
        print(f"Cannot load {settings.EVENT_CONFIGURATION}: {e}", file=sys.stderr)
        return 1

    context = create_event_context(settings=settings, loader=loader)
    print_summary(context, args.rates)
    return 0


if __name__ == "__main__":
    sys.exit(main())
