from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .models import Competitor, Fixture

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScheduleSummary:
    total_fixtures: int
    total_rounds: int


def active_roster(roster: Iterable[Competitor]) -> list[Competitor]:
    return [competitor for competitor in roster if competitor.active]


def _padded_size(count: int) -> int:
    return count + (count % 2)


def total_rounds(competitor_count: int) -> int:
    """Rounds in a full double round-robin, counting the bye-padded slot."""
    if competitor_count < 2:
        return 0
    return 2 * (_padded_size(competitor_count) - 1)


def build_round_robin_rounds(roster: Sequence[Competitor]) -> list[list[tuple[Competitor, Competitor]]]:
    """Build one single round-robin split into rounds, bye pairings dropped."""
    if len(roster) < 2:
        return []

    # Circle method: each competitor plays at most once per round.
    rotating: list[Competitor | None] = list(roster)
    if len(rotating) % 2 == 1:
        rotating.append(None)

    size = len(rotating)
    half = size // 2
    rounds: list[list[tuple[Competitor, Competitor]]] = []

    for _ in range(size - 1):
        pairings: list[tuple[Competitor, Competitor]] = []
        for idx in range(half):
            home = rotating[idx]
            away = rotating[size - 1 - idx]
            if home is None or away is None:
                continue
            pairings.append((home, away))
        rounds.append(pairings)

        # Keep first fixed, rotate the rest.
        rotating = [rotating[0], rotating[-1], *rotating[1:-1]]

    return rounds


def generate_schedule(roster: Sequence[Competitor]) -> list[Fixture]:
    """Generate the full double round-robin calendar for ``roster``.

    The first leg fills rounds ``1..M-1`` and every pairing is mirrored
    ``M-1`` rounds later with home and away swapped, where ``M`` is the
    roster size padded to even. Fixtures come back ordered by round, then
    by pairing order within the round.
    """
    first_leg = build_round_robin_rounds(roster)
    leg_length = len(first_leg)

    rounds: list[list[tuple[Competitor, Competitor]]] = list(first_leg)
    rounds.extend([(away, home) for home, away in pairings] for pairings in first_leg)

    fixtures: list[Fixture] = []
    for round_no, pairings in enumerate(rounds, start=1):
        for slot, (home, away) in enumerate(pairings, start=1):
            fixtures.append(
                Fixture(
                    id=f"R{round_no}-M{slot}",
                    home_id=home.id,
                    away_id=away.id,
                    round=round_no,
                )
            )

    logger.debug(
        "Generated %d fixtures over %d rounds for %d competitors",
        len(fixtures),
        2 * leg_length,
        len(roster),
    )
    return fixtures


def summarize_schedule(fixtures: Iterable[Fixture]) -> ScheduleSummary:
    league = [fixture for fixture in fixtures if not fixture.is_playoff]
    return ScheduleSummary(
        total_fixtures=len(league),
        total_rounds=max((fixture.round for fixture in league), default=0),
    )
