from __future__ import annotations

import logging
from typing import Mapping, Sequence

from .config import FINALS_ROUND, PLAYOFF_ENTRANTS, SEMIFINAL_ROUND
from .exceptions import InsufficientEntrantsError, MalformedSemifinalInputError
from .models import Fixture, PlayoffFinals, PlayoffStage, SemifinalOutcome, StandingRow
from .standings import match_outcome

logger = logging.getLogger(__name__)


def _playoff_fixture(fixture_id: str, home_id: str, away_id: str, stage: PlayoffStage, round_no: int) -> Fixture:
    return Fixture(
        id=fixture_id,
        home_id=home_id,
        away_id=away_id,
        round=round_no,
        is_playoff=True,
        playoff_stage=stage,
    )


def seed_semifinals(standings: Sequence[StandingRow], min_entries: int = PLAYOFF_ENTRANTS) -> list[Fixture]:
    """Pair the top four by rank: 1 vs 4 and 2 vs 3, higher seed at home."""
    required = max(min_entries, PLAYOFF_ENTRANTS)
    if len(standings) < required:
        raise InsufficientEntrantsError(required=required, available=len(standings))

    first, second, third, fourth = sorted(standings, key=lambda row: row.rank)[:PLAYOFF_ENTRANTS]
    semifinals = [
        _playoff_fixture("SF-1", first.competitor_id, fourth.competitor_id, PlayoffStage.SEMIFINAL, SEMIFINAL_ROUND),
        _playoff_fixture("SF-2", second.competitor_id, third.competitor_id, PlayoffStage.SEMIFINAL, SEMIFINAL_ROUND),
    ]
    logger.info(
        "Seeded %s: %s vs %s, %s vs %s",
        PlayoffStage.SEMIFINAL.label,
        first.competitor_name,
        fourth.competitor_name,
        second.competitor_name,
        third.competitor_name,
    )
    return semifinals


def seed_final(outcomes: Sequence[SemifinalOutcome]) -> PlayoffFinals:
    if len(outcomes) != 2:
        raise MalformedSemifinalInputError(received=len(outcomes))

    first, second = outcomes
    finals = PlayoffFinals(
        final=_playoff_fixture("F", first.winner_id, second.winner_id, PlayoffStage.FINAL, FINALS_ROUND),
        third_place=_playoff_fixture("3P", first.loser_id, second.loser_id, PlayoffStage.THIRD_PLACE, FINALS_ROUND),
    )
    logger.info(
        "Seeded %s %s vs %s and %s %s vs %s",
        PlayoffStage.FINAL.label,
        first.winner_name,
        second.winner_name,
        PlayoffStage.THIRD_PLACE.label,
        first.loser_name,
        second.loser_name,
    )
    return finals


def decide_semifinal(fixture: Fixture, names: Mapping[str, str]) -> SemifinalOutcome:
    """Resolve a played semifinal into winner and loser.

    Knockout fixtures cannot end level here; a drawn score is rejected and
    the caller must record the decisive result.
    """
    if fixture.playoff_stage is not PlayoffStage.SEMIFINAL:
        raise ValueError(f"Fixture {fixture.id} is not a semifinal.")
    outcome = match_outcome(fixture)
    if outcome == "draw":
        raise ValueError(f"Semifinal {fixture.id} ended level; a winner is required.")

    if outcome == "home":
        winner_id, loser_id = fixture.home_id, fixture.away_id
    else:
        winner_id, loser_id = fixture.away_id, fixture.home_id
    return SemifinalOutcome(
        winner_id=winner_id,
        winner_name=names.get(winner_id, winner_id),
        loser_id=loser_id,
        loser_name=names.get(loser_id, loser_id),
    )
