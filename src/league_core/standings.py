from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable, Literal, Mapping, Sequence

from .config import FORM_GUIDE_LENGTH, PLAYOFF_ENTRANTS, POINTS_FOR_DRAW, POINTS_FOR_LOSS, POINTS_FOR_WIN
from .models import Competitor, Fixture, StandingRow

logger = logging.getLogger(__name__)

Outcome = Literal["home", "away", "draw"]


@dataclass(frozen=True, slots=True)
class _Tally:
    competitor_id: str
    competitor_name: str
    played: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def points(self) -> int:
        return self.wins * POINTS_FOR_WIN + self.draws * POINTS_FOR_DRAW

    @property
    def goal_diff(self) -> int:
        return self.goals_for - self.goals_against

    def record(self, scored: int, conceded: int) -> _Tally:
        return replace(
            self,
            played=self.played + 1,
            wins=self.wins + (scored > conceded),
            draws=self.draws + (scored == conceded),
            losses=self.losses + (scored < conceded),
            goals_for=self.goals_for + scored,
            goals_against=self.goals_against + conceded,
        )


@dataclass(frozen=True, slots=True)
class StandingsStatistics:
    total_competitors: int
    competitors_with_matches: int
    highest_points: int
    lowest_points: int
    average_points: float
    total_goals: int


@dataclass(frozen=True, slots=True)
class HeadToHeadRecord:
    first_wins: int
    second_wins: int
    draws: int
    first_goals: int
    second_goals: int
    total_matches: int


@dataclass(frozen=True, slots=True)
class FormGuide:
    results: tuple[str, ...]
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int

    @property
    def points(self) -> int:
        return self.wins * POINTS_FOR_WIN + self.draws * POINTS_FOR_DRAW + self.losses * POINTS_FOR_LOSS


@dataclass(frozen=True, slots=True)
class FixtureStatistics:
    total: int
    played: int
    pending: int
    league: int
    playoff: int


def match_outcome(fixture: Fixture) -> Outcome:
    if not fixture.played:
        raise ValueError(f"Fixture {fixture.id} has not been played.")
    if fixture.home_goals > fixture.away_goals:
        return "home"
    if fixture.home_goals < fixture.away_goals:
        return "away"
    return "draw"


def _apply_fixture(tallies: Mapping[str, _Tally], fixture: Fixture) -> Mapping[str, _Tally]:
    home = tallies.get(fixture.home_id)
    away = tallies.get(fixture.away_id)
    if home is None or away is None:
        logger.warning("Competitor not found in roster for fixture %s; skipping", fixture.id)
        return tallies
    return {
        **tallies,
        fixture.home_id: home.record(fixture.home_goals, fixture.away_goals),
        fixture.away_id: away.record(fixture.away_goals, fixture.home_goals),
    }


def _ranking_key(tally: _Tally) -> tuple[int, int, int, str, str]:
    return (-tally.points, -tally.goal_diff, -tally.goals_for, tally.competitor_name, tally.competitor_id)


def compute_standings(roster: Iterable[Competitor], fixtures: Iterable[Fixture]) -> list[StandingRow]:
    """Aggregate played league fixtures into a ranked table.

    Every roster entry gets a row, even with nothing played. Rows are
    ordered by points, goal difference and goals scored (all descending),
    then competitor name ascending; ranks run 1..N with no ties.
    """
    initial: Mapping[str, _Tally] = {
        competitor.id: _Tally(competitor_id=competitor.id, competitor_name=competitor.name)
        for competitor in roster
    }
    counted = [fixture for fixture in fixtures if fixture.played and not fixture.is_playoff]
    tallies = reduce(_apply_fixture, counted, initial)

    ordered = sorted(tallies.values(), key=_ranking_key)
    return [
        StandingRow(
            competitor_id=tally.competitor_id,
            competitor_name=tally.competitor_name,
            played=tally.played,
            wins=tally.wins,
            draws=tally.draws,
            losses=tally.losses,
            goals_for=tally.goals_for,
            goals_against=tally.goals_against,
            rank=idx,
        )
        for idx, tally in enumerate(ordered, start=1)
    ]


def top_competitors(standings: Sequence[StandingRow], count: int) -> list[StandingRow]:
    return sorted(standings, key=lambda row: row.rank)[: max(0, count)]


def playoff_qualifiers(standings: Sequence[StandingRow]) -> list[StandingRow]:
    return top_competitors(standings, PLAYOFF_ENTRANTS)


def standings_statistics(standings: Sequence[StandingRow]) -> StandingsStatistics:
    points = [row.points for row in standings if row.played > 0]
    return StandingsStatistics(
        total_competitors=len(standings),
        competitors_with_matches=len(points),
        highest_points=max(points, default=0),
        lowest_points=min(points, default=0),
        average_points=sum(points) / len(points) if points else 0.0,
        total_goals=sum(row.goals_for for row in standings),
    )


def head_to_head(fixtures: Iterable[Fixture], first_id: str, second_id: str) -> HeadToHeadRecord:
    """Record between two competitors over played league fixtures.

    Not part of the ranking order; callers use it for display or manual
    tie-break review.
    """
    first_wins = second_wins = draws = first_goals = second_goals = total = 0
    for fixture in fixtures:
        if fixture.is_playoff or not fixture.played:
            continue
        if {fixture.home_id, fixture.away_id} != {first_id, second_id}:
            continue
        total += 1
        first_is_home = fixture.home_id == first_id
        first_goals += fixture.home_goals if first_is_home else fixture.away_goals
        second_goals += fixture.away_goals if first_is_home else fixture.home_goals
        outcome = match_outcome(fixture)
        if outcome == "draw":
            draws += 1
        elif (outcome == "home") == first_is_home:
            first_wins += 1
        else:
            second_wins += 1
    return HeadToHeadRecord(
        first_wins=first_wins,
        second_wins=second_wins,
        draws=draws,
        first_goals=first_goals,
        second_goals=second_goals,
        total_matches=total,
    )


def recent_form(fixtures: Sequence[Fixture], competitor_id: str, last: int = FORM_GUIDE_LENGTH) -> FormGuide:
    """Most recent results first, newest by round then by later list position."""
    played = [
        (fixture.round, idx, fixture)
        for idx, fixture in enumerate(fixtures)
        if fixture.played and not fixture.is_playoff and fixture.involves(competitor_id)
    ]
    played.sort(key=lambda item: (item[0], item[1]), reverse=True)

    results: list[str] = []
    goals_for = goals_against = 0
    for _, _, fixture in played[: max(0, last)]:
        is_home = fixture.home_id == competitor_id
        scored = fixture.home_goals if is_home else fixture.away_goals
        conceded = fixture.away_goals if is_home else fixture.home_goals
        goals_for += scored
        goals_against += conceded
        if scored > conceded:
            results.append("W")
        elif scored < conceded:
            results.append("L")
        else:
            results.append("D")
    return FormGuide(
        results=tuple(results),
        wins=results.count("W"),
        draws=results.count("D"),
        losses=results.count("L"),
        goals_for=goals_for,
        goals_against=goals_against,
    )


def fixture_statistics(fixtures: Iterable[Fixture]) -> FixtureStatistics:
    fixture_list = list(fixtures)
    played = sum(1 for fixture in fixture_list if fixture.played)
    playoff = sum(1 for fixture in fixture_list if fixture.is_playoff)
    return FixtureStatistics(
        total=len(fixture_list),
        played=played,
        pending=len(fixture_list) - played,
        league=len(fixture_list) - playoff,
        playoff=playoff,
    )
