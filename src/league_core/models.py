from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping

from .config import MAX_NAME_LENGTH, PLAYOFF_STAGE_LABELS, POINTS_FOR_DRAW, POINTS_FOR_WIN


class PlayoffStage(str, Enum):
    SEMIFINAL = "semifinal"
    FINAL = "final"
    THIRD_PLACE = "third-place"

    @property
    def label(self) -> str:
        return PLAYOFF_STAGE_LABELS[self.value]


def _is_goal_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True, slots=True)
class Competitor:
    id: str
    name: str
    active: bool = True

    def __post_init__(self) -> None:
        problems = validate_competitor({"id": self.id, "name": self.name, "active": self.active})
        if problems:
            raise ValueError(f"Invalid competitor {self.id!r}: {'; '.join(problems)}")


@dataclass(frozen=True, slots=True)
class Fixture:
    """One scheduled pairing. A fixture is played once both goal counts are set."""

    id: str
    home_id: str
    away_id: str
    round: int
    home_goals: int | None = None
    away_goals: int | None = None
    is_playoff: bool = False
    playoff_stage: PlayoffStage | None = None

    def __post_init__(self) -> None:
        problems = validate_fixture(
            {
                "id": self.id,
                "homeId": self.home_id,
                "awayId": self.away_id,
                "round": self.round,
                "homeGoals": self.home_goals,
                "awayGoals": self.away_goals,
                "isPlayoff": self.is_playoff,
                "playoffStage": self.playoff_stage,
            }
        )
        if problems:
            raise ValueError(f"Invalid fixture {self.id!r}: {'; '.join(problems)}")
        if self.playoff_stage is not None and not isinstance(self.playoff_stage, PlayoffStage):
            object.__setattr__(self, "playoff_stage", PlayoffStage(self.playoff_stage))

    @property
    def played(self) -> bool:
        return self.home_goals is not None and self.away_goals is not None

    def involves(self, competitor_id: str) -> bool:
        return competitor_id in (self.home_id, self.away_id)

    def with_result(self, home_goals: int, away_goals: int) -> Fixture:
        if self.played:
            raise ValueError(f"Fixture {self.id} already has a result.")
        if not (_is_goal_count(home_goals) and _is_goal_count(away_goals)):
            raise ValueError("Goals must be non-negative integers")
        return replace(self, home_goals=home_goals, away_goals=away_goals)


@dataclass(frozen=True, slots=True)
class StandingRow:
    competitor_id: str
    competitor_name: str
    played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    rank: int

    @property
    def goal_diff(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def points(self) -> int:
        return self.wins * POINTS_FOR_WIN + self.draws * POINTS_FOR_DRAW


@dataclass(frozen=True, slots=True)
class SemifinalOutcome:
    winner_id: str
    winner_name: str
    loser_id: str
    loser_name: str


@dataclass(frozen=True, slots=True)
class PlayoffFinals:
    final: Fixture
    third_place: Fixture


def validate_competitor(data: Mapping[str, Any]) -> list[str]:
    errors: list[str] = []
    name = data.get("name")
    if not isinstance(name, str) or not name:
        errors.append("Competitor name is required and must be a string")
    elif not name.strip():
        errors.append("Competitor name cannot be empty")
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(f"Competitor name cannot exceed {MAX_NAME_LENGTH} characters")

    competitor_id = data.get("id")
    if not isinstance(competitor_id, str) or not competitor_id.strip():
        errors.append("Competitor ID must be a non-empty string")

    if "active" in data and not isinstance(data["active"], bool):
        errors.append("active must be a boolean value")
    return errors


def validate_fixture(data: Mapping[str, Any]) -> list[str]:
    errors: list[str] = []
    home_id = data.get("homeId")
    away_id = data.get("awayId")
    if not isinstance(home_id, str) or not home_id:
        errors.append("Home competitor ID is required and must be a string")
    if not isinstance(away_id, str) or not away_id:
        errors.append("Away competitor ID is required and must be a string")
    if home_id is not None and home_id == away_id:
        errors.append("Home and away competitors must be different")

    fixture_id = data.get("id")
    if not isinstance(fixture_id, str) or not fixture_id.strip():
        errors.append("Fixture ID must be a non-empty string")

    round_no = data.get("round")
    if not isinstance(round_no, int) or isinstance(round_no, bool) or round_no < 1:
        errors.append("Round must be a positive integer")

    home_goals = data.get("homeGoals")
    away_goals = data.get("awayGoals")
    if home_goals is not None and not _is_goal_count(home_goals):
        errors.append("Home goals must be a non-negative integer")
    if away_goals is not None and not _is_goal_count(away_goals):
        errors.append("Away goals must be a non-negative integer")
    if (home_goals is None) != (away_goals is None):
        errors.append("Home and away goals must be recorded together")
    if "played" in data and bool(data["played"]) != (home_goals is not None and away_goals is not None):
        errors.append("played must be set exactly when both goal counts are recorded")

    is_playoff = data.get("isPlayoff", False)
    stage = data.get("playoffStage")
    if not isinstance(is_playoff, bool):
        errors.append("isPlayoff must be a boolean value")
    if stage is not None:
        try:
            PlayoffStage(stage)
        except ValueError:
            errors.append("Invalid playoff stage")
    if is_playoff is False and stage is not None:
        errors.append("Playoff stage should not be set for non-playoff fixtures")
    if is_playoff is True and stage is None:
        errors.append("Playoff stage is required for playoff fixtures")
    return errors


def validate_standing_row(data: Mapping[str, Any]) -> list[str]:
    errors: list[str] = []
    if not isinstance(data.get("competitorId"), str) or not data.get("competitorId"):
        errors.append("Competitor ID is required and must be a string")
    if not isinstance(data.get("competitorName"), str) or not data.get("competitorName"):
        errors.append("Competitor name is required and must be a string")

    for key in ("played", "wins", "draws", "losses", "goalsFor", "goalsAgainst", "points", "rank"):
        value = data.get(key)
        if value is not None and not _is_goal_count(value):
            errors.append(f"{key} must be a non-negative integer")
    if errors:
        return errors

    played, wins, draws, losses = (data.get(k) for k in ("played", "wins", "draws", "losses"))
    if None not in (played, wins, draws, losses) and wins + draws + losses != played:
        errors.append("Wins + draws + losses must equal matches played")

    goals_for, goals_against, goal_diff = (data.get(k) for k in ("goalsFor", "goalsAgainst", "goalDiff"))
    if None not in (goals_for, goals_against, goal_diff) and goal_diff != goals_for - goals_against:
        errors.append("Goal difference must equal goals for minus goals against")

    points = data.get("points")
    if None not in (wins, draws, points) and points != wins * POINTS_FOR_WIN + draws * POINTS_FOR_DRAW:
        errors.append("Points calculation is incorrect (3 points per win, 1 per draw)")

    if data.get("rank") is not None and data["rank"] < 1:
        errors.append("Rank must be a positive integer")
    return errors


def is_valid_competitor(data: Mapping[str, Any]) -> bool:
    return not validate_competitor(data)


def is_valid_fixture(data: Mapping[str, Any]) -> bool:
    return not validate_fixture(data)


def is_valid_standing_row(data: Mapping[str, Any]) -> bool:
    return not validate_standing_row(data)
