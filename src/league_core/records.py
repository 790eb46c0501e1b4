"""Document-store payloads for the roster snapshot and fixture list.

The storage layer hands over camelCase documents; these models validate
them and convert to and from the frozen core types.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .config import MAX_NAME_LENGTH
from .models import Competitor, Fixture, PlayoffStage
from .schedule import active_roster


class CompetitorRecord(BaseModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    active: bool = True

    model_config = ConfigDict(str_strip_whitespace=True)

    def to_core(self) -> Competitor:
        return Competitor(id=self.id, name=self.name, active=self.active)

    @classmethod
    def from_core(cls, competitor: Competitor) -> CompetitorRecord:
        return cls(id=competitor.id, name=competitor.name, active=competitor.active)


class FixtureRecord(BaseModel):
    id: str = Field(min_length=1)
    home_id: str = Field(alias="homeId", min_length=1)
    away_id: str = Field(alias="awayId", min_length=1)
    round: int = Field(ge=1)
    home_goals: int | None = Field(default=None, alias="homeGoals", ge=0)
    away_goals: int | None = Field(default=None, alias="awayGoals", ge=0)
    played: bool = False
    is_playoff: bool = Field(default=False, alias="isPlayoff")
    playoff_stage: PlayoffStage | None = Field(default=None, alias="playoffStage")

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def _check_consistency(self) -> FixtureRecord:
        if self.home_id == self.away_id:
            raise ValueError("Home and away competitors must be different")
        has_goals = self.home_goals is not None and self.away_goals is not None
        if (self.home_goals is None) != (self.away_goals is None):
            raise ValueError("Home and away goals must be recorded together")
        if self.played != has_goals:
            raise ValueError("played must be set exactly when both goal counts are recorded")
        if self.is_playoff != (self.playoff_stage is not None):
            raise ValueError("Playoff stage must be set exactly for playoff fixtures")
        return self

    def to_core(self) -> Fixture:
        return Fixture(
            id=self.id,
            home_id=self.home_id,
            away_id=self.away_id,
            round=self.round,
            home_goals=self.home_goals,
            away_goals=self.away_goals,
            is_playoff=self.is_playoff,
            playoff_stage=self.playoff_stage,
        )

    @classmethod
    def from_core(cls, fixture: Fixture) -> FixtureRecord:
        return cls(
            id=fixture.id,
            home_id=fixture.home_id,
            away_id=fixture.away_id,
            round=fixture.round,
            home_goals=fixture.home_goals,
            away_goals=fixture.away_goals,
            played=fixture.played,
            is_playoff=fixture.is_playoff,
            playoff_stage=fixture.playoff_stage,
        )

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def load_roster(documents: Iterable[Mapping[str, Any]], active_only: bool = True) -> list[Competitor]:
    roster = [CompetitorRecord.model_validate(doc).to_core() for doc in documents]
    return active_roster(roster) if active_only else roster


def load_fixtures(documents: Iterable[Mapping[str, Any]]) -> list[Fixture]:
    return [FixtureRecord.model_validate(doc).to_core() for doc in documents]
