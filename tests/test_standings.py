import logging

import pytest

from league_core.models import Competitor, Fixture, PlayoffStage
from league_core.standings import (
    compute_standings,
    fixture_statistics,
    head_to_head,
    match_outcome,
    playoff_qualifiers,
    recent_form,
    standings_statistics,
    top_competitors,
)


def _roster(*names: str) -> list[Competitor]:
    return [Competitor(id=name.lower(), name=name) for name in names]


def _played(fid: str, home: str, away: str, home_goals: int, away_goals: int, round_no: int = 1) -> Fixture:
    return Fixture(id=fid, home_id=home, away_id=away, round=round_no, home_goals=home_goals, away_goals=away_goals)


def test_worked_example_order_and_points() -> None:
    roster = _roster("A", "B", "C", "D")
    fixtures = [
        _played("1", "a", "b", 3, 1),
        _played("2", "a", "c", 1, 1, round_no=2),
        _played("3", "b", "d", 0, 2, round_no=3),
        Fixture(id="4", home_id="c", away_id="d", round=4),
    ]
    table = compute_standings(roster, fixtures)

    assert [row.competitor_name for row in table] == ["A", "D", "C", "B"]
    assert [row.rank for row in table] == [1, 2, 3, 4]
    by_id = {row.competitor_id: row for row in table}
    assert (by_id["a"].points, by_id["a"].wins, by_id["a"].draws) == (4, 1, 1)
    assert (by_id["d"].points, by_id["d"].wins) == (3, 1)
    assert (by_id["c"].points, by_id["c"].draws, by_id["c"].goal_diff) == (1, 1, 0)
    assert (by_id["b"].points, by_id["b"].losses, by_id["b"].goal_diff) == (0, 2, -4)


def test_zero_match_competitors_are_listed() -> None:
    table = compute_standings(_roster("Zed", "Amy"), [])
    assert [row.competitor_name for row in table] == ["Amy", "Zed"]
    assert all(row.played == 0 and row.points == 0 for row in table)


def test_full_statistical_tie_broken_by_name() -> None:
    roster = _roster("Carla", "Bruno", "Anna")
    fixtures = [
        _played("1", "carla", "bruno", 1, 1),
        _played("2", "bruno", "anna", 1, 1, round_no=2),
        _played("3", "anna", "carla", 1, 1, round_no=3),
    ]
    table = compute_standings(roster, fixtures)
    assert [row.competitor_name for row in table] == ["Anna", "Bruno", "Carla"]
    assert sorted(row.rank for row in table) == [1, 2, 3]


def test_goals_for_breaks_equal_goal_difference() -> None:
    roster = _roster("A", "B", "C", "D")
    fixtures = [
        _played("1", "a", "c", 3, 2),
        _played("2", "b", "d", 1, 0),
    ]
    table = compute_standings(roster, fixtures)
    assert [row.competitor_id for row in table][:2] == ["a", "b"]


def test_unplayed_and_playoff_fixtures_are_ignored() -> None:
    roster = _roster("A", "B")
    fixtures = [
        Fixture(id="1", home_id="a", away_id="b", round=1),
        Fixture(
            id="SF-1",
            home_id="a",
            away_id="b",
            round=1,
            home_goals=5,
            away_goals=0,
            is_playoff=True,
            playoff_stage=PlayoffStage.SEMIFINAL,
        ),
    ]
    table = compute_standings(roster, fixtures)
    assert all(row.played == 0 for row in table)


def test_unknown_competitor_fixture_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    roster = _roster("A", "B")
    fixtures = [_played("ghost", "a", "x", 4, 0), _played("real", "a", "b", 1, 0)]
    with caplog.at_level(logging.WARNING, logger="league_core.standings"):
        table = compute_standings(roster, fixtures)
    by_id = {row.competitor_id: row for row in table}
    assert by_id["a"].played == 1
    assert by_id["a"].goals_for == 1
    assert "ghost" in caplog.text


def test_compute_is_idempotent_and_rows_are_consistent() -> None:
    roster = _roster("A", "B", "C")
    fixtures = [_played("1", "a", "b", 2, 2), _played("2", "c", "a", 0, 1, round_no=2)]
    first = compute_standings(roster, fixtures)
    assert first == compute_standings(roster, fixtures)
    for row in first:
        assert row.wins + row.draws + row.losses == row.played
        assert row.points == 3 * row.wins + row.draws
        assert row.goal_diff == row.goals_for - row.goals_against


def test_roster_is_not_mutated_and_input_order_does_not_matter() -> None:
    roster = _roster("A", "B", "C")
    fixtures = [_played("1", "a", "b", 0, 1)]
    forward = compute_standings(roster, fixtures)
    backward = compute_standings(list(reversed(roster)), fixtures)
    assert forward == backward
    assert [c.name for c in roster] == ["A", "B", "C"]


def test_match_outcome_rejects_unplayed_fixture() -> None:
    with pytest.raises(ValueError):
        match_outcome(Fixture(id="1", home_id="a", away_id="b", round=1))
    assert match_outcome(_played("2", "a", "b", 0, 3)) == "away"


def test_top_competitors_and_qualifiers() -> None:
    roster = _roster("A", "B", "C", "D", "E")
    table = compute_standings(roster, [_played("1", "e", "a", 2, 0)])
    assert [row.competitor_id for row in playoff_qualifiers(table)] == ["e", "b", "c", "d"]
    assert top_competitors(table, 0) == []
    assert len(top_competitors(table, 10)) == 5


def test_standings_statistics() -> None:
    roster = _roster("A", "B", "C")
    table = compute_standings(roster, [_played("1", "a", "b", 3, 1)])
    stats = standings_statistics(table)
    assert stats.total_competitors == 3
    assert stats.competitors_with_matches == 2
    assert stats.highest_points == 3
    assert stats.lowest_points == 0
    assert stats.average_points == pytest.approx(1.5)
    assert stats.total_goals == 4


def test_standings_statistics_empty_table() -> None:
    stats = standings_statistics([])
    assert (stats.highest_points, stats.lowest_points, stats.average_points) == (0, 0, 0.0)


def test_head_to_head_counts_both_legs() -> None:
    fixtures = [
        _played("1", "a", "b", 2, 1),
        _played("2", "b", "a", 1, 1, round_no=4),
        _played("3", "a", "c", 0, 5, round_no=2),
        Fixture(id="4", home_id="a", away_id="b", round=6),
    ]
    record = head_to_head(fixtures, "b", "a")
    assert record.total_matches == 2
    assert (record.first_wins, record.second_wins, record.draws) == (0, 1, 1)
    assert (record.first_goals, record.second_goals) == (2, 3)


def test_recent_form_newest_first() -> None:
    fixtures = [
        _played("1", "a", "b", 2, 0, round_no=1),
        _played("2", "c", "a", 1, 1, round_no=2),
        _played("3", "a", "d", 0, 1, round_no=3),
        Fixture(id="4", home_id="a", away_id="e", round=4),
    ]
    form = recent_form(fixtures, "a")
    assert form.results == ("L", "D", "W")
    assert (form.wins, form.draws, form.losses) == (1, 1, 1)
    assert (form.goals_for, form.goals_against) == (3, 2)
    assert form.points == 4
    assert recent_form(fixtures, "a", last=1).results == ("L",)


def test_fixture_statistics() -> None:
    fixtures = [
        _played("1", "a", "b", 1, 0),
        Fixture(id="2", home_id="b", away_id="a", round=2),
        Fixture(id="SF-1", home_id="a", away_id="b", round=1, is_playoff=True, playoff_stage=PlayoffStage.SEMIFINAL),
    ]
    stats = fixture_statistics(fixtures)
    assert (stats.total, stats.played, stats.pending, stats.league, stats.playoff) == (3, 1, 2, 2, 1)
