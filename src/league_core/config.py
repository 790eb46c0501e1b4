"""Static scoring and bracket configuration constants."""

POINTS_FOR_WIN: int = 3
POINTS_FOR_DRAW: int = 1
POINTS_FOR_LOSS: int = 0

# Semifinals take the top four of the league table.
PLAYOFF_ENTRANTS: int = 4

MAX_NAME_LENGTH: int = 50
FORM_GUIDE_LENGTH: int = 5

SEMIFINAL_ROUND: int = 1
FINALS_ROUND: int = 2

PLAYOFF_STAGE_LABELS: dict[str, str] = {
    "semifinal": "Semifinal",
    "final": "Final",
    "third-place": "Third Place",
}
