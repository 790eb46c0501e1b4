from __future__ import annotations


class InsufficientEntrantsError(ValueError):
    """Raised when the league table is too short to fill a playoff bracket."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"At least {required} competitors required for playoffs, got {available}."
        )


class MalformedSemifinalInputError(ValueError):
    """Raised when finals seeding does not receive exactly two semifinal outcomes."""

    def __init__(self, received: int) -> None:
        self.received = received
        super().__init__(f"Exactly 2 semifinal results required, got {received}.")
