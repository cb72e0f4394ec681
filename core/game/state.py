"""Game phase enumeration."""

from enum import Enum, auto


class GamePhase(Enum):
    """
    Game state machine phases.

    Flow: WAITING_FOR_FIRST → WAITING_FOR_SECOND → WAITING_FOR_FIRST ... → GAME_OVER
    """

    # No card pending, next pick starts a comparison
    WAITING_FOR_FIRST = auto()

    # One card pending, next pick completes the comparison
    WAITING_FOR_SECOND = auto()

    # Every card matched
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid phase transitions (start_new_game may reset from any phase)
VALID_TRANSITIONS: dict[GamePhase, list[GamePhase]] = {
    GamePhase.WAITING_FOR_FIRST: [GamePhase.WAITING_FOR_SECOND],
    GamePhase.WAITING_FOR_SECOND: [GamePhase.WAITING_FOR_FIRST, GamePhase.GAME_OVER],
    GamePhase.GAME_OVER: [],  # Terminal until a new game starts
}


def is_valid_transition(from_phase: GamePhase, to_phase: GamePhase) -> bool:
    """
    Check if a phase transition is valid.

    Args:
        from_phase: Current phase
        to_phase: Desired phase

    Returns:
        True if the transition is allowed
    """
    return to_phase in VALID_TRANSITIONS.get(from_phase, [])
