"""Round lifecycle.

A round is an immutable `RoundState`; every transition takes the current
state and returns a new one, so callers own exactly one record per round and
replace it wholesale.
"""
import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, List, Optional

from characters import Character, find_character, normalize
from feedback import FeedbackCell, feedback_row

logger = logging.getLogger(__name__)

# misses needed before letters of the secret start showing up
HINT_THRESHOLD = 5
HINT_PLACEHOLDER = "_"


class Phase(str, Enum):
    AWAITING_GUESS = "awaiting_guess"
    ROUND_WON = "round_won"
    ROUND_REVEALED = "round_revealed"


class GuessStatus(str, Enum):
    WON = "won"
    MISS = "miss"
    UNRESOLVED = "unresolved"
    ROUND_OVER = "round_over"
    EMPTY = "empty"
    NO_ROUND = "no_round"


@dataclass(frozen=True)
class RoundState:
    secret: Character
    phase: Phase = Phase.AWAITING_GUESS
    incorrect_guesses: int = 0
    revealed_indices: FrozenSet[int] = field(default_factory=frozenset)
    guessed_names: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def is_over(self) -> bool:
        return self.phase is not Phase.AWAITING_GUESS


@dataclass(frozen=True)
class GuessOutcome:
    status: GuessStatus
    state: Optional[RoundState]
    guess: Optional[Character] = None
    row: List[FeedbackCell] = field(default_factory=list)


def start_round(characters, rng=random) -> Optional[RoundState]:
    """Fresh round with a uniformly chosen secret, or None for an empty dataset."""
    if not characters:
        logger.warning("⚠️ No characters loaded, cannot start a round")
        return None
    secret = rng.choice(characters)
    logger.debug("New round, secret is %s", secret.name)
    return RoundState(secret=secret)


def _reveal_random_letter(state: RoundState, rng) -> RoundState:
    name = state.secret.name
    hidden = [i for i, ch in enumerate(name) if ch != " " and i not in state.revealed_indices]
    if not hidden:
        return state
    return replace(state, revealed_indices=state.revealed_indices | {rng.choice(hidden)})


def submit_guess(state, raw_input, characters, categories, suggestions=(),
                 hint_enabled=True, strict=True, rng=random) -> GuessOutcome:
    """Resolve `raw_input` to a character and score it against the secret.

    Unknown names fall back to the top suggestion. If there is none, a strict
    game rejects the guess; otherwise a blank character is scored, which
    loses every category.
    """
    if state is None:
        return GuessOutcome(GuessStatus.NO_ROUND, None)
    if state.is_over:
        return GuessOutcome(GuessStatus.ROUND_OVER, state)

    text = raw_input.strip() if isinstance(raw_input, str) else ""
    if not text:
        return GuessOutcome(GuessStatus.EMPTY, state)

    guess = find_character(characters, text)
    if guess is None and suggestions:
        guess = suggestions[0]
    if guess is None:
        if strict:
            return GuessOutcome(GuessStatus.UNRESOLVED, state)
        guess = Character.blank(text)

    row = feedback_row(guess, state.secret, categories)
    state = replace(state, guessed_names=state.guessed_names | {guess.name})

    if normalize(guess.name) == normalize(state.secret.name):
        logger.info("🎉 Correct guess: %s", state.secret.name)
        state = replace(
            state,
            phase=Phase.ROUND_WON,
            revealed_indices=frozenset(range(len(state.secret.name))),
        )
        return GuessOutcome(GuessStatus.WON, state, guess, row)

    state = replace(state, incorrect_guesses=state.incorrect_guesses + 1)
    if state.incorrect_guesses >= HINT_THRESHOLD and hint_enabled:
        state = _reveal_random_letter(state, rng)
    return GuessOutcome(GuessStatus.MISS, state, guess, row)


def reveal(state, categories):
    """Give up on the round; returns the new state and the secret's own row."""
    if state is None:
        return None, []
    logger.info("Secret revealed: %s", state.secret.name)
    state = replace(state, phase=Phase.ROUND_REVEALED)
    return state, feedback_row(state.secret, state.secret, categories)


def generate_letter_hint(state, hint_enabled=True) -> str:
    """The secret's name with unrevealed letters masked; spaces always show."""
    if state is None or not hint_enabled:
        return ""
    return "".join(
        ch if ch == " " or i in state.revealed_indices else HINT_PLACEHOLDER
        for i, ch in enumerate(state.secret.name)
    )


def visible_letter_hint(state, hint_enabled=True) -> str:
    """Hint text for display: nothing until the miss threshold, even after a win."""
    if state is None or state.incorrect_guesses < HINT_THRESHOLD:
        return ""
    return generate_letter_hint(state, hint_enabled)
