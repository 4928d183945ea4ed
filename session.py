"""The single game a server process or terminal plays."""
import logging
import random
import threading

import game
from characters import load_characters
from compare import category_config
from search import build_index, match_characters

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, characters, categories=None, letter_hint_enabled=True,
                 strict_guesses=True, rng=None):
        self.categories = categories if categories is not None else category_config()
        self.letter_hint_enabled = letter_hint_enabled
        self.strict_guesses = strict_guesses
        self.rng = rng or random.Random()
        self.round = None
        self._lock = threading.Lock()
        self.load(characters)

    @classmethod
    def from_settings(cls, settings, rng=None):
        return cls(
            load_characters(settings.data_file),
            categories=category_config(settings.include_deceased),
            letter_hint_enabled=settings.letter_hint_enabled,
            strict_guesses=settings.strict_guesses,
            rng=rng,
        )

    def load(self, characters):
        """Swap in a new dataset; the search index is rebuilt from scratch."""
        self.characters = build_index(list(characters))
        return self.characters

    @property
    def has_characters(self):
        return bool(self.characters)

    def new_round(self):
        with self._lock:
            self.round = game.start_round(self.characters, self.rng)
            return self.round

    def suggestions(self, query):
        if not isinstance(query, str):
            return []
        excluded = self.round.guessed_names if self.round else ()
        return match_characters(query, self.characters, excluded=excluded)

    def guess(self, raw_input):
        # guesses can arrive on several Socket.IO worker threads at once
        with self._lock:
            outcome = game.submit_guess(
                self.round,
                raw_input,
                self.characters,
                self.categories,
                suggestions=self.suggestions(raw_input),
                hint_enabled=self.letter_hint_enabled,
                strict=self.strict_guesses,
                rng=self.rng,
            )
            if outcome.state is not None:
                self.round = outcome.state
            return outcome

    def reveal(self):
        with self._lock:
            self.round, row = game.reveal(self.round, self.categories)
            return row

    def set_letter_hint(self, enabled):
        # the revealed letters survive a toggle, only the display changes
        self.letter_hint_enabled = bool(enabled)
        logger.debug("Letter hint %s", "enabled" if self.letter_hint_enabled else "disabled")

    @property
    def letter_hint(self):
        return game.visible_letter_hint(self.round, self.letter_hint_enabled)

    def status(self):
        if self.round is None:
            return {"phase": None, "incorrect_guesses": 0, "letter_hint": "",
                    "letter_hint_enabled": self.letter_hint_enabled,
                    "characters_loaded": len(self.characters)}
        return {
            "phase": self.round.phase.value,
            "incorrect_guesses": self.round.incorrect_guesses,
            "letter_hint": self.letter_hint,
            "letter_hint_enabled": self.letter_hint_enabled,
            "characters_loaded": len(self.characters),
        }
