import logging
import random
from typing import Optional
from wordflow.game.engine import WordEngine
from wordflow.game.models import LevelProgress
from wordflow.game.rules import GuessVerdict, classify_guess, next_level_length

logger = logging.getLogger(__name__)

class GameSession:
    """
    Single-player session: current level, found words and level number.
    """

    def __init__(self, engine: WordEngine, rng: Optional[random.Random] = None):
        self.engine = engine
        self._rng = rng or random.Random()
        self.level_number = 1
        self.progress: Optional[LevelProgress] = None

    def start(self, length: int = 6) -> LevelProgress:
        self.progress = LevelProgress(level=self.engine.generate_level(length))
        return self.progress

    def submit(self, guess: str) -> GuessVerdict:
        if self.progress is None:
            raise RuntimeError("Session has no active level; call start() first")
        verdict = classify_guess(self.engine, self.progress, guess)
        logger.debug(f"Guess {guess!r}: {verdict.value}")
        return verdict

    def give_up(self):
        if self.progress is not None:
            self.progress.reveal_all()

    def next_level(self) -> LevelProgress:
        """
        Moves on to a new level. Leaving an unfinished level counts as giving
        up, so only completed levels advance the level number.
        """
        if self.progress is None:
            return self.start()
        if not self.progress.is_complete:
            self.give_up()
        if not self.progress.skipped:
            self.level_number += 1
        length = next_level_length(self.progress.level.root_length, self._rng)
        return self.start(length)
