from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class LoadOutcome(str, Enum):
    LOADED = "loaded"        # Primary source read and filtered
    FALLBACK = "fallback"    # Source failed, embedded list in use

class Level(BaseModel):
    model_config = ConfigDict(frozen=True)

    root_letters: str                 # Signature of the root word, e.g. "adegl"
    display_letters: tuple[str, ...]  # Shuffled uppercase letters, e.g. ("G", "L", "A", "D", "E")
    valid_words: tuple[str, ...]      # Sorted by length, then alphabetically

    @property
    def root_length(self) -> int:
        return len(self.root_letters)

    def words_by_length(self) -> dict[int, list[str]]:
        groups: dict[int, list[str]] = {}
        for word in self.valid_words:
            groups.setdefault(len(word), []).append(word)
        return groups

class LevelProgress(BaseModel):
    """
    Player progress through one level. Owned by the game session; the engine
    never touches it.
    """
    level: Level
    found_words: set[str] = Field(default_factory=set)
    skipped: bool = False

    @property
    def remaining(self) -> list[str]:
        return [w for w in self.level.valid_words if w not in self.found_words]

    @property
    def is_complete(self) -> bool:
        return len(self.found_words) == len(self.level.valid_words)

    def mark_found(self, word: str):
        if word in self.level.valid_words:
            self.found_words.add(word)

    def reveal_all(self):
        self.found_words = set(self.level.valid_words)
        self.skipped = True
