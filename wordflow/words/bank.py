import random
import re
from typing import Iterable, Optional
from wordflow.words.lists import BLACKLIST, SUPPLEMENT_WORDS

MIN_LENGTH = 4
MAX_LENGTH = 7
ALPHA_ONLY = re.compile(r"^[a-z]+$")
HAS_VOWEL = re.compile(r"[aeiouy]")

def normalize(raw: str) -> str:
    return raw.strip().lower()

def is_admissible(word: str) -> bool:
    """
    True if a normalized word may enter the dictionary: 4-7 ASCII letters,
    at least one vowel (or "y"), and not blacklisted.
    """
    return (
        MIN_LENGTH <= len(word) <= MAX_LENGTH
        and ALPHA_ONLY.match(word) is not None
        and HAS_VOWEL.search(word) is not None
        and word not in BLACKLIST
    )

class Dictionary:
    """
    Filtered word list with O(1) membership and an ordered view for
    sampling root words by length.
    """

    def __init__(self, raw_words: Iterable[str], supplement: Iterable[str] = SUPPLEMENT_WORDS):
        ordered = []
        seen = set()
        for raw in list(raw_words) + list(supplement):
            word = normalize(raw)
            if word in seen or not is_admissible(word):
                continue
            seen.add(word)
            ordered.append(word)

        self.words = tuple(ordered)
        self.all_words = frozenset(seen)
        # Pre-index by length for root selection
        self._length_index = {}
        for w in self.words:
            if len(w) not in self._length_index:
                self._length_index[len(w)] = []
            self._length_index[len(w)].append(w)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str) -> bool:
        return word.lower() in self.all_words

    def get_random_word(self, length: int, rng: Optional[random.Random] = None) -> str | None:
        matches = self._length_index.get(length)
        if not matches:
            return None
        return (rng or random).choice(matches)
