import random
from enum import Enum
from typing import Optional
from wordflow.game.index import is_multiset_subset
from wordflow.game.models import LevelProgress
from wordflow.words.bank import MAX_LENGTH, MIN_LENGTH

NEXT_LEVEL_MIN_LENGTH = 5
GROW_THRESHOLD = 0.6

class GuessVerdict(str, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    ALREADY_FOUND = "already_found"
    FOUND = "found"
    NOT_IN_PUZZLE = "not_in_puzzle"    # Real word, spellable, but trimmed from the level
    WRONG_LETTERS = "wrong_letters"    # Real word, not spellable from the root
    NOT_A_WORD = "not_a_word"

MESSAGES = {
    GuessVerdict.EMPTY: "",
    GuessVerdict.TOO_SHORT: "Too short!",
    GuessVerdict.ALREADY_FOUND: "Already found!",
    GuessVerdict.FOUND: "Great!",
    GuessVerdict.NOT_IN_PUZZLE: "Valid, but not in this puzzle!",
    GuessVerdict.WRONG_LETTERS: "Wrong letters!",
    GuessVerdict.NOT_A_WORD: "Not a word!",
}

def classify_guess(engine, progress: LevelProgress, guess: str) -> GuessVerdict:
    """
    Judges a player's guess against the current level, recording it in
    `progress` when it is one of the level's words.
    """
    word = guess.strip().lower()
    if not word:
        return GuessVerdict.EMPTY
    if len(word) < MIN_LENGTH:
        return GuessVerdict.TOO_SHORT
    if word in progress.found_words:
        return GuessVerdict.ALREADY_FOUND
    if word in progress.level.valid_words:
        progress.mark_found(word)
        return GuessVerdict.FOUND

    is_english_word = engine.is_valid_word(word)
    possible = is_multiset_subset(word, progress.level.root_letters)
    if is_english_word and possible:
        return GuessVerdict.NOT_IN_PUZZLE
    elif is_english_word:
        return GuessVerdict.WRONG_LETTERS
    else:
        return GuessVerdict.NOT_A_WORD

def next_level_length(current_length: int, rng: Optional[random.Random] = None) -> int:
    """
    Occasionally grows the root by one letter, staying within 5-7.
    """
    grow = 1 if (rng or random).random() > GROW_THRESHOLD else 0
    return min(MAX_LENGTH, max(NEXT_LEVEL_MIN_LENGTH, current_length + grow))
