import asyncio
import random
import pytest
from wordflow.config import EngineConfig
from wordflow.game.engine import EngineNotReady, WordEngine
from wordflow.game.index import letter_signature
from wordflow.game.models import LoadOutcome
from wordflow.sources.adapters import StaticWordSource
from wordflow.sources.base import SourceUnavailable, WordSource

STRAIN_WORDS = [
    "strain", "rain", "rant", "stair", "train", "saint", "stain", "satin", "star",
    "rats", "arts", "tsar", "airs", "stir", "tins", "ants", "astir",
    # not spellable from "strain"
    "strains", "grain",
]

class CountingSource(WordSource):
    def __init__(self, words):
        self.words = words
        self.calls = 0

    async def fetch(self) -> list[str]:
        self.calls += 1
        await asyncio.sleep(0)
        return list(self.words)

class FailingSource(WordSource):
    async def fetch(self) -> list[str]:
        raise SourceUnavailable("Dictionary fetch failed: 503")

class BrokenSource(WordSource):
    async def fetch(self) -> list[str]:
        raise ValueError("unexpected payload shape")

async def make_engine(words, seed=7, **kwargs) -> WordEngine:
    engine = WordEngine(StaticWordSource(words), rng=random.Random(seed), supplement=(), **kwargs)
    await engine.init()
    return engine

async def test_init_loads_source():
    engine = WordEngine(StaticWordSource(["Strain", "rain", "sony"]), supplement=())
    assert not engine.ready

    outcome = await engine.init()

    assert outcome == LoadOutcome.LOADED
    assert engine.ready
    assert engine.dictionary.words == ("strain", "rain")

async def test_init_is_idempotent():
    source = CountingSource(STRAIN_WORDS)
    engine = WordEngine(source)

    first, second = await asyncio.gather(engine.init(), engine.init())
    size = len(engine.dictionary)
    third = await engine.init()

    assert source.calls == 1
    assert first == second == third == LoadOutcome.LOADED
    assert len(engine.dictionary) == size
    for _ in range(3):
        assert engine.is_valid_word("STRAIN")
        assert not engine.is_valid_word("qwzx")

async def test_failing_source_falls_back():
    engine = WordEngine(FailingSource(), rng=random.Random(1))

    outcome = await engine.init()

    assert outcome == LoadOutcome.FALLBACK
    assert len(engine.dictionary) > 0
    assert engine.is_valid_word("wrought")
    level = engine.generate_level(6)
    assert level.root_length == 6
    assert level.valid_words

async def test_unexpected_source_error_falls_back():
    engine = WordEngine(BrokenSource(), rng=random.Random(2))
    assert await engine.init() == LoadOutcome.FALLBACK
    assert engine.is_valid_word("strain")
    assert engine.generate_level(6).valid_words

async def test_payload_without_usable_words_falls_back():
    engine = WordEngine(StaticWordSource(["<html>", "<body>404 Not Found</body>", "a", "zz"]))
    assert await engine.init() == LoadOutcome.FALLBACK
    assert engine.is_valid_word("garden")

async def test_missing_source_falls_back():
    engine = WordEngine(None)
    assert await engine.init() == LoadOutcome.FALLBACK
    assert engine.generate_level().valid_words

def test_use_before_init_raises():
    engine = WordEngine(StaticWordSource(STRAIN_WORDS))
    with pytest.raises(EngineNotReady):
        engine.is_valid_word("rain")
    with pytest.raises(EngineNotReady):
        engine.generate_level()

async def test_cluster_index_covers_dictionary():
    engine = WordEngine(FailingSource())
    await engine.init()
    indexed = [w for _, words in engine.index for w in words]
    assert sorted(indexed) == sorted(engine.dictionary.words)
    assert len(indexed) == len(set(indexed))

async def test_small_pool_is_kept_whole_and_sorted():
    engine = await make_engine(["strain", "stair", "rant", "rain", "grain"])
    level = engine.generate_level(6)
    assert level.root_letters == letter_signature("strain")
    assert level.valid_words == ("rain", "rant", "stair", "strain")

async def test_cap_keeps_twelve_distinct_pool_words():
    engine = await make_engine(STRAIN_WORDS)
    pool = set(STRAIN_WORDS) - {"strains", "grain"}

    for _ in range(20):
        level = engine.generate_level(6)
        assert level.root_letters == "ainrst"
        assert len(level.valid_words) == 12
        assert len(set(level.valid_words)) == 12
        assert set(level.valid_words) <= pool
        assert list(level.valid_words) == sorted(level.valid_words, key=lambda w: (len(w), w))

async def test_selection_scores_by_length_biased_uniform():
    engine = await make_engine(STRAIN_WORDS, seed=42)
    pool = engine.index.sub_anagrams("ainrst")

    engine._rng = random.Random(99)
    selected = engine._select_words(pool)

    rng = random.Random(99)
    scores = [(w, rng.random() ** (1 / len(w))) for w in pool]
    expected = [w for w, _ in sorted(scores, key=lambda s: s[1], reverse=True)[:12]]
    assert selected == expected

async def test_max_words_from_config():
    engine = await make_engine(STRAIN_WORDS, config=EngineConfig(max_words=5))
    assert len(engine.generate_level(6).valid_words) == 5

async def test_display_letters_permute_root():
    engine = await make_engine(STRAIN_WORDS + ["garden", "planet"])
    for _ in range(10):
        level = engine.generate_level(6)
        assert len(level.display_letters) == 6
        assert all(ch.isupper() for ch in level.display_letters)
        assert sorted(ch.lower() for ch in level.display_letters) == list(level.root_letters)

async def test_missing_length_steps_down():
    engine = await make_engine(["strain", "stain", "rain"])
    level = engine.generate_level(7)
    assert level.root_letters == "ainrst"

async def test_missing_lengths_reach_five():
    engine = await make_engine(["stain", "rain"])
    assert engine.generate_level(7).root_letters == "ainst"
    assert engine.generate_level(6).root_letters == "ainst"

async def test_default_root_when_no_candidates():
    engine = await make_engine(["rate", "tear", "wart", "rain"])
    level = engine.generate_level(6)
    assert level.root_letters == "aertw"
    assert level.valid_words == ("rate", "tear", "wart")
    assert sorted(level.display_letters) == sorted("WATER")
