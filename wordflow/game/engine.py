import asyncio
import logging
import random
from typing import Iterable, Optional
from wordflow.config import EngineConfig
from wordflow.game.index import ClusterIndex, letter_signature
from wordflow.game.models import Level, LoadOutcome
from wordflow.sources.base import SourceUnavailable, WordSource
from wordflow.words.bank import Dictionary, is_admissible, normalize
from wordflow.words.lists import FALLBACK_WORDS, SUPPLEMENT_WORDS

logger = logging.getLogger(__name__)

class EngineNotReady(RuntimeError):
    pass

class WordEngine:
    """
    Loads the dictionary once, indexes it by letter signature and
    generates levels from it.
    """

    def __init__(
        self,
        source: Optional[WordSource] = None,
        config: Optional[EngineConfig] = None,
        rng: Optional[random.Random] = None,
        supplement: Iterable[str] = SUPPLEMENT_WORDS,
    ):
        self.source = source
        self.supplement = tuple(supplement)
        self.config = config or EngineConfig()
        self._rng = rng or random.Random()
        self._dictionary: Optional[Dictionary] = None
        self._index: Optional[ClusterIndex] = None
        self._outcome: Optional[LoadOutcome] = None
        self._init_lock = asyncio.Lock()

    @property
    def ready(self) -> bool:
        return self._outcome is not None

    @property
    def dictionary(self) -> Dictionary:
        self._require_ready()
        return self._dictionary

    @property
    def index(self) -> ClusterIndex:
        self._require_ready()
        return self._index

    async def init(self) -> LoadOutcome:
        """
        Loads and indexes the dictionary. Only the first call does any work;
        later and concurrent calls get the same outcome. Never raises: any
        source failure, or a payload with no usable words, switches to the
        fallback word list.
        """
        async with self._init_lock:
            if self._outcome is not None:
                return self._outcome

            try:
                if self.source is None:
                    raise SourceUnavailable("No word source configured")
                raw_words = await self.source.fetch()
                if not any(is_admissible(normalize(w)) for w in raw_words):
                    raise SourceUnavailable("Word list payload has no admissible words")
                dictionary = Dictionary(raw_words, self.supplement)
                outcome = LoadOutcome.LOADED
            except SourceUnavailable as e:
                logger.error(f"Failed to load dictionary, using fallback: {e}")
                dictionary = Dictionary(FALLBACK_WORDS, self.supplement)
                outcome = LoadOutcome.FALLBACK
            except Exception as e:
                logger.error(f"Unexpected error loading dictionary, using fallback: {e!r}")
                dictionary = Dictionary(FALLBACK_WORDS, self.supplement)
                outcome = LoadOutcome.FALLBACK

            self._dictionary = dictionary
            self._index = ClusterIndex(dictionary)
            self._outcome = outcome
            logger.info(
                f"WordEngine: loaded {len(dictionary)} words in {len(self._index)} clusters ({outcome.value})"
            )
            return outcome

    def is_valid_word(self, word: str) -> bool:
        self._require_ready()
        return self._dictionary.is_valid(word)

    def generate_level(self, target_length: int = 6) -> Level:
        self._require_ready()

        root = self._pick_root(target_length)
        root_letters = letter_signature(root)

        pool = self._index.sub_anagrams(root_letters)
        selected = self._select_words(pool)
        selected.sort(key=lambda w: (len(w), w))

        display_letters = list(root.upper())
        self._rng.shuffle(display_letters)

        logger.debug(f"Generated level from root {root!r}: {len(pool)} candidates, kept {len(selected)}")
        return Level(
            root_letters=root_letters,
            display_letters=display_letters,
            valid_words=selected,
        )

    def _pick_root(self, target_length: int) -> str:
        for length in self._candidate_lengths(target_length):
            root = self._dictionary.get_random_word(length, self._rng)
            if root:
                return root
        logger.warning(f"No root candidates near length {target_length}, using {self.config.default_root!r}")
        return self.config.default_root

    def _candidate_lengths(self, target_length: int) -> list[int]:
        """
        Target first, then each shorter length down to the fallback length.
        """
        floor = self.config.fallback_length
        lengths = [target_length]
        lengths.extend(range(target_length - 1, floor - 1, -1))
        if floor not in lengths:
            lengths.append(floor)
        return lengths

    def _select_words(self, pool: list[str]) -> list[str]:
        """
        Keeps the whole pool when it fits under the cap. Otherwise scores each
        word uniform(0,1) ** (1/len) and keeps the top scores, which tilts the
        pick toward longer words.
        """
        max_words = self.config.max_words
        if len(pool) <= max_words:
            return list(pool)

        scored = [(word, self._rng.random() ** (1 / len(word))) for word in pool]
        scored.sort(key=lambda sw: sw[1], reverse=True)
        return [word for word, _ in scored[:max_words]]

    def _require_ready(self):
        if self._outcome is None:
            raise EngineNotReady("WordEngine.init() must complete before use")
