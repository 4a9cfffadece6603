import asyncio
import logging
from pathlib import Path
from typing import Iterable
import aiohttp
from wordflow.sources.base import SourceUnavailable, WordSource

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIST_URL = "https://raw.githubusercontent.com/first20hours/google-10000-english/master/20k.txt"

def split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if not any(line.strip() for line in lines):
        raise SourceUnavailable("Word list payload is empty")
    return lines

class UrlWordSource(WordSource):
    """
    Downloads a newline-delimited word list over HTTP.
    """

    def __init__(self, url: str = DEFAULT_WORD_LIST_URL, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    async def fetch(self) -> list[str]:
        logger.debug(f"Fetching word list from {self.url}")
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self.url) as resp:
                    if resp.status != 200:
                        raise SourceUnavailable(f"Dictionary fetch failed: {resp.status} from {self.url}")
                    text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
            raise SourceUnavailable(f"Dictionary fetch failed: {e!r}") from e
        return split_lines(text)

class FileWordSource(WordSource):
    """
    Reads a newline-delimited word list from disk.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def fetch(self) -> list[str]:
        try:
            with open(self.path, "r", encoding="utf-8", errors="ignore") as f:
                text = f.read()
        except OSError as e:
            raise SourceUnavailable(f"Could not read word list {self.path}: {e}") from e
        return split_lines(text)

class StaticWordSource(WordSource):
    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    async def fetch(self) -> list[str]:
        return list(self.words)
