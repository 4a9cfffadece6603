from abc import ABC, abstractmethod

class SourceUnavailable(Exception):
    """
    Raised when a word source cannot produce a word list.
    """

class WordSource(ABC):
    """
    Abstract base class for anything that supplies raw candidate words.
    Implementations wrap their transport errors in SourceUnavailable.
    """

    @abstractmethod
    async def fetch(self) -> list[str]:
        """
        Returns raw, unfiltered strings (one per word). Transport, status and
        payload problems must be raised as SourceUnavailable.
        """
        pass
