from collections import Counter
from typing import Iterable, Iterator

def letter_signature(word: str) -> str:
    """
    Canonical sorted form of a word; anagrams share a signature.
    """
    return "".join(sorted(word))

def is_multiset_subset(small: str, big: str) -> bool:
    """
    True if every letter of `small` occurs in `big` at least as many times.
    """
    return not (Counter(small) - Counter(big))

class ClusterIndex:
    """
    Groups dictionary words by letter signature. Word order inside a cluster
    follows the order the words were indexed in.
    """

    def __init__(self, words: Iterable[str]):
        self.clusters: dict[str, list[str]] = {}
        for word in words:
            signature = letter_signature(word)
            if signature not in self.clusters:
                self.clusters[signature] = []
            self.clusters[signature].append(word)

    def __len__(self) -> int:
        return len(self.clusters)

    def __iter__(self) -> Iterator[tuple[str, list[str]]]:
        return iter(self.clusters.items())

    def sub_anagrams(self, root_signature: str) -> list[str]:
        """
        All indexed words spellable from the letters of `root_signature`.
        """
        pool = []
        for signature, words in self.clusters.items():
            if len(signature) > len(root_signature):
                continue
            if is_multiset_subset(signature, root_signature):
                pool.extend(words)
        return pool
