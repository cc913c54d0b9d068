# services/text_generator.py
from __future__ import annotations
import random
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, "
    "quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo "
    "consequat. Duis aute irure dolor in reprehenderit in voluptate velit esse "
    "cillum dolore eu fugiat nulla pariatur. Excepteur sint occaecat cupidatat non "
    "proident, sunt in culpa qui officia deserunt mollit anim id est laborum."
)

Bigram = Tuple[str, str]

_SENTENCE_END = ".?!"
_CLAUSE_END = ",;:"


class MarkovChain:
    """Bigram chain: each pair of consecutive words maps to the words seen after it."""

    def __init__(self):
        self.map: Dict[Bigram, List[str]] = defaultdict(list)
        self.keys: List[Bigram] = []

    def learn(self, text: str):
        words = text.split()
        for a, b, c in zip(words, words[1:], words[2:]):
            key = (a, b)
            if key not in self.map:
                self.keys.append(key)
            self.map[key].append(c)

    def words(self, n: int, rng: random.Random) -> List[str]:
        if n <= 0 or not self.keys:
            return []
        state = rng.choice(self.keys)
        out = list(state)[:n]
        while len(out) < n:
            followers = self.map.get(state)
            if not followers:
                # dead end at the last bigram, restart somewhere else
                state = rng.choice(self.keys)
                out.extend(state[: n - len(out)])
                continue
            nxt = rng.choice(followers)
            out.append(nxt)
            state = (state[1], nxt)
        return out


def join_words(words: List[str]) -> str:
    """Sentence-case the phrase and make sure it ends with a full stop."""
    if not words:
        return ""
    words = list(words)
    words[0] = words[0][:1].upper() + words[0][1:]
    last = words[-1]
    if last[-1] in _CLAUSE_END:
        last = last[:-1] + "."
    elif last[-1] not in _SENTENCE_END:
        last += "."
    words[-1] = last
    return " ".join(words)


_CHAIN = MarkovChain()
_CHAIN.learn(LOREM_IPSUM)


def generate(word_count: int, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    return join_words(_CHAIN.words(word_count, rng))
