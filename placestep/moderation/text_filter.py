from __future__ import annotations

import re
from collections.abc import Iterable

from ..errors import QueryRejectedError

# Lower-cased; Korean entries match as whole tokens after punctuation is stripped.
_ABUSIVE_WORDS: frozenset[str] = frozenset({
    "시발",
    "씨발",
    "씨바",
    "ㅅㅂ",
    "ㅆㅂ",
    "병신",
    "ㅂㅅ",
    "개새끼",
    "새끼",
    "좆",
    "좆같다",
    "존나",
    "ㅈㄴ",
    "미친놈",
    "미친년",
    "꺼져",
    "fuck",
    "fucking",
    "shit",
    "bitch",
    "asshole",
    "bastard",
    "damn",
})

_TOKEN_RE = re.compile(r"[^\w]+", re.UNICODE)


def _tokens(text: str) -> list[str]:
    return [t for t in _TOKEN_RE.split(text.lower()) if t]


class TextFilter:
    """Word-list content check applied before a query reaches the backend."""

    def __init__(self, extra_words: Iterable[str] = ()) -> None:
        self._words = _ABUSIVE_WORDS | {w.lower() for w in extra_words}

    def is_abusive(self, token: str) -> bool:
        return token.lower() in self._words

    def is_abusive_only_input(self, text: str) -> bool:
        """True when *text* has at least one token and every token is abusive.

        Queries that merely contain a bad word alongside a real request are
        let through; the backend still gets something to search for.
        """
        tokens = _tokens(text or "")
        if not tokens:
            return False
        return all(self.is_abusive(t) for t in tokens)

    def ensure_allowed(self, text: str, message: str) -> None:
        if self.is_abusive_only_input(text):
            raise QueryRejectedError(message)


DEFAULT_TEXT_FILTER = TextFilter()


def is_abusive_only_input(text: str) -> bool:
    return DEFAULT_TEXT_FILTER.is_abusive_only_input(text)
