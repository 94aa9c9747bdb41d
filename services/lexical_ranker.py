# services/lexical_ranker.py
"""Keyword ranking of hotel and room documents"""

import logging
from typing import Any, List, Sequence

from config import settings
from core.domain import Document, DocumentKind, ScoredResult, SearchOutcome
from core.errors import InvalidArgumentError
from services.corpus_builder import format_price

logger = logging.getLogger(settings.LOGGER_NAME)


def tokenize(query: Any) -> List[str]:
    """Lower-case the query and split it on whitespace runs."""
    if not isinstance(query, str):
        raise InvalidArgumentError("Query must be a string")
    tokens = query.lower().split()
    if not tokens:
        raise InvalidArgumentError("Query must not be empty")
    return tokens


class LexicalRanker:
    """
    Presence-based scorer with a title bonus.

    Each query token counts once per document: TEXT_MATCH_SCORE when it occurs
    in the document text, plus TITLE_MATCH_BONUS when it also occurs in the
    title. Repeated occurrences do not add anything.
    """

    def __init__(
        self,
        top_k: int = settings.SEARCH_TOP_K,
        text_score: float = settings.TEXT_MATCH_SCORE,
        title_bonus: float = settings.TITLE_MATCH_BONUS
    ):
        self.top_k = top_k
        self.text_score = text_score
        self.title_bonus = title_bonus

    def score(self, tokens: Sequence[str], document: Document) -> float:
        text = (document.text or "").lower()
        title = (document.title or "").lower()
        total = 0.0
        for token in tokens:
            if token in text:
                total += self.text_score
                if token in title:
                    total += self.title_bonus
        return total

    def rank(self, tokens: Sequence[str], documents: Sequence[Document]) -> List[ScoredResult]:
        scored = []
        for document in documents:
            value = self.score(tokens, document)
            if value > 0:
                scored.append(ScoredResult(document=document, score=value))
        # sorted() is stable: equal scores keep enumeration order
        scored = sorted(scored, key=lambda r: r.score, reverse=True)
        return scored[:self.top_k]

    def search(self, query: str, documents: Sequence[Document]) -> SearchOutcome:
        tokens = tokenize(query)
        results = self.rank(tokens, documents)
        logger.debug(f"Lexical search matched {len(results)} of {len(documents)} documents")
        return SearchOutcome(results=results, context=build_context(results))


def render_line(rank: int, result: ScoredResult) -> str:
    payload = result.document.payload
    if result.document.kind == DocumentKind.HOTEL:
        return (
            f"Hotel {rank}: {payload.get('name', '')} | "
            f"Address: {payload.get('address', '')}, {payload.get('city', '')}. "
            f"Contact: {payload.get('contact', '')}."
        )
    amenities = ", ".join(payload.get("amenities") or [])
    return (
        f"Room {rank}: {payload.get('roomType', '')} | "
        f"PricePerNight: {format_price(payload.get('pricePerNight'))} | "
        f"Amenities: {amenities}"
    )


def build_context(results: Sequence[ScoredResult]) -> str:
    """One human-readable line per result, in rank order."""
    return "\n".join(render_line(i, r) for i, r in enumerate(results, start=1))
