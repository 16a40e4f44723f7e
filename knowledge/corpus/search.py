"""Scored multi-field search over the knowledge base."""

import logging

from knowledge.contracts.document import Document, ScoredMatch
from knowledge.corpus.loader import DocumentLoader

logger = logging.getLogger(__name__)

TITLE_WEIGHT = 10
TAGS_WEIGHT = 7
DESCRIPTION_WEIGHT = 5
EXCERPT_WEIGHT = 3


def tokenize(query: str) -> list[str]:
    """Case-folded whitespace terms, single characters dropped."""
    return [term for term in query.lower().split() if len(term) > 1]


def score_document(document: Document, terms: list[str]) -> int:
    """Sum field weights for every term found as a substring of a field."""
    title = document.title.lower()
    tags = [tag.lower() for tag in document.tags]
    description = (document.description or "").lower()
    excerpt = document.excerpt.lower()

    score = 0
    for term in terms:
        if term in title:
            score += TITLE_WEIGHT
        if any(term in tag for tag in tags):
            score += TAGS_WEIGHT
        if term in description:
            score += DESCRIPTION_WEIGHT
        if term in excerpt:
            score += EXCERPT_WEIGHT
    return score


class SearchEngine:
    """
    Keyword search with field weighting (title, tags, description, excerpt).

    The corpus is reloaded on every call.
    """

    def __init__(self, loader: DocumentLoader):
        self.loader = loader

    def rank(self, query: str) -> list[ScoredMatch]:
        """
        Score all documents against the query.

        Returns:
            Matches with a positive score, best first. Equal scores keep
            the loader's date-descending order.
        """
        if not query or not query.strip():
            return []

        terms = tokenize(query)
        if not terms:
            return []

        matches: list[ScoredMatch] = []
        for document in self.loader.list_all():
            score = score_document(document, terms)
            if score > 0:
                matches.append(ScoredMatch(document=document, score=score))

        matches.sort(key=lambda m: m.score, reverse=True)
        logger.debug("Query %r matched %d documents", query, len(matches))
        return matches

    def search(self, query: str) -> list[Document]:
        """Documents matching the query, most relevant first."""
        return [match.document for match in self.rank(query)]


__all__ = ["SearchEngine", "score_document", "tokenize"]
