"""TF-IDF relevance scoring.

score = Σ tf(term) · idf(term)
      + filename_boost · (query terms found in the file name)
      + phrase_boost   if the raw query appears verbatim in the document

with ``tf = count / document length`` and ``idf = ln(N / (df + 1))``.
A term present in every document of the collection gets a negative idf;
that contribution is kept as-is.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

from historify.core.tokenizer import tokenize
from historify.models.document import Document

DEFAULT_FILENAME_BOOST = 0.5
DEFAULT_PHRASE_BOOST = 1.0


class RelevanceScorer:
    """Scores documents against a query using statistics of a collection.

    Document frequencies are computed once when the scorer is created, so
    scoring every candidate of a search stays linear in the candidate count.

    Attributes:
        filename_boost: Added once per query term that also occurs in the file name.
        phrase_boost: Added when the document contains the raw query verbatim.
    """

    def __init__(
        self,
        all_documents: Sequence[Document],
        *,
        filename_boost: float = DEFAULT_FILENAME_BOOST,
        phrase_boost: float = DEFAULT_PHRASE_BOOST,
    ) -> None:
        self.filename_boost = filename_boost
        self.phrase_boost = phrase_boost
        self._total_documents = len(all_documents)
        self._document_frequency: Counter[str] = Counter()
        for doc in all_documents:
            self._document_frequency.update(set(tokenize(doc.combined_text)))

    def document_frequency(self, term: str) -> int:
        """Number of collection documents whose terms include ``term``."""
        return self._document_frequency[term]

    def idf(self, term: str) -> float:
        """Inverse document frequency; 0 for an empty collection."""
        if self._total_documents == 0:
            return 0.0
        return math.log(self._total_documents / (self.document_frequency(term) + 1))

    def score(self, query: str, document: Document) -> float:
        """Relevance of ``document`` for ``query``.

        Returns 0.0 when either the query or the document has no terms.
        """
        query_terms = tokenize(query)
        doc_terms = tokenize(document.combined_text)
        if not query_terms or not doc_terms:
            return 0.0

        term_counts = Counter(doc_terms)
        doc_length = len(doc_terms)

        score = 0.0
        for term in query_terms:
            tf = term_counts[term] / doc_length
            score += tf * self.idf(term)

        filename_terms = set(tokenize(document.file_name))
        score += self.filename_boost * sum(1 for term in query_terms if term in filename_terms)

        if query.lower() in document.combined_text.lower():
            score += self.phrase_boost

        return score


def calculate_relevance(query: str, document: Document, all_documents: Sequence[Document]) -> float:
    """Score one document with default boosts.

    Convenience wrapper; scoring many documents against the same collection
    should reuse one :class:`RelevanceScorer`.
    """
    return RelevanceScorer(all_documents).score(query, document)
