"""Tests for autocomplete suggestions."""

from __future__ import annotations

from historify.core.index import InvertedIndex
from historify.core.suggestions import get_suggestions
from historify.models.document import Document


class TestGetSuggestions:
    def test_short_prefix_returns_nothing(self, documents: list[Document], index: InvertedIndex) -> None:
        assert get_suggestions("s", documents, index) == []
        assert get_suggestions("", documents, index) == []

    def test_prefix_match(self, documents: list[Document], index: InvertedIndex) -> None:
        assert get_suggestions("sm", documents, index) == ["smith"]

    def test_index_terms_and_raw_words(self, documents: list[Document], index: InvertedIndex) -> None:
        # the stemmed index term plus the unstemmed word from the text
        assert get_suggestions("im", documents, index) == ["immigra", "immigration"]

    def test_case_insensitive_prefix(self, documents: list[Document], index: InvertedIndex) -> None:
        assert get_suggestions("LUS", documents, index) == ["lusitania"]

    def test_no_duplicates(self, documents: list[Document], index: InvertedIndex) -> None:
        suggestions = get_suggestions("fa", documents, index, limit=10)
        assert suggestions == ["factory"]

    def test_respects_limit_and_orders_by_length(self) -> None:
        docs = [Document(document_id="a", ocr_text="parish parade parliament paris parcel partition")]
        index = InvertedIndex.build(docs)

        suggestions = get_suggestions("par", docs, index, limit=3)

        assert len(suggestions) == 3
        assert suggestions == sorted(suggestions, key=len)
        # first three candidates by collection order survive the cut; index terms are stemmed
        assert set(suggestions) == {"parish", "parade", "parlia"}

    def test_zero_limit(self, documents: list[Document], index: InvertedIndex) -> None:
        assert get_suggestions("sm", documents, index, limit=0) == []

    def test_no_match(self, documents: list[Document], index: InvertedIndex) -> None:
        assert get_suggestions("zz", documents, index) == []
