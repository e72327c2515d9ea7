"""Query-term highlighting for display."""

from __future__ import annotations

import html
import re

from historify.core.tokenizer import tokenize

DEFAULT_CLASS_NAME = "highlight"


def highlight(text: str, query: str, class_name: str = DEFAULT_CLASS_NAME) -> str:
    """Wrap whole-word occurrences of the query terms in marker spans.

    Matching is case-insensitive and respects word boundaries, so the term
    ``"smith"`` marks ``"Smith"`` but not ``"Smithson"``.  Query terms are
    the stemmed tokens of ``query``; the matched text keeps its original
    casing.  All terms are matched in a single pass, so markup inserted for
    one term is never matched by another.

    Args:
        text: Text to mark up.
        query: Query whose terms are highlighted.
        class_name: CSS class of the ``<span>`` wrapper.

    Returns:
        The marked-up text, or ``text`` unchanged when there is nothing to mark.
    """
    if not text or not query:
        return text

    terms = sorted(set(tokenize(query)), key=len, reverse=True)
    if not terms:
        return text

    pattern = re.compile(r"\b(?:" + "|".join(re.escape(term) for term in terms) + r")\b", re.IGNORECASE)
    opening = f'<span class="{html.escape(class_name, quote=True)}">'
    return pattern.sub(lambda match: f"{opening}{match.group(0)}</span>", text)
