"""Search core: tokenizer, inverted index, strategies, scoring and the engine."""

from historify.core.engine import SearchEngine
from historify.core.index import InvertedIndex
from historify.core.strategies import SearchStrategy
from historify.core.tokenizer import tokenize

__all__ = ["InvertedIndex", "SearchEngine", "SearchStrategy", "tokenize"]
