"""
Theme extraction for the insights page.

Turns the gratitude ("past") and hope ("future") notes of every entry into a
ranked list of frequent, meaningful words. Mood labels and the long reflection
are not part of the analysis.

Pipeline:
  corpus -> lowercase -> strip punctuation -> split on whitespace
  -> drop short tokens and stop words -> count -> rank -> top 40

Ties in count keep the order in which words were first seen in the corpus.
"""

import re
import unicodedata
from typing import Dict, Iterable, List

from ..models import Entry, WordStat

MAX_THEMES = 40
MIN_WORD_LENGTH = 3

_WORD_CHAR_RE = re.compile(r"\w")

STOP_WORDS = frozenset([
    'i', 'me', 'my', 'myself', 'we', 'our', 'ours', 'ourselves', 'you', 'your', 'yours',
    'yourself', 'yourselves', 'he', 'him', 'his', 'himself', 'she', 'her', 'hers',
    'herself', 'it', 'its', 'itself', 'they', 'them', 'their', 'theirs', 'themselves',
    'what', 'which', 'who', 'whom', 'this', 'that', 'these', 'those', 'am', 'is', 'are',
    'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'having', 'do', 'does',
    'did', 'doing', 'a', 'an', 'the', 'and', 'but', 'if', 'or', 'because', 'as', 'until',
    'while', 'of', 'at', 'by', 'for', 'with', 'about', 'against', 'between', 'into',
    'through', 'during', 'before', 'after', 'above', 'below', 'to', 'from', 'up', 'down',
    'in', 'out', 'on', 'off', 'over', 'under', 'again', 'further', 'then', 'once', 'here',
    'there', 'when', 'where', 'why', 'how', 'all', 'any', 'both', 'each', 'few', 'more',
    'most', 'other', 'some', 'such', 'no', 'nor', 'not', 'only', 'own', 'same', 'so',
    'than', 'too', 'very', 's', 't', 'can', 'will', 'just', 'don', 'should', 'now', 'things',
])


def corpus(entries: Iterable[Entry]) -> str:
    """Join every entry's past and future notes, in store order."""
    return " ".join(f"{e.past or ''} {e.future or ''}" for e in entries)


def _keep_char(ch: str) -> bool:
    # Combining marks (Mn, Mc, Me) belong to the word they follow
    return ch.isspace() or bool(_WORD_CHAR_RE.match(ch)) or unicodedata.category(ch).startswith("M")


def strip_punctuation(text: str) -> str:
    return "".join(ch for ch in text if _keep_char(ch))


def tokenize(text: str) -> List[str]:
    # NFC so composed and decomposed spellings count as one word
    normalized = unicodedata.normalize("NFC", text.lower())
    cleaned = strip_punctuation(normalized)
    # str.split() with no argument drops empty tokens
    return cleaned.split()


def is_meaningful(token: str) -> bool:
    return len(token) >= MIN_WORD_LENGTH and token not in STOP_WORDS


def count_words(tokens: Iterable[str]) -> Dict[str, int]:
    # dict keeps first-seen order, which becomes the tie-break
    counts: Dict[str, int] = {}
    for token in tokens:
        if is_meaningful(token):
            counts[token] = counts.get(token, 0) + 1
    return counts


def extract_themes(entries: Iterable[Entry], limit: int = MAX_THEMES) -> List[WordStat]:
    """
    Rank the most frequent meaningful words across all entries.

    Args:
        entries: The full entry collection, in store order.
        limit: Maximum number of words returned (default 40).

    Returns:
        WordStat list sorted by descending count. Empty when nothing survives
        filtering.
    """
    counts = count_words(tokenize(corpus(entries)))
    # sorted() is stable, so equal counts stay in first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [WordStat(text=word, value=count) for word, count in ranked[:limit]]
