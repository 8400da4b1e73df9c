import logging
from urllib.parse import quote_plus

import requests
from ..config import DICTIONARY_API_URL

logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.google.com/search?q=define+"


def define_url(word: str | None) -> str | None:
    """Web search link for the word's definition, or None for a blank word."""
    word = (word or "").strip()
    if not word:
        return None
    return SEARCH_URL + quote_plus(word)


def lookup_definition(word: str | None, timeout: float = 5) -> dict | None:
    """
    Look up a short definition from the dictionary API.

    Args:
        word: The mood label to define
        timeout: Request timeout in seconds

    Returns:
        {"word", "part_of_speech", "definition"} for the first sense found,
        or None if the word is blank, unknown, or the API is unreachable.
    """
    word = (word or "").strip()
    if not word:
        return None

    try:
        url = f"{DICTIONARY_API_URL}/{quote_plus(word.lower())}"
        resp = requests.get(url, timeout=timeout)
        if resp.status_code != 200:
            return None

        data = resp.json()
        for item in data:
            for meaning in item.get("meanings", []):
                for sense in meaning.get("definitions", []):
                    text = (sense.get("definition") or "").strip()
                    if text:
                        return {
                            "word": item.get("word", word),
                            "part_of_speech": meaning.get("partOfSpeech", ""),
                            "definition": text,
                        }
        return None
    except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
        logger.debug("Definition lookup failed for %r: %s", word, e)
        return None
