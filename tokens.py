"""Splits text into words and counts them"""
import logging
import re
from collections import defaultdict
from types import MappingProxyType
from typing import List

from model import FrequencyTable

LOGGER = logging.getLogger(__name__)

# ASCII only, like JavaScript's \W: accented letters split words
_NON_WORD = re.compile(r'[^A-Za-z0-9_]+')


def tokenize(text: str) -> List[str]:
    return [w for w in _NON_WORD.split(text) if w]


def word_counts(content: str) -> FrequencyTable:
    """Counts every word in the content, case folded. Words not present get no entry."""
    counts = defaultdict(int)
    words = tokenize(content)
    for word in words:
        counts[word.lower()] += 1
    LOGGER.debug(f'{len(words)} words, {len(counts)} distinct')
    # Plain dict underneath so a missing word is a None lookup, never a silent 0
    return MappingProxyType(dict(counts))
