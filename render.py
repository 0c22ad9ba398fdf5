"""Renders the head of a text with every word colored by frequency"""
import logging
import sys
from itertools import islice
from typing import List, TextIO

from colors import color_word
from model import FrequencyTable
from tokens import tokenize

LOGGER = logging.getLogger(__name__)

MAX_LINES = 15


def colored_line(line: str, counts: FrequencyTable) -> str:
    words = [color_word(w, counts.get(w.lower())) for w in tokenize(line)]
    # Trailing space is part of the expected output
    return ' '.join(words) + ' '


def colored_lines(content: str, counts: FrequencyTable, limit: int = MAX_LINES) -> List[str]:
    """
    Colors the first `limit` lines of content. A final newline leaves an empty last line,
    which renders as a single space. Lines past the limit are never tokenized.
    """
    lines = islice(content.split('\n'), limit)
    result = [colored_line(line, counts) for line in lines]
    LOGGER.debug(f'Rendered {len(result)} lines')
    return result


def print_colored_lines(content: str, counts: FrequencyTable, file: TextIO = None):
    out = file or sys.stdout
    for line in colored_lines(content, counts):
        print(line, file=out)
