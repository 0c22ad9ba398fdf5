"""ANSI coloring of words by frequency"""
import re
from typing import Optional

from model import COMMON_MAX, RARE_COUNT, Bucket

RESET = '\033[39m'

FOREGROUND = {
    'red': '\033[31m',
    'green': '\033[32m',
    'blue': '\033[34m',
}

_ANSI = re.compile(r'\x1b\[[0-9;]*m')


def paint(text: str, color: str) -> str:
    if color not in FOREGROUND:
        raise ValueError(f'Invalid color: {color}')
    return FOREGROUND[color] + text + RESET


def classify(count: Optional[int]) -> Bucket:
    """ None means the word was never counted; it falls through to FREQUENT like any other odd value"""
    if count == RARE_COUNT:
        return Bucket.RARE
    if isinstance(count, (int, float)) and RARE_COUNT + 1 <= count <= COMMON_MAX:
        return Bucket.COMMON
    return Bucket.FREQUENT


def color_word(word: str, count: Optional[int]) -> str:
    """
    Blue for a word seen once, green for 2-5 times, red for anything else.
    Pass None for a word missing from the counts; it comes out red.
    """
    return paint(word, classify(count).color)


def strip_colors(text: str) -> str:
    return _ANSI.sub('', text)
