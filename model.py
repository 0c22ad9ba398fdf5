from enum import Enum
from typing import Mapping

# Lowercase word -> number of times it occurs in the whole text
FrequencyTable = Mapping[str, int]

RARE_COUNT = 1
COMMON_MAX = 5


class Bucket(Enum):
    RARE = 'blue'
    COMMON = 'green'
    FREQUENT = 'red'

    @property
    def color(self) -> str:
        return self.value
