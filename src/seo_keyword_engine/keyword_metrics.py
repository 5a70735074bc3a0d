"""
Volume and difficulty metadata for keyword suggestions.

There is no search-volume data source behind these values. The synthetic
provider produces clearly labeled placeholders; swap in another object
with the same ``volume``/``difficulty`` methods to use real data.
"""

import random
from typing import Optional

from .models import Difficulty

# Placeholder volume ranges per suggestion source: (low, span)
VOLUME_RANGES = {
    "enrichment": (500, 5000),
    "content": (200, 3000),
}


class SyntheticKeywordMetrics:
    """Random placeholder search volume and difficulty."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def volume(self, term: str, source: str = "content") -> str:
        low, span = VOLUME_RANGES.get(source, VOLUME_RANGES["content"])
        return f"{self._random.randrange(low, low + span)} searches/mo"

    def difficulty(self, term: str, source: str = "content") -> Difficulty:
        return self._random.choice(list(Difficulty))
