"""
generator.py — Random Sequence Generator
=========================================
Produces the array every run starts from.
"""

import logging
import random
from typing import List, Optional

from config import VALUE_MIN, VALUE_MAX

logger = logging.getLogger(__name__)


def generate_sequence(length: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Return `length` independent uniform integers in [VALUE_MIN, VALUE_MAX].

    Args:
        length : Number of elements; negative values yield an empty list.
        rng    : Optional random.Random for reproducible arrays (tests).
    """
    source = rng if rng is not None else random
    values = [source.randint(VALUE_MIN, VALUE_MAX) for _ in range(max(0, length))]
    logger.debug("Generated %d values in [%d, %d]", len(values), VALUE_MIN, VALUE_MAX)
    return values
