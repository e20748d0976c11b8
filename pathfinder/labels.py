from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class LabelAllocationError(ValueError):
    """Raised when more node labels are requested than the alphabet holds."""


def generate_labels(count: int, alphabet: str = ALPHABET) -> List[str]:
    """Return the first ``count`` labels of ``alphabet`` in order."""

    if count < 0:
        raise LabelAllocationError(f"label count must be non-negative (got {count})")
    if count > len(alphabet):
        raise LabelAllocationError(
            f"cannot allocate {count} unique labels from an alphabet of {len(alphabet)}"
        )
    if len(set(alphabet[:count])) != count:
        raise LabelAllocationError("alphabet contains repeated characters")
    labels = list(alphabet[:count])
    logger.debug("Allocated %d labels: %s", count, "".join(labels))
    return labels
