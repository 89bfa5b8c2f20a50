# pure reads over ledger state
from typing import List, Sequence, Tuple, TypeVar

from .errors import InvalidProposals

T = TypeVar("T")

MOOD_NAMES = ("Happy", "Sad", "Neutral", "Excited", "Angry")
NEUTRAL = 2
UNKNOWN_MOOD = "Unknown"


def winner(labels: Sequence[str], counts: Sequence[int]) -> Tuple[str, int]:
    """
    Left-to-right scan with a strict-greater comparison, so among tied
    maxima the lowest index wins. All-zero counts yield the first label.
    """
    if not counts:
        raise InvalidProposals("no proposals to rank")
    best = 0
    best_count = counts[0]
    for i in range(1, len(counts)):
        if counts[i] > best_count:
            best = i
            best_count = counts[i]
    return labels[best], best_count


def results(labels: Sequence[str], counts: Sequence[int]) -> List[Tuple[str, int]]:
    return list(zip(labels, counts))


def percentage(count: int, total: int) -> int:
    if total == 0:
        return 0
    return count * 100 // total


def recent_slice(items: Sequence[T], limit: int) -> List[T]:
    if limit <= 0:
        return []
    return list(items[-limit:])


def mood_name(category: int) -> str:
    if 0 <= category < len(MOOD_NAMES):
        return MOOD_NAMES[category]
    return UNKNOWN_MOOD
