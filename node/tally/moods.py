# mutable mood ledger: one current mood per identity, replaced in place
import logging
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from .config import NOTE_MAX_LENGTH
from .counters import AggregateCounters
from .errors import AlreadyExists, InvalidCategory, NotFound
from .models import MoodRecord
from .records import RecordStore
from . import views

logger = logging.getLogger(__name__)

CATEGORY_COUNT = len(views.MOOD_NAMES)

NO_MOOD = MoodRecord(category=views.NEUTRAL, note="No mood set", timestamp=0)


class MoodState:
    def __init__(self) -> None:
        self.entries: RecordStore[MoodRecord] = RecordStore()
        self.counters = AggregateCounters(CATEGORY_COUNT)
        self.total_entries = 0


class MoodLedger:
    """
    Mood board per scope.

    An identity's record keeps the slot it got on first submission, so
    recent() is "last N by insertion", not "last N updated".
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._boards: Dict[str, MoodState] = {}
        self._lock = threading.RLock()
        self._clock = clock or (lambda: int(time.time()))

    def create(self, owner_scope: str) -> MoodState:
        with self._lock:
            if owner_scope in self._boards:
                logger.warning("mood board create rejected: %s already exists", owner_scope)
                raise AlreadyExists(f"mood board already exists at {owner_scope}")
            state = MoodState()
            self._boards[owner_scope] = state
            logger.info("mood board created at %s", owner_scope)
            return state

    def set_mood(self, ledger_scope: str, identity: str, category: int, note: str) -> MoodRecord:
        with self._lock:
            state = self._get(ledger_scope)
            if not 0 <= category < CATEGORY_COUNT:
                logger.warning("mood rejected: category %d in %s", category, ledger_scope)
                raise InvalidCategory(f"category {category} out of range 0..{CATEGORY_COUNT - 1}")

            record = MoodRecord(
                category=category,
                note=note[:NOTE_MAX_LENGTH],
                timestamp=self._clock(),
            )
            # counters first: a failed step leaves the stored record alone
            previous = state.entries.get(identity)
            if previous is not None:
                # same-category resubmission still goes through both steps
                state.counters.decrement(previous.category)
            state.counters.increment(category)
            state.entries.upsert(identity, record)
            if previous is None:
                state.total_entries += 1

            logger.info(
                "mood in %s: %s -> %s (%s)",
                ledger_scope, identity, views.mood_name(category),
                "new" if previous is None else "updated",
            )
            return record

    def is_initialized(self, scope: str) -> bool:
        with self._lock:
            return scope in self._boards

    def mood_of(self, scope: str, identity: str) -> MoodRecord:
        with self._lock:
            record = self._get(scope).entries.get(identity)
            return NO_MOOD if record is None else record

    def recent(self, scope: str, limit: int) -> List[MoodRecord]:
        with self._lock:
            return self._get(scope).entries.last(limit)

    def mood_counts(self, scope: str) -> List[int]:
        with self._lock:
            return self._get(scope).counters.as_list()

    def total_entries(self, scope: str) -> int:
        with self._lock:
            return self._get(scope).total_entries

    def summary(self, scope: str) -> Tuple[List[int], int]:
        """
        Counts and total read together, so they always agree.
        """
        with self._lock:
            state = self._get(scope)
            return state.counters.as_list(), state.total_entries

    def mood_percentage(self, scope: str, category: int) -> int:
        with self._lock:
            state = self._get(scope)
            if not 0 <= category < CATEGORY_COUNT:
                raise InvalidCategory(f"category {category} out of range 0..{CATEGORY_COUNT - 1}")
            return views.percentage(state.counters[category], state.total_entries)

    @staticmethod
    def mood_name(category: int) -> str:
        return views.mood_name(category)

    def scopes(self) -> List[str]:
        with self._lock:
            return list(self._boards)

    def _get(self, scope: str) -> MoodState:
        state = self._boards.get(scope)
        if state is None:
            raise NotFound(f"no mood board at {scope}")
        return state
