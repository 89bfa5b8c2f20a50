# single-choice poll ledger: one immutable vote per identity
import logging
import threading
from typing import Dict, List, Optional, Sequence, Tuple

from .counters import AggregateCounters
from .errors import AlreadyExists, AlreadyVoted, InvalidIndex, InvalidProposals, NotFound
from .records import RecordStore
from . import views

logger = logging.getLogger(__name__)


class PollState:
    """
    Everything stored for one poll scope. Labels are frozen at creation and
    the counter array has the same length.
    """

    def __init__(self, labels: Sequence[str]):
        self.labels: Tuple[str, ...] = tuple(labels)
        self.counters = AggregateCounters(len(self.labels))
        self.votes: RecordStore[int] = RecordStore()
        self.voter_count = 0


class PollLedger:
    def __init__(self) -> None:
        self._polls: Dict[str, PollState] = {}
        self._lock = threading.RLock()

    def create(self, owner_scope: str, proposal_labels: Sequence[str]) -> PollState:
        with self._lock:
            if owner_scope in self._polls:
                logger.warning("poll create rejected: %s already exists", owner_scope)
                raise AlreadyExists(f"poll already exists at {owner_scope}")
            if not proposal_labels:
                raise InvalidProposals("a poll needs at least one proposal")
            state = PollState(proposal_labels)
            self._polls[owner_scope] = state
            logger.info("poll created at %s with %d proposals", owner_scope, len(state.labels))
            return state

    def vote(self, ledger_scope: str, identity: str, proposal_index: int) -> int:
        """
        Record one vote. Returns the new count of the chosen proposal.
        """
        with self._lock:
            state = self._get(ledger_scope)
            if identity in state.votes:
                logger.warning("vote rejected: %s already voted in %s", identity, ledger_scope)
                raise AlreadyVoted(f"{identity} already voted in {ledger_scope}")
            if not 0 <= proposal_index < len(state.labels):
                logger.warning("vote rejected: index %d out of range in %s", proposal_index, ledger_scope)
                raise InvalidIndex(
                    f"proposal {proposal_index} out of range 0..{len(state.labels) - 1}"
                )

            state.votes.insert_once(identity, proposal_index)
            count = state.counters.increment(proposal_index)
            state.voter_count += 1
            logger.info("vote in %s: %s -> %d", ledger_scope, identity, proposal_index)
            return count

    def is_initialized(self, scope: str) -> bool:
        with self._lock:
            return scope in self._polls

    def proposal_labels(self, scope: str) -> List[str]:
        with self._lock:
            return list(self._get(scope).labels)

    def counts(self, scope: str) -> List[int]:
        with self._lock:
            return self._get(scope).counters.as_list()

    def results(self, scope: str) -> List[Tuple[str, int]]:
        with self._lock:
            state = self._get(scope)
            return views.results(state.labels, state.counters.as_list())

    def winner(self, scope: str) -> Tuple[str, int]:
        with self._lock:
            state = self._get(scope)
            return views.winner(state.labels, state.counters.as_list())

    def participant_count(self, scope: str) -> int:
        with self._lock:
            return self._get(scope).voter_count

    def snapshot(self, scope: str) -> Tuple[List[str], List[int], int]:
        """
        Labels, counts and voter count from a single read.
        """
        with self._lock:
            state = self._get(scope)
            return list(state.labels), state.counters.as_list(), state.voter_count

    def vote_of(self, scope: str, identity: str) -> Optional[int]:
        with self._lock:
            return self._get(scope).votes.get(identity)

    def has_voted(self, scope: str, identity: str) -> bool:
        with self._lock:
            return identity in self._get(scope).votes

    def scopes(self) -> List[str]:
        with self._lock:
            return list(self._polls)

    def _get(self, scope: str) -> PollState:
        state = self._polls.get(scope)
        if state is None:
            raise NotFound(f"no poll at {scope}")
        return state
