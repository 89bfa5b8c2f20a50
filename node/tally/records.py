from typing import Dict, Generic, Iterator, List, Optional, TypeVar
from .errors import AlreadyVoted
from .views import recent_slice

R = TypeVar("R")


class RecordStore(Generic[R]):
    """
    identity -> current record, kept in first-insertion order.
    Replacing a record keeps its original slot.
    """

    def __init__(self) -> None:
        self._records: Dict[str, R] = {}

    def get(self, identity: str) -> Optional[R]:
        return self._records.get(identity)

    def insert_once(self, identity: str, record: R) -> None:
        if identity in self._records:
            raise AlreadyVoted(f"{identity} already has a record")
        self._records[identity] = record

    def upsert(self, identity: str, record: R) -> Optional[R]:
        """
        Insert or replace in one step; returns the previous record, if any.
        """
        previous = self._records.get(identity)
        self._records[identity] = record
        return previous

    def last(self, limit: int) -> List[R]:
        return recent_slice(list(self._records.values()), limit)

    def values(self) -> Iterator[R]:
        return iter(self._records.values())

    def __contains__(self, identity: object) -> bool:
        return identity in self._records

    def __len__(self) -> int:
        return len(self._records)
