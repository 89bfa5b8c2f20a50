from .errors import (
    AlreadyExists,
    AlreadyVoted,
    CounterUnderflow,
    InvalidCategory,
    InvalidIndex,
    InvalidProposals,
    LedgerError,
    NotFound,
)
from .moods import MoodLedger, NO_MOOD
from .polls import PollLedger
