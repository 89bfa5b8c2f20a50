# in-memory ledgers for this node, keyed by owner scope
from .moods import MoodLedger
from .polls import PollLedger

polls = PollLedger()
moods = MoodLedger()


def reset() -> None:
    """
    Drop every ledger held by this node.
    """
    global polls, moods
    polls = PollLedger()
    moods = MoodLedger()
