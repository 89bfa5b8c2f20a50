"""
Property tests for the tally invariants.

    poll:  sum(counts) == participant_count, one record per identity
    mood:  sum(mood_counts) == total_entries == distinct identities
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from tally.errors import AlreadyVoted, InvalidCategory, InvalidIndex
from tally.moods import MoodLedger
from tally.polls import PollLedger

identities = st.sampled_from([f"user{i}" for i in range(8)])


class TestPollInvariants:

    @given(
        n=st.integers(min_value=1, max_value=6),
        votes=st.lists(st.tuples(identities, st.integers(min_value=0, max_value=8)), max_size=40),
    )
    @settings(max_examples=100)
    def test_counts_match_participants(self, n, votes):
        ledger = PollLedger()
        ledger.create("owner", [f"p{i}" for i in range(n)])
        voted = {}

        for identity, index in votes:
            before = ledger.counts("owner")
            try:
                ledger.vote("owner", identity, index)
            except (AlreadyVoted, InvalidIndex):
                assert ledger.counts("owner") == before
                continue
            voted[identity] = index

        counts = ledger.counts("owner")
        assert sum(counts) == ledger.participant_count("owner") == len(voted)
        for identity, index in voted.items():
            assert ledger.vote_of("owner", identity) == index
        for i in range(n):
            assert counts[i] == sum(1 for v in voted.values() if v == i)

    @given(counts=st.lists(st.integers(min_value=0, max_value=4), min_size=1, max_size=5))
    @settings(max_examples=50)
    def test_winner_is_first_maximum(self, counts):
        ledger = PollLedger()
        ledger.create("owner", [f"p{i}" for i in range(len(counts))])
        voter = 0
        for index, count in enumerate(counts):
            for _ in range(count):
                ledger.vote("owner", f"v{voter}", index)
                voter += 1

        label, count = ledger.winner("owner")
        assert count == max(counts)
        assert label == f"p{counts.index(max(counts))}"


class TestMoodInvariants:

    @given(st.lists(st.tuples(identities, st.integers(min_value=0, max_value=6), st.text(max_size=5)), max_size=50))
    @settings(max_examples=100)
    def test_counts_match_distinct_identities(self, submissions):
        ledger = MoodLedger(clock=lambda: 1)
        ledger.create("board")
        current = {}

        for identity, category, note in submissions:
            try:
                ledger.set_mood("board", identity, category, note)
            except InvalidCategory:
                continue
            current[identity] = category

        counts = ledger.mood_counts("board")
        assert sum(counts) == ledger.total_entries("board") == len(current)
        for c in range(5):
            assert counts[c] == sum(1 for v in current.values() if v == c)
            assert 0 <= ledger.mood_percentage("board", c) <= 100
