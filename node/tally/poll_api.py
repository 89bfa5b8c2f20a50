from typing import List
from fastapi import APIRouter, Depends
from .config import NODE_ID
from .deps import caller_identity
from .models import PollCreateIn, PollView, ResultRow, VoteIn, VoteOf, WinnerOut
from . import state

router = APIRouter(prefix="/polls", tags=["polls"])


@router.post("", status_code=201)
def create_poll(body: PollCreateIn, identity: str = Depends(caller_identity)):
    created = state.polls.create(identity, body.labels)
    return {"ok": True, "node": NODE_ID, "scope": identity, "labels": list(created.labels)}


@router.post("/{scope}/votes")
def vote(scope: str, body: VoteIn, identity: str = Depends(caller_identity)):
    count = state.polls.vote(scope, identity, body.proposal_index)
    return {
        "ok": True,
        "node": NODE_ID,
        "proposal_index": body.proposal_index,
        "count": count,
        "participant_count": state.polls.participant_count(scope),
    }


@router.get("/{scope}")
def get_poll(scope: str) -> PollView:
    labels, counts, participant_count = state.polls.snapshot(scope)
    return PollView(
        scope=scope,
        labels=labels,
        counts=counts,
        participant_count=participant_count,
        node=NODE_ID,
    )


@router.get("/{scope}/results")
def get_results(scope: str) -> List[ResultRow]:
    return [ResultRow(label=label, count=count) for label, count in state.polls.results(scope)]


@router.get("/{scope}/winner")
def get_winner(scope: str) -> WinnerOut:
    label, count = state.polls.winner(scope)
    return WinnerOut(scope=scope, label=label, count=count)


@router.get("/{scope}/votes/{identity}")
def get_vote_of(scope: str, identity: str) -> VoteOf:
    return VoteOf(scope=scope, identity=identity, proposal_index=state.polls.vote_of(scope, identity))


@router.get("/{scope}/initialized")
def is_initialized(scope: str):
    return {"scope": scope, "initialized": state.polls.is_initialized(scope)}
