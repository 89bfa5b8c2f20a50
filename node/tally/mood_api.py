from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from .config import NODE_ID, RECENT_DEFAULT_LIMIT
from .deps import caller_identity
from .models import MoodIn, MoodRecord, MoodView
from .moods import CATEGORY_COUNT
from . import state, views

router = APIRouter(prefix="/moods", tags=["moods"])
names_router = APIRouter(prefix="/mood-names", tags=["moods"])


@names_router.get("/{category}")
def get_mood_name(category: int):
    return {"category": category, "name": views.mood_name(category)}


@router.post("", status_code=201)
def create_board(identity: str = Depends(caller_identity)):
    state.moods.create(identity)
    return {"ok": True, "node": NODE_ID, "scope": identity}


@router.put("/{scope}/entries")
def set_mood(scope: str, body: MoodIn, identity: str = Depends(caller_identity)) -> MoodRecord:
    return state.moods.set_mood(scope, identity, body.category, body.note)


@router.get("/{scope}")
def get_board(scope: str) -> MoodView:
    counts, total = state.moods.summary(scope)
    return MoodView(
        scope=scope,
        counts=counts,
        names=[views.mood_name(c) for c in range(CATEGORY_COUNT)],
        total_entries=total,
        percentages={
            views.mood_name(c): views.percentage(counts[c], total)
            for c in range(CATEGORY_COUNT)
        },
        node=NODE_ID,
    )


@router.get("/{scope}/entries/{identity}")
def get_mood_of(scope: str, identity: str) -> MoodRecord:
    return state.moods.mood_of(scope, identity)


@router.get("/{scope}/recent")
def get_recent(scope: str, limit: Optional[int] = Query(None, ge=0)) -> List[MoodRecord]:
    return state.moods.recent(scope, RECENT_DEFAULT_LIMIT if limit is None else limit)


@router.get("/{scope}/percentage/{category}")
def get_percentage(scope: str, category: int):
    return {
        "scope": scope,
        "category": category,
        "percentage": state.moods.mood_percentage(scope, category),
    }


@router.get("/{scope}/initialized")
def is_initialized(scope: str):
    return {"scope": scope, "initialized": state.moods.is_initialized(scope)}
