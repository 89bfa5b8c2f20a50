import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL, NODE_ID, PORT
from .errors import LedgerError
from .poll_api import router as poll_router
from .mood_api import names_router as mood_names_router, router as mood_router
from . import state

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=f"Tally Node ({NODE_ID})")

app.include_router(poll_router)
app.include_router(mood_router)
app.include_router(mood_names_router)


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.kind, "detail": exc.message, "node": NODE_ID},
    )


@app.get("/status")
def status():
    return {
        "node": NODE_ID,
        "polls": len(state.polls.scopes()),
        "moods": len(state.moods.scopes()),
    }


if __name__ == "__main__":
    import uvicorn
    logger.info("starting %s on port %d", NODE_ID, PORT)
    uvicorn.run("tally.main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL.lower())
