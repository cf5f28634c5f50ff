import logging
from contextlib import asynccontextmanager

from fastapi import BackgroundTasks, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from boggle.dictionary import Dictionary
from boggle.errors import InvalidBoardError
from boggle.settings import settings

logger = logging.getLogger("boggle")


class SolveRequest(BaseModel):
    rows: list[str]


def create_app(dictionary: Dictionary | None = None) -> FastAPI:
    """Build the API. The word list is loaded at startup unless one is passed in."""

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        if application.state.dictionary is None:
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            application.state.dictionary = Dictionary.from_path(settings.DICTIONARY_PATH, settings.WORDS_DELIMITER)
            logger.info("Dictionary loaded (%d words)", len(application.state.dictionary))
        yield

    application = FastAPI(title="Boggle Solver", lifespan=lifespan)
    application.state.dictionary = dictionary

    @application.get("/health")
    async def health():
        loaded = application.state.dictionary
        return {
            "status": "ok",
            "dictionary_loaded": loaded is not None,
            "word_count": len(loaded) if loaded is not None else 0,
        }

    @application.post("/solve")
    def solve(body: SolveRequest, background_tasks: BackgroundTasks):
        from boggle.metrics import StageTimer
        from boggle.notifier import send_notification
        from boggle.solver import solve_rows

        if application.state.dictionary is None:
            raise HTTPException(503, "Dictionary not loaded")

        logger.info("POST /solve rows=%s", body.rows)
        timer = StageTimer()
        try:
            result = solve_rows(body.rows, application.state.dictionary, timer)
        except InvalidBoardError as e:
            logger.warning("Rejected board: %s", e)
            raise HTTPException(400, f"Invalid board: {e}") from e

        words = result.words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else result.words
        logger.info("Found %d words (returning %d)", result.count, len(words))

        if settings.NOTIFY_ENABLED:
            # Notify with ALL words, not just the returned slice
            background_tasks.add_task(
                send_notification, result.words, result.size,
                settings.NTFY_TOPIC, settings.NTFY_URL, settings.NOTIFY_WORDS_PER_GROUP,
            )

        return JSONResponse({
            "size": result.size,
            "board": result.board,
            "words": words,
            "word_count": result.count,
            "positions": {w: list(result.positions[w]) for w in words},
            "processing_time": timer.total_ms,
            "stage_timings": result.timings,
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import EDITABLE_FIELDS, get_editable_settings
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle.settings import get_editable_settings, update_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def main():
    import uvicorn

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


app = create_app()
