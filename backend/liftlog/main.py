# liftlog/main.py
import time
import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from liftlog import models  # noqa: F401  # registers tables on Base.metadata
from liftlog.core.logbook import default_state
from liftlog.db import Base, SessionLocal, engine
from liftlog.deps.store import get_profile
from liftlog.repositories.session_repo import SessionRepository
from liftlog.routers.analytics import router as analytics_router
from liftlog.routers.backup import router as backup_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.meta import router as meta_router
from liftlog.routers.scoreboard import router as scoreboard_router
from liftlog.routers.sessions import router as sessions_router
from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")

REQUEST_ID_HEADER = "X-Request-ID"


def prepare_store() -> None:
    settings = get_settings()
    if settings.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)
    if settings.SEED_BASELINE:
        with SessionLocal() as db:
            repo = SessionRepository(db)
            if repo.count() == 0:
                repo.save(default_state(get_profile()).sessions)
                log.info("seeded empty store with baseline sessions")


@asynccontextmanager
async def lifespan(_: FastAPI):
    prepare_store()
    yield


app = FastAPI(
    title="Liftlog API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "meta", "description": "Liveness, store health and version"},
        {"name": "sessions", "description": "Logged training sessions"},
        {"name": "scoreboard", "description": "Last/previous, change, next target and warm-ups"},
        {"name": "exercises", "description": "Catalog, warm-up ramps and trends"},
        {"name": "analytics", "description": "Streak, recency and frequency"},
        {"name": "backup", "description": "Export / import of the whole log"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in get_settings().ALLOW_ORIGINS.split(",") if o.strip()],
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def tag_and_time_request(request: Request, call_next):
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    request.state.request_id = rid
    started = time.perf_counter()
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = rid
    log.info("rid=%s %s %s -> %s in %.1fms", rid, request.method, request.url.path,
             response.status_code, (time.perf_counter() - started) * 1000)
    return response

for router in (meta_router, sessions_router, scoreboard_router,
               exercises_router, analytics_router, backup_router):
    app.include_router(router)
