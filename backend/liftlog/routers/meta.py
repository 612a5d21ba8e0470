from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from liftlog.db import SessionLocal
from liftlog.repositories.session_repo import SessionRepository
from liftlog.settings import get_settings

router = APIRouter(tags=["meta"])

@router.get("/")
def root():
    return {"ok": True, "name": "Liftlog API"}

@router.get("/ping")
def ping():
    return {"pong": True}

@router.get("/healthz")
def healthz():
    """Store reachability plus how many sessions it holds; never fails the probe itself."""
    try:
        with SessionLocal() as db:
            stored = SessionRepository(db).count()
    except SQLAlchemyError as e:
        return {"status": "degraded", "error": str(e)}
    return {"status": "ok", "sessions": stored}

@router.get("/version")
def version():
    s = get_settings()
    return {"version": s.API_VERSION, "env": s.ENV}
