# liftlog/repositories/session_repo.py
from __future__ import annotations
import logging
from typing import Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from liftlog.core.records import Entry, SetRecord
from liftlog.core.records import Session as LoggedSession
from liftlog.models import ExerciseSet, TrainingSession

log = logging.getLogger(__name__)


def to_record(row: TrainingSession) -> LoggedSession:
    grouped: dict[str, list[SetRecord]] = {}
    for s in row.sets:
        grouped.setdefault(s.exercise_id, []).append(
            SetRecord(weight=s.weight, reps=s.reps, rir=s.rir, note=s.note or "")
        )
    return LoggedSession(
        id=row.uid,
        date=row.date,
        day_key=row.day_key,
        notes=row.notes or "",
        items={ex_id: Entry(ex_id, tuple(sets)) for ex_id, sets in grouped.items()},
        seq=row.seq,
    )


def to_row(session: LoggedSession) -> TrainingSession:
    row = TrainingSession(
        uid=session.id, seq=session.seq, date=session.date,
        day_key=session.day_key, notes=session.notes,
    )
    position = 0
    for entry in session.items.values():
        for s in entry.sets:
            row.sets.append(ExerciseSet(
                exercise_id=entry.exercise_id, position=position,
                weight=s.weight, reps=s.reps, rir=s.rir, note=s.note,
            ))
            position += 1
    return row


class SessionRepository:
    """Session store: whole-snapshot load and whole-snapshot save."""

    def __init__(self, db: Session):
        self.db = db

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(TrainingSession)).scalar_one()

    def load(self) -> tuple[LoggedSession, ...]:
        stmt = select(TrainingSession).options(selectinload(TrainingSession.sets))\
                                      .order_by(TrainingSession.id.asc())
        rows = self.db.execute(stmt).scalars().all()
        log.debug("loaded %d sessions", len(rows))
        return tuple(to_record(r) for r in rows)

    def save(self, sessions: Iterable[LoggedSession]) -> int:
        """Replace everything stored with ``sessions``, keeping their order."""
        rows = [to_row(s) for s in sessions]
        try:
            self.db.execute(delete(ExerciseSet))
            self.db.execute(delete(TrainingSession))
            # rows loaded earlier are gone; drop them before ids get reused
            self.db.expunge_all()
            self.db.add_all(rows)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            log.exception("snapshot save failed; rolled back")
            raise
        log.info("saved snapshot of %d sessions", len(rows))
        return len(rows)
