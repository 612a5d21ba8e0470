# liftlog/core/records.py
"""
In-memory training log: sets, entries, sessions and the whole state document.

Everything coming from outside (request drafts, imported backups, rows from the
store) goes through the ``coerce_*`` helpers, which never raise: bad numbers
fall back, malformed collections become empty and invalid sets are dropped.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from liftlog.core.numeric import maybe_num, safe_num

STATE_VERSION = 2


def new_session_id() -> str:
    return f"sess_{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True, slots=True)
class SetRecord:
    weight: float
    reps: float
    rir: float | None = None
    note: str = ""

    @property
    def is_valid(self) -> bool:
        return self.weight > 0 and self.reps > 0


@dataclass(frozen=True, slots=True)
class Entry:
    exercise_id: str
    sets: tuple[SetRecord, ...] = ()

    @property
    def primary(self) -> SetRecord | None:
        return self.sets[0] if self.sets else None


@dataclass(frozen=True, slots=True)
class Session:
    id: str
    date: str
    day_key: str
    notes: str = ""
    items: Mapping[str, Entry] = field(default_factory=dict)
    seq: int | None = None

    def entry_for(self, exercise_id: str) -> Entry | None:
        """The entry for an exercise, only if it holds at least one set."""
        entry = self.items.get(exercise_id)
        if entry is not None and entry.sets:
            return entry
        return None


@dataclass(frozen=True, slots=True)
class Profile:
    name: str = "Brian"
    device: str = "phone-only"


@dataclass(frozen=True, slots=True)
class TrainingState:
    profile: Profile = field(default_factory=Profile)
    sessions: tuple[Session, ...] = ()
    version: int = STATE_VERSION


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def _pick(raw: Mapping, *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in raw:
            return raw[k]
    return default


def _text(x: Any) -> str:
    return x.strip() if isinstance(x, str) else ""


def coerce_set(raw: Any) -> SetRecord:
    if not isinstance(raw, Mapping):
        return SetRecord(weight=0.0, reps=0.0)
    return SetRecord(
        weight=safe_num(raw.get("weight"), 0.0),
        reps=safe_num(raw.get("reps"), 0.0),
        rir=maybe_num(raw.get("rir")),
        note=_text(raw.get("note")),
    )


def coerce_sets(raw: Any) -> tuple[SetRecord, ...]:
    """Valid sets only, order preserved."""
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(s for s in map(coerce_set, raw) if s.is_valid)


def coerce_items(raw: Any) -> dict[str, Entry]:
    if isinstance(raw, Mapping):
        pairs: Iterable = raw.items()
    elif isinstance(raw, (list, tuple)):
        # list form: [{"exercise_id": ..., "sets": [...]}, ...]
        pairs = ((_pick(e, "exercise_id", "exerciseId"), e) for e in raw if isinstance(e, Mapping))
    else:
        return {}

    items: dict[str, Entry] = {}
    for key, raw_entry in pairs:
        if not isinstance(raw_entry, Mapping):
            continue
        ex_id = _pick(raw_entry, "exercise_id", "exerciseId", default=key)
        if not isinstance(ex_id, str) or not ex_id:
            continue
        sets = coerce_sets(raw_entry.get("sets"))
        if sets:
            items[ex_id] = Entry(exercise_id=ex_id, sets=sets)
    return items


def coerce_session(raw: Any) -> Session | None:
    if not isinstance(raw, Mapping):
        return None
    seq = raw.get("seq")
    return Session(
        id=_text(raw.get("id")) or new_session_id(),
        date=_text(raw.get("date")),
        day_key=_text(_pick(raw, "day_key", "dayKey")),
        notes=_text(raw.get("notes")),
        items=coerce_items(raw.get("items")),
        seq=seq if isinstance(seq, int) and not isinstance(seq, bool) else None,
    )


def coerce_sessions(raw: Any) -> tuple[Session, ...]:
    """Sessions with unique ids; a repeated id keeps its first holder, later ones get fresh ids."""
    if not isinstance(raw, (list, tuple)):
        return ()
    seen: set[str] = set()
    sessions = []
    for s in map(coerce_session, raw):
        if s is None:
            continue
        if s.id in seen:
            s = replace(s, id=new_session_id())
        seen.add(s.id)
        sessions.append(s)
    return tuple(sessions)


def coerce_state(raw: Any, *, profile: Profile | None = None) -> TrainingState:
    """Build a state from a backup document; accepts the camelCase keys of older exports."""
    if not isinstance(raw, Mapping):
        return TrainingState(profile=profile or Profile())
    raw_profile = raw.get("profile")
    if isinstance(raw_profile, Mapping):
        base = profile or Profile()
        profile = Profile(
            name=_text(raw_profile.get("name")) or base.name,
            device=_text(raw_profile.get("device")) or base.device,
        )
    version = raw.get("version")
    return TrainingState(
        profile=profile or Profile(),
        sessions=coerce_sessions(raw.get("sessions")),
        version=version if isinstance(version, int) and not isinstance(version, bool) else STATE_VERSION,
    )


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def sort_sessions_desc(sessions: Iterable[Session]) -> list[Session]:
    """
    Newest first: date descending, then creation ``seq`` descending.

    Sessions without a ``seq`` tie at -1, and ``sorted`` is stable, so legacy
    records sharing a date keep their snapshot order.
    """
    by_seq = sorted(sessions, key=lambda s: -1 if s.seq is None else s.seq, reverse=True)
    return sorted(by_seq, key=lambda s: s.date, reverse=True)
