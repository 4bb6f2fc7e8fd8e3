from __future__ import annotations

import os
import secrets
import threading
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import Any, Iterator

from fastapi import Body, Depends, FastAPI, HTTPException, status
from fastapi.responses import HTMLResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from momentum import (
    DAY_NAMES,
    StateStore,
    habits_completed,
    habits_remaining,
    hour_label,
    list_achievements,
    load_profile,
    open_store,
    setup_logging,
    stats_tiles,
    unscheduled_tasks,
    week_grid,
    workspace_root as _workspace_root,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(load_profile().log_level)
    yield


app = FastAPI(title="Momentum", version="0.1.0", lifespan=lifespan)

security = HTTPBasic(auto_error=False)

# One store per workspace root, kept for the life of the process. Handlers
# run in a threadpool, so all store access goes through _lock.
_stores: dict[Path, StateStore] = {}
_lock = threading.Lock()


@contextmanager
def _store() -> Iterator[StateStore]:
    with _lock:
        root = _workspace_root()
        if root not in _stores:
            _stores[root] = open_store(root)
        yield _stores[root]


# ── HTML helpers ──────────────────────────────────────────────

def _escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


# ── Auth ──────────────────────────────────────────────────────

def get_current_user(credentials: HTTPBasicCredentials | None = Depends(security)) -> str:
    expected_username = os.environ.get("MOMENTUM_USERNAME", "")
    expected_password = os.environ.get("MOMENTUM_PASSWORD", "")

    if not expected_username or not expected_password:
        return "guest"

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )

    correct_username = secrets.compare_digest(credentials.username.encode("utf-8"), expected_username.encode("utf-8"))
    correct_password = secrets.compare_digest(credentials.password.encode("utf-8"), expected_password.encode("utf-8"))

    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username


# ── Pages ─────────────────────────────────────────────────────

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"ok": "true"}


@app.get("/", response_class=HTMLResponse)
def index(username: str = Depends(get_current_user)) -> HTMLResponse:
    with _store() as store:
        return HTMLResponse(_render_index(store))


def _render_index(store: StateStore) -> str:
    habit_rows = []
    for h in store.habits:
        done = " done" if h.is_complete else ""
        habit_rows.append(
            f'<li class="habit{done}">{_escape(h.icon)} {_escape(h.title)} '
            f'<b>{h.current}/{h.target}</b> {_escape(h.unit)}</li>'
        )

    task_rows = []
    for t in store.today_tasks():
        mark = "&#10003;" if t.completed else "&#9675;"
        when = f' <span class="muted">{_escape(t.time)}</span>' if t.time else ""
        task_rows.append(f'<li>{mark} {_escape(t.icon)} {_escape(t.title)}{when}</li>')

    if store.reward_unlocked:
        reward = f'<div class="reward">Well done! {store.completed_today}% complete, the reward is unlocked.</div>'
    else:
        reward = f'<div class="reward locked">{store.reward_gap}% more to unlock the reward.</div>'

    html = f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Momentum</title>
</head>
<body>
  <header>
    <h1>momentum</h1>
    <div>Level {store.level} &bull; {store.points} points{f' &bull; &#128293; {store.streak} days' if store.streak > 0 else ''}</div>
  </header>
  <section>
    <div><b>{store.completed_today}%</b> complete</div>
    <div><b>{habits_completed(store.habits)}</b> habits done, <b>{habits_remaining(store.habits)}</b> remaining</div>
    {reward}
  </section>
  <section>
    <h2>Daily habits</h2>
    <ul>{''.join(habit_rows) or '<li class="muted">(no habits)</li>'}</ul>
  </section>
  <section>
    <h2>Goals for {_escape(store.today)}</h2>
    <ul>{''.join(task_rows) or '<li class="muted">(no goals for today)</li>'}</ul>
  </section>
</body>
</html>"""
    return html


# ── Read API ──────────────────────────────────────────────────

@app.get("/api/state")
def api_get_state(username: str = Depends(get_current_user)) -> dict[str, Any]:
    """Everything the pages render from."""
    with _store() as store:
        return store.snapshot()


@app.get("/api/grid")
def api_get_grid(username: str = Depends(get_current_user)) -> dict[str, Any]:
    """Weekly schedule laid out by hour rows."""
    with _store() as store:
        rows = []
        for hour, cells in week_grid(store.schedule):
            rows.append({
                "hour": hour_label(hour),
                "days": {day: [t.to_dict() for t in tasks] for day, tasks in cells.items()},
            })
        return {
            "days": list(DAY_NAMES),
            "today": store.today,
            "rows": rows,
            "unscheduled": {
                day: [t.to_dict() for t in unscheduled_tasks(store.schedule, day)]
                for day in DAY_NAMES
            },
        }


@app.get("/api/achievements")
def api_get_achievements(username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        return {"achievements": [a.to_dict() for a in list_achievements(store.progress)]}


@app.get("/api/stats")
def api_get_stats(username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        return {"stats": [{"label": label, "value": value} for label, value in stats_tiles(store.progress)]}


# ── Mutations ─────────────────────────────────────────────────
# Unknown ids and days are accepted and leave the state unchanged; every
# mutation answers with the fresh snapshot.

@app.post("/api/habits/{habit_id}/increment")
def api_increment_habit(habit_id: str, username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        store.increment_habit(habit_id)
        return store.snapshot()


@app.post("/api/habits/{habit_id}/decrement")
def api_decrement_habit(habit_id: str, username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        store.decrement_habit(habit_id)
        return store.snapshot()


@app.post("/api/schedule/{day}/tasks")
def api_add_task(day: str, payload: dict[str, Any] = Body(...), username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        store.add_task(day, str(payload.get("title", "") or ""), str(payload.get("time", "") or ""))
        return store.snapshot()


@app.post("/api/schedule/{day}/tasks/{task_id}/toggle")
def api_toggle_task(day: str, task_id: str, username: str = Depends(get_current_user)) -> dict[str, Any]:
    with _store() as store:
        store.toggle_task(day, task_id)
        return store.snapshot()


@app.delete("/api/schedule/{day}/tasks/{task_id}")
def api_delete_task(day: str, task_id: str, confirm: bool = False, username: str = Depends(get_current_user)) -> dict[str, Any]:
    """Delete a goal; nothing is removed unless ``confirm=true``."""
    with _store() as store:
        store.delete_task(day, task_id, confirm=confirm)
        return store.snapshot()
