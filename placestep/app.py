from __future__ import annotations

import os
import uuid

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .gateway.base import RecommendationGateway
from .gateway.http_client import HttpRecommendationGateway
from .places.models import Place
from .step.models import (
    ContextUpdate,
    KeywordFilterRequest,
    SearchRequest,
    SelectionResponse,
    ToggleRequest,
    ToggleResponse,
)
from .step.registry import StepRegistry
from .step.session import PlaceStep
from .step.view import StepView, render_step

app = FastAPI(title="Trip Planner Place Step API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "placestep-secret-change-in-production"),
)

_gateway = HttpRecommendationGateway()

# Mounted steps, keyed by the id stored in each browser session.
_steps = StepRegistry(
    max_steps=int(os.environ.get("PLACESTEP_MAX_STEPS", "500")),
    idle_seconds=float(os.environ.get("PLACESTEP_STEP_IDLE_SECONDS", "1800")),
)


def get_gateway() -> RecommendationGateway:
    return _gateway


def get_step(
    request: Request,
    gateway: RecommendationGateway = Depends(get_gateway),
) -> PlaceStep:
    """Return this session's mounted step, mounting a fresh one if needed."""
    step = _steps.get(request.session.get("step_id"))
    if step is None:
        step_id = uuid.uuid4().hex
        step = PlaceStep(gateway)
        _steps.mount(step_id, step)
        request.session["step_id"] = step_id
    return step


def find_step(request: Request) -> PlaceStep | None:
    """Return this session's mounted step without mounting one."""
    return _steps.get(request.session.get("step_id"))


def clear_steps() -> None:
    _steps.clear()


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Trip context ─────────────────────────────────────────────────────────


@app.put("/step/context")
def update_context(body: ContextUpdate, step: PlaceStep = Depends(get_step)) -> dict:
    context = step.context
    fields = body.model_fields_set

    if "trip_date" in fields:
        context.set_trip_date(body.trip_date)
    if "starting_point" in fields:
        context.set_starting_point(body.starting_point)
    if "starting_location" in fields:
        context.set_starting_location(body.starting_location)
    if "input_location" in fields:
        context.set_input_location(body.input_location)
    if "latitude" in fields:
        context.set_latitude(body.latitude)
    if "longitude" in fields:
        context.set_longitude(body.longitude)
    if context.latitude is not None and context.longitude is not None:
        context.set_location(context.latitude, context.longitude)

    return context.snapshot().model_dump(mode="json")


# ── Place list ───────────────────────────────────────────────────────────


@app.get("/step", response_model=StepView)
async def view_step(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
    step: PlaceStep = Depends(get_step),
) -> StepView:
    await step.ensure_loaded()
    return render_step(step, offset, limit)


@app.post("/step/reload", response_model=StepView)
async def reload_step(step: PlaceStep = Depends(get_step)) -> StepView:
    await step.reload()
    return render_step(step)


@app.post("/step/filters/keyword", response_model=StepView)
async def keyword_filter(
    body: KeywordFilterRequest,
    step: PlaceStep = Depends(get_step),
) -> StepView:
    await step.ensure_loaded()
    step.controller.apply_keyword_filter(body.keyword)
    return render_step(step)


@app.post("/step/filters/today", response_model=StepView)
async def today_filter(step: PlaceStep = Depends(get_step)) -> StepView:
    await step.ensure_loaded()
    step.controller.apply_today_random()
    return render_step(step)


@app.post("/step/search", response_model=StepView)
async def search(body: SearchRequest, step: PlaceStep = Depends(get_step)) -> StepView:
    await step.ensure_loaded()
    step.controller.query = body.query
    await step.controller.search_by_query()
    return render_step(step)


# ── Selection ────────────────────────────────────────────────────────────


@app.post("/step/selection/toggle", response_model=ToggleResponse)
def toggle_selection(body: ToggleRequest, step: PlaceStep = Depends(get_step)) -> ToggleResponse:
    place: Place | None = step.controller.find(body.name)
    if place is None:
        # Already-selected places can still be removed after the list moved on
        if step.selection.contains(body.name):
            step.selection.remove(body.name)
            return ToggleResponse(
                name=body.name, is_added=False, total_selected=len(step.selection),
            )
        raise HTTPException(status_code=404, detail="Place not in the current list")

    is_added = step.selection.toggle_for(place)
    return ToggleResponse(name=place.name, is_added=is_added, total_selected=len(step.selection))


@app.get("/step/selection", response_model=SelectionResponse)
def selection(step: PlaceStep | None = Depends(find_step)) -> SelectionResponse:
    if step is None:
        return SelectionResponse(places=[])
    return SelectionResponse(places=step.selection.places)


# ── Unmount ──────────────────────────────────────────────────────────────


@app.delete("/step")
def unmount(request: Request) -> dict:
    _steps.unmount(request.session.pop("step_id", None))
    return {"status": "unmounted"}


# ── Analytics ────────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
