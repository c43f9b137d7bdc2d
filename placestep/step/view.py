from __future__ import annotations

from pydantic import BaseModel, Field

from ..places.images import resolve_image_src
from ..places.models import FilterKind, Place
from ..stores.selection import SelectionStore
from .config import DEFAULT_STEP_CONFIG, StepConfig
from .session import PlaceStep


class FilterButton(BaseModel):
    label: str
    keyword: str | None = None
    active: bool = False


class PlaceCard(BaseModel):
    name: str
    subtitle: str
    text: str
    image_src: str
    is_added: bool
    button_label: str


class StepView(BaseModel):
    trip_date: str | None = None
    starting_point: str | None = None
    filters: list[FilterButton] = Field(default_factory=list)
    loading: bool = False
    query: str = ""
    total: int = 0
    offset: int = 0
    items: list[PlaceCard] = Field(default_factory=list)
    selected: list[str] = Field(default_factory=list)
    notices: list[str] = Field(default_factory=list)


def build_card(
    place: Place,
    selection: SelectionStore,
    config: StepConfig = DEFAULT_STEP_CONFIG,
) -> PlaceCard:
    is_added = selection.contains(place.name)
    return PlaceCard(
        name=place.name,
        subtitle=f"{place.type or ''} · {place.region}",
        text=f"{place.description} {place.reason}",
        image_src=resolve_image_src(place, config.placeholder_image),
        is_added=is_added,
        button_label=config.selected_label if is_added else config.add_label,
    )


def render_step(step: PlaceStep, offset: int = 0, limit: int = 50) -> StepView:
    """
    Build the view of the place step.

    Only the ``offset``/``limit`` window of the displayed list is turned into
    cards; ``total`` tells the client how far it can scroll. Notices are
    drained, so each one is shown once.
    """
    controller = step.controller
    config = step.config
    active = controller.active_filter

    filters = [
        FilterButton(
            label=kw,
            keyword=kw,
            active=active.kind is FilterKind.keyword and active.keyword == kw,
        )
        for kw in config.keywords
    ]
    filters.append(FilterButton(label=config.today_label, active=active.kind is FilterKind.today))

    displayed = controller.displayed_list
    window = displayed[offset:offset + limit]
    trip_date = step.context.trip_date

    return StepView(
        trip_date=str(trip_date) if trip_date is not None else None,
        starting_point=step.context.starting_point,
        filters=filters,
        loading=controller.loading,
        query=controller.query,
        total=len(displayed),
        offset=offset,
        items=[build_card(p, step.selection, config) for p in window],
        selected=[p.name for p in step.selection],
        notices=step.drain_notices(),
    )
