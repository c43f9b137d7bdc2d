from __future__ import annotations

from collections.abc import Iterator

from ..places.models import Place


class SelectionStore:
    """Places the user has committed to, keyed by ``name``.

    Membership is independent of whichever list is currently displayed, so
    it survives filter toggles, searches and reloads. Iteration follows
    insertion order.
    """

    def __init__(self) -> None:
        self._places: dict[str, Place] = {}

    def add(self, place: Place) -> None:
        if place.name not in self._places:
            self._places[place.name] = place

    def remove(self, name: str) -> None:
        self._places.pop(name, None)

    def contains(self, name: str) -> bool:
        return name in self._places

    def toggle_for(self, place: Place) -> bool:
        """Add or remove *place*; return whether it is selected afterwards."""
        if self.contains(place.name):
            self.remove(place.name)
            return False
        self.add(place)
        return True

    def clear(self) -> None:
        self._places.clear()

    @property
    def places(self) -> list[Place]:
        return list(self._places.values())

    def __contains__(self, name: object) -> bool:
        return name in self._places

    def __iter__(self) -> Iterator[Place]:
        return iter(list(self._places.values()))

    def __len__(self) -> int:
        return len(self._places)
