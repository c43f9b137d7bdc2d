from __future__ import annotations

import pytest

from placestep.analytics.store import clear_events
from placestep.places.models import Place

SEOUL_PLACES = [
    Place(name="Seoul Tower", type="관광지", region="용산구",
          description="남산 정상의 전망대", reason="야경이 유명합니다", imageUrl="https://img.test/tower.png"),
    Place(name="Gwangjang Market", type="맛집", category="시장", region="종로구",
          description="빈대떡과 육회", reason="전통시장 먹거리", imageUrl="null"),
    Place(name="Gyeongbokgung", type="관광지", region="종로구",
          description="조선의 정궁", reason="수문장 교대식"),
    Place(name="Myeongdong Street", type="쇼핑", region="중구",
          description="화장품 거리", reason="쇼핑 명소"),
    Place(name="Tosokchon Samgyetang", type="맛집", region="종로구",
          description="삼계탕 전문점", reason="조용한 실내 식당"),
    Place(name="Bukchon Hanok Village", type="명소", category="관광지", region="종로구",
          description="한옥 골목", reason="사진 찍기 좋은 곳"),
    Place(name="Starfield COEX Mall", type="쇼핑", region="강남구",
          description="별마당 도서관", reason="조용한 실내 공간"),
    Place(name="Lotte World", type="테마파크", region="송파구",
          description="실내 놀이공원", reason="비 오는 날 추천"),
    Place(name="Namdaemun Market", type="쇼핑", category="맛집", region="중구",
          description="갈치조림 골목", reason="저렴한 쇼핑"),
    Place(name="Insadong", type="거리", category="관광지", region="종로구",
          description="전통 공예품 거리", reason="조용한 찻집"),
]


class FakeGateway:
    """In-memory gateway; search returns pool items whose text contains the query."""

    def __init__(
        self,
        places: list[Place] | None = None,
        search_results: list[Place] | None = None,
        list_error: Exception | None = None,
        search_error: Exception | None = None,
    ) -> None:
        self.places = list(places or [])
        self.search_results = search_results
        self.list_error = list_error
        self.search_error = search_error
        self.list_calls: list[tuple] = []
        self.search_calls: list[tuple] = []

    async def list_candidates(self, trip_date, location):
        self.list_calls.append((trip_date, location))
        if self.list_error is not None:
            raise self.list_error
        return list(self.places)

    async def search_candidates(self, query, pool):
        self.search_calls.append((query, list(pool)))
        if self.search_error is not None:
            raise self.search_error
        if self.search_results is not None:
            return list(self.search_results)
        return [p for p in pool if query in f"{p.description} {p.reason}"]


@pytest.fixture(autouse=True)
def _reset_events():
    clear_events()
    yield
    clear_events()


@pytest.fixture
def places() -> list[Place]:
    return list(SEOUL_PLACES)


@pytest.fixture
def gateway(places) -> FakeGateway:
    return FakeGateway(places=places)


@pytest.fixture
def make_gateway():
    return FakeGateway
