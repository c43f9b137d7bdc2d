from __future__ import annotations

from dataclasses import dataclass

from ..places.images import PLACEHOLDER_IMAGE


@dataclass(frozen=True)
class StepConfig:
    keywords: tuple[str, ...] = ("맛집", "관광지", "쇼핑")
    today_label: str = "오늘의 추천"
    today_pick_size: int = 7
    placeholder_image: str = PLACEHOLDER_IMAGE
    rejected_query_message: str = "부적절한 단어만 입력되어 요청을 처리할 수 없습니다."
    search_failed_message: str = "추천 요청 중 오류가 발생했습니다."
    selected_label: str = "✓ 선택됨"
    add_label: str = "+"


DEFAULT_STEP_CONFIG = StepConfig()
