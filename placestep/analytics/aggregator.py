from __future__ import annotations

from collections import Counter
from typing import Any

from .store import INITIAL_LOAD, KEYWORD_FILTER, SEARCH, SEARCH_REJECTED, TODAY_PICK


def _avg_ms(events: list[dict[str, Any]]) -> float:
    times = [e["response_time_ms"] for e in events if "response_time_ms" in e]
    return round(sum(times) / len(times), 1) if times else 0.0


def _rate(part: int, total: int) -> float:
    return round(part / total * 100, 1) if total else 0.0


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    loads = [e for e in events if e["type"] == INITIAL_LOAD]
    searches = [e for e in events if e["type"] == SEARCH]
    rejected = [e for e in events if e["type"] == SEARCH_REJECTED]
    keyword_events = [e for e in events if e["type"] == KEYWORD_FILTER]
    today_events = [e for e in events if e["type"] == TODAY_PICK]

    # Only activations count as usage; toggling off is not a choice of filter
    keyword_counter: Counter[str] = Counter()
    for e in keyword_events:
        if e.get("active"):
            keyword_counter[e.get("keyword", "unknown")] += 1
    top_keywords = [{"name": n, "count": c} for n, c in keyword_counter.most_common(10)]

    ok_searches = [s for s in searches if s.get("outcome") == "ok"]
    empty_searches = [s for s in ok_searches if s.get("results_returned", 0) == 0]

    return {
        "total_loads": len(loads),
        "failed_loads": sum(1 for e in loads if e.get("outcome") != "ok"),
        "avg_load_time_ms": _avg_ms(loads),
        "total_searches": len(searches),
        "failed_searches": len(searches) - len(ok_searches),
        "empty_search_rate": _rate(len(empty_searches), len(ok_searches)),
        "avg_search_time_ms": _avg_ms(searches),
        "rejected_queries": len(rejected),
        "top_keywords": top_keywords,
        "today_pick_activations": sum(1 for e in today_events if e.get("active")),
    }
