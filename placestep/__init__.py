"""
Place recommendation step of the trip planner.

Responsibilities:
- Fetch candidate places for the chosen starting location and trip date.
- Narrow the shown list by keyword, by a random "today's pick", or by a
  natural-language search routed through the recommendation backend.
- Keep the user's selected places consistent across all of those views.
"""
