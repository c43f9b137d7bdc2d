"""
Recommendation gateway.

Responsibilities:
- Manage the recommendation API configuration.
- List candidate places for a starting location and optional trip date.
- Search candidates with a natural-language query against a candidate pool.
- Normalise responses into Place objects before they reach the step.
"""
