"""
Place list layer.

Responsibilities:
- Define the strict Place schema and the filter modes.
- Own the fetched base list and derive the displayed list from it.
- Resolve display details such as the fallback image.
"""
