"""
Place step glue.

Responsibilities:
- Mount one place step per user: trip context, selection and list controller.
- Reload candidates when the starting location changes.
- Build the view model the page renders from.
"""
