"""View modules for manual routing.

The router in `app.py` picks between the login page and the data-entry page.
Every page lives under `views/` and exposes a `view()` function; register new
ones in `PAGE_REGISTRY` inside `app.py`.
"""
