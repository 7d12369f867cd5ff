# Routes package init
"""
Faithtrack Backend: API Routes Package
========================================

Route Inventory:
    - prayers.py:      /api/prayers            (list, create, toggle answered, delete)
    - prayer_wall.py:  /api/prayer-wall        (public list, post, pray)
    - journal.py:      /api/journal            (list, create, delete)
    - devotionals.py:  /api/devotionals        (list, by date, create, delete)
    - search.py:       /api/search             (ask Grok, history)
    - health.py:       /health                 (service health check)

Routes are thin: resolve the caller, call one service method, return the
schema. Errors propagate to the global handlers in main.py.
"""
