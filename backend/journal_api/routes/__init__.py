"""
Journal API: Routes Package
============================

Route Inventory:
    - journal.py: /api/journal/...      (journal entry CRUD)
    - users.py:   /api/users, /api/{x}  (user CRUD)
    - health.py:  /health/mongodb       (store liveness probe)

Routes stay thin: read path/body, call a service, pick the status code.
"""
