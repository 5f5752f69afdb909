# Routes package init
"""
Pinboard Backend — API Routes Package
=======================================

Route Inventory:
    - pins.py:    POST /api/pins, GET /api/pins/{id}, GET /api/pins/user/{userId}
    - boards.py:  board CRUD and membership under /api/boards
    - health.py:  GET /health

Routes are THIN: extract request data, call a service, set headers.
Business rules live in app.services.
"""
