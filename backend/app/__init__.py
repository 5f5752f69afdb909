"""
Pinboard Backend
=================

Users own boards; a board is an ordered, duplicate-free list of pin ids.

Layers (both resources follow the same shape):

    ┌─────────────────────────────────────┐
    │  routes/     HTTP in, JSON out      │
    ├─────────────────────────────────────┤
    │  services/   membership rules,      │
    │              error tagging          │
    ├─────────────────────────────────────┤
    │  models/ + schemas/                 │
    │  SQLAlchemy rows, Pydantic bodies   │
    ├─────────────────────────────────────┤
    │  database.py async sessions         │
    └─────────────────────────────────────┘

Routes never touch the session directly; services never build HTTP responses.
"""

__version__ = "1.0.0"
