# Services package init
"""
Pinboard Backend — Services Layer
===================================

What:  Business logic between routes (HTTP) and the database session.

Service Inventory:
    - PinService:   create / get / list-by-user for pins
    - BoardService: board CRUD and pin-membership edits

Both services are stateless singletons. Each method receives the request's
AsyncSession, so tests can hand in a mock or an in-memory SQLite session.
"""
