"""
Leaderboard API test suite.

- unit/: schema, service, store, config and client tests (no server)
- integration/: HTTP tests through FastAPI's TestClient with a
  temporary SQLite database
"""
