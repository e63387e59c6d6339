"""
Service layer package.

Services sit between the HTTP handlers and the record store: they
turn request bodies into typed records and records into response
bodies.
"""
