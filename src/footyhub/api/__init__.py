"""
FastAPI relay for FootyHub.

Forwards requests to football-data.org with the configured token and relays
the JSON, or a generic error envelope when the upstream call fails.
"""
