"""
Client view-model for FootyHub.

- `api_client` talks to the FootyHub relay.
- `state` holds the per-session standings cache and team registry.
- `prediction` implements the win-probability heuristic.
- `render` turns payloads into HTML fragments.
- `views` wires everything together, one function per screen.
"""
