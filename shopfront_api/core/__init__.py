"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings, DB
wiring, logging, error types, the per-app context). Feature-specific SQL and
business logic live in the feature packages (e.g. `addresses/`).
"""
