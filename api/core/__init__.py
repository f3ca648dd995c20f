"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that every feature uses (DB wiring,
settings, logging, error mapping). Feature-specific SQL and business logic
stay in the feature package (e.g. `articles/`).
"""
