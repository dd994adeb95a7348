"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, clock, ids, errors). Keep entity-specific SQL in
`storage/` and HTTP handling in the entity packages (e.g. `boards/`).
"""
