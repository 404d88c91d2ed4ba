"""
Pydantic schema definitions for API payloads.

Schemas describe request and response bodies and are kept apart from
the in-memory ``Person`` records held by the contact store.
"""
