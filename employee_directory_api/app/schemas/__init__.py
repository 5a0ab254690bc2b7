"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain dataclasses used by the
repositories to decouple the API representation from persistence.
"""
