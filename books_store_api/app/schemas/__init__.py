"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store's internal records so the
API representation does not depend on how books are held in memory.
"""
