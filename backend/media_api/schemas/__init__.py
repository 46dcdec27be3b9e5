"""Pydantic Schemas — request/response models for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Record fields are schema-less: extra keys always allowed
"""
