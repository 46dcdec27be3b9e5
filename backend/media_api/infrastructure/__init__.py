"""Infrastructure Layer — record storage and cross-cutting concerns.

Invariants:
    - Infrastructure never reaches into api/ or schemas/
    - Storage exposed through the MediaRepository contract only
"""
