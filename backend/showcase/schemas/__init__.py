"""Pydantic Schemas — form validation and response shapes for the API and functions.

Invariants:
    - Forms are validated here, before any DB write or outbound call
    - Enum-backed fields store plain string values (use_enum_values)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
    - Function bodies (camelCase) kept apart from REST schemas (snake_case)
"""
