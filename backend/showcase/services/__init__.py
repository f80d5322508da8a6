"""Services Layer — catalog CRUD, purchase flow, payments, notifications, blog.

Invariants:
    - Services receive the AsyncSession and provider clients through __init__
    - Services raise ShowcaseError subclasses; routes never translate errors themselves

Design Decisions:
    - One service per concern for locality (no god objects)
"""
