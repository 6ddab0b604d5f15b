"""
Payments API — Application Package Initializer
================================================

What: Marks the `paymentsapi` directory as a Python package.
Why:  Enables module imports like `from paymentsapi.config import settings`.
Who:  Used by uvicorn, the `paymentsapi` console script and pytest.

Architecture Note:
    The service is a small demonstration of REST URL design:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Formatting)       │  ← Response text for lookups
    └─────────────────────────────────────┘

    There is no persistence layer. Every request is independent.
"""

__version__ = "1.0.0"
