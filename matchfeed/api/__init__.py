"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are {"success": true, "data"|"message": ...}
    - Failures are raised, never returned: error_handlers builds the envelope
"""
