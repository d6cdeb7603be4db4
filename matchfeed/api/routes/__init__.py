"""Route Modules - one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes hold no query logic (delegate to matchfeed.services)
"""
