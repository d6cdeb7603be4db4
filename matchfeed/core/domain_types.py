"""Domain Types - identity types and closed value sets shared across layers.

Invariants:
    - MatchStatus is the only source of valid status values (API, ORM, migration)
    - MatchId, CommentaryId wrap ints; never mix the two in signatures

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MatchId = NewType("MatchId", int)
CommentaryId = NewType("CommentaryId", int)


# ─── Enums ───────────────────────────────────────────────────────

class MatchStatus(str, Enum):
    """Match lifecycle states - maps to the `match_status` DB enum."""
    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"


def match_status_values() -> list[str]:
    """Enum values in declaration order, as stored in the database."""
    return [s.value for s in MatchStatus]


# ─── Bounds ──────────────────────────────────────────────────────

# Range of the INTEGER/SERIAL columns backing ids, scores, minute, sequence
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
