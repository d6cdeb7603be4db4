"""ORM Models - SQLAlchemy declarative models for matches and commentary.

All models imported here so SQLAlchemy resolves string-based relationship()
references before any query runs.
"""

from matchfeed.models.match import Match  # noqa: F401
from matchfeed.models.commentary import Commentary  # noqa: F401
