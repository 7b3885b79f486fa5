"""Application constants.

Workflow labels, listing limits and the fixed unit lengths used by the
relative-time formatter.
"""

# ---------------------------------------------------------------------------
# Candidate workflow
# ---------------------------------------------------------------------------
STATUS_FILTER_ALL: str = "all"
STATUS_CHANGED_BY: str = "System Admin"

REGISTRATION_MESSAGE: str = "New candidate registered: {name} for {position}"
STATUS_CHANGE_NOTE: str = "Status changed to {status}"
STATUS_CHANGE_MESSAGE: str = "Application {status} for {name} - {position}"

# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------
NOTIFICATIONS_LIMIT: int = 50

# ---------------------------------------------------------------------------
# Relative time units, largest first.  Fixed approximations, not calendar
# accurate: a year is 365 days and a month is 30 days.
# ---------------------------------------------------------------------------
TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
)

# ---------------------------------------------------------------------------
# HTTP error bodies
# ---------------------------------------------------------------------------
GENERIC_ERROR_MESSAGE: str = "Something went wrong!"
INVALID_REQUEST_MESSAGE: str = "Invalid request"
