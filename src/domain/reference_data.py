from __future__ import annotations

from datetime import UTC, datetime

ADMIN_NAME = "Admin User"

SAMPLE_USER_COUNT = 10
SAMPLE_USER_PASSWORD = "user123"

# Every third sample user starts out inactive.
SAMPLE_INACTIVE_EVERY = 3


def sample_users() -> list[dict[str, object]]:
    return [
        {
            "name": f"User {index}",
            "email": f"user{index}@example.com",
            "inactive": index % SAMPLE_INACTIVE_EVERY == 0,
        }
        for index in range(1, SAMPLE_USER_COUNT + 1)
    ]


# First day of each month, January to June 2024.
SAMPLE_ANALYTICS_DATES = [datetime(2024, month, 1, tzinfo=UTC) for month in range(1, 7)]

# Half-open [low, high) ranges for the generated sample values.
SAMPLE_ANALYTICS_RANGES: dict[str, tuple[int, int]] = {
    "active_users": (200, 400),
    "new_signups": (50, 150),
    "sales": (3000, 6000),
    "revenue": (30000, 60000),
}
