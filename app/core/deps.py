from datetime import datetime, timezone


# "now" is a dependency so tests can pin the clock via app.dependency_overrides.
def get_now() -> datetime:
    return datetime.now(timezone.utc)
