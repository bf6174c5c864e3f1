import threading
import time

from fastapi import HTTPException, Request, status

import config

_RATE_LIMITS: dict[str, list[float]] = {}
_RATE_LOCK = threading.Lock()


def _recent_entries(key: str, window_seconds: int, now: float) -> list[float]:
    """Entries still inside the window. Caller holds _RATE_LOCK."""
    window_start = now - window_seconds
    entries = [t for t in _RATE_LIMITS.get(key, []) if t >= window_start]
    if entries:
        _RATE_LIMITS[key] = entries
    else:
        _RATE_LIMITS.pop(key, None)
    return entries


def _check_rate_limit(key: str, window_seconds: int, max_per_window: int) -> None:
    with _RATE_LOCK:
        entries = _recent_entries(key, window_seconds, time.time())
        if len(entries) >= max_per_window:
            raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="Too many requests")


def _record_hit(key: str, window_seconds: int) -> None:
    now = time.time()
    with _RATE_LOCK:
        entries = _recent_entries(key, window_seconds, now)
        entries.append(now)
        _RATE_LIMITS[key] = entries


def _contact_key(request: Request) -> str:
    client_ip = request.client.host if request.client else "unknown"
    return f"contact:{client_ip}"


def check_contact_rate_limit(request: Request) -> None:
    """Raise 429 when this client already sent the maximum number of messages."""
    _check_rate_limit(
        _contact_key(request),
        config.CONTACT_RATE_WINDOW_SECONDS,
        config.CONTACT_RATE_MAX_PER_WINDOW,
    )


def record_contact_submission(request: Request) -> None:
    """Count a delivered message; failed sends never count."""
    _record_hit(_contact_key(request), config.CONTACT_RATE_WINDOW_SECONDS)


def reset_rate_limits() -> None:
    with _RATE_LOCK:
        _RATE_LIMITS.clear()
