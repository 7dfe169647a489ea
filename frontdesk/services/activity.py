"""
Recent activity feed.

A short, newest-first list of mutation messages kept in the cache.  It
is a convenience feed for the dashboard, not an audit trail: entries
expire with the cache and concurrent writers may drop a line.
"""
from typing import Any, Dict, List

from django.conf import settings
from django.core.cache import cache
from django.utils import timezone

ACTIVITY_KEY = 'activity:recent'


def log_activity(message: str, user=None) -> Dict[str, Any]:
    entry = {
        'message': message,
        'timestamp': timezone.now().isoformat(),
        'user': getattr(user, 'username', None),
    }
    entries = cache.get(ACTIVITY_KEY) or []
    entries = [entry, *entries][:settings.HMS_ACTIVITY_LOG_SIZE]
    cache.set(ACTIVITY_KEY, entries, None)
    return entry


def recent_activity() -> List[Dict[str, Any]]:
    return cache.get(ACTIVITY_KEY) or []
