import math

from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.activity import log_activity

DEFAULT_CAPACITY = 1
DEFAULT_DAILY_RATE = 200


def create_room(data: dict, user=None) -> dict:
    data = dict(data)
    data.setdefault('capacity', DEFAULT_CAPACITY)
    data.setdefault('dailyRate', DEFAULT_DAILY_RATE)
    data.setdefault('currentOccupancy', 0)
    data.setdefault('status', 'Available')
    data.setdefault('lastCleaned', timezone.now())
    record = tables.rooms.add(data)
    log_activity(f"Added room {record['roomNumber']}", user=user)
    return record


def update_room(pk, data: dict, user=None) -> dict:
    record = tables.rooms.update(pk, data)
    log_activity(f"Updated room {record['roomNumber']}", user=user)
    return record


def set_room_status(pk, status: str, user=None) -> dict:
    record = tables.rooms.update(pk, {'status': status})
    log_activity(f"Room {record['roomNumber']} marked {status}", user=user)
    return record


def record_cleaning(pk, user=None) -> dict:
    record = tables.rooms.update(pk, {'lastCleaned': timezone.now()})
    log_activity(f"Room {record['roomNumber']} cleaned", user=user)
    return record


def summary(records) -> dict:
    total = len(records)
    available = sum(1 for r in records if r['status'] == 'Available')
    occupied = sum(1 for r in records if r['status'] == 'Occupied')
    return {
        'total': total,
        'available': available,
        'occupied': occupied,
        # by room count, not beds
        'occupancyRate': math.floor(occupied / total * 100 + 0.5) if total else 0,
    }
