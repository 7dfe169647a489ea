"""
Dashboard statistics.

Every figure is an independent reduction over the patient, room,
invoice, user and appointment collections.  "Today" and "this month"
are evaluated in the configured local time zone.
"""
import logging
import math

from django.contrib.auth import get_user_model
from django.core.cache import cache
from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.reports import to_local_date

logger = logging.getLogger(__name__)

STATS_CACHE_KEY = 'dashboard:stats'


def compute_stats(patients, rooms, invoices, users, appointments, today=None) -> dict:
    today = today or timezone.localdate()

    def is_today(value):
        d = to_local_date(value)
        return d is not None and d == today

    def is_this_month(value):
        d = to_local_date(value)
        return d is not None and (d.year, d.month) == (today.year, today.month)

    total_beds = sum(r['capacity'] or 0 for r in rooms)
    occupied_beds = sum(r['currentOccupancy'] or 0 for r in rooms)
    available_beds = sum(
        (r['capacity'] or 0) - (r['currentOccupancy'] or 0) for r in rooms if r['status'] == 'Available'
    )

    return {
        'totalPatients': len(patients),
        'admittedPatients': sum(1 for p in patients if p['status'] in ('Admitted', 'Critical')),
        'dischargedToday': sum(1 for p in patients if is_today(p['dischargeDate'])),
        'totalBeds': total_beds,
        'availableBeds': available_beds,
        'occupancyRate': math.floor(occupied_beds / total_beds * 100 + 0.5) if total_beds else 0,
        'todaysAppointments': sum(1 for a in appointments if is_today(a['appointmentDate'])),
        'todaysRevenue': round(sum(i['total'] or 0 for i in invoices if is_today(i['paymentDate'])), 2),
        'monthlyRevenue': round(sum(i['total'] or 0 for i in invoices if is_this_month(i['paymentDate'])), 2),
        'activeDoctors': sum(1 for u in users if u['role'] == 'doctor' and u['is_active']),
        'activeStaff': sum(1 for u in users if u['role'] == 'staff' and u['is_active']),
        'criticalPatients': sum(1 for p in patients if p['status'] == 'Critical'),
    }


def dashboard_stats() -> dict:
    users = list(get_user_model().objects.values('role', 'is_active'))
    return compute_stats(
        tables.patients.all(),
        tables.rooms.all(),
        tables.invoices.all(),
        users,
        tables.appointments.all(),
    )


def refresh_cached_stats(timeout=None) -> dict:
    """Recompute and store the statistics; the last completed refresh wins."""
    data = dashboard_stats()
    payload = {'ok': True, 'data': data, 'meta': {'refreshedAt': timezone.now().isoformat()}}
    cache.set(STATS_CACHE_KEY, payload, timeout)
    logger.debug("Dashboard statistics refreshed")
    return payload
