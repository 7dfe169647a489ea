"""
Period report: revenue and patient counts per day, month or year.

Invoices contribute their ``total`` to the bucket of their issue date.
Patients contribute to the bucket of their admission date and bump the
counter matching their *current* status, so a patient admitted in June
and discharged in July counts as "discharged" in June.  Rows whose date
is missing or malformed are skipped.
"""
from __future__ import annotations

import datetime
import logging
from typing import Dict, Iterable, List, Optional

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

logger = logging.getLogger(__name__)

GRANULARITIES = ('day', 'month', 'year')

_KEY_FORMATS = {
    'day': '%Y-%m-%d',
    'month': '%Y-%m',
    'year': '%Y',
}

_STATUS_COUNTERS = {
    'Admitted': 'admitted',
    'Discharged': 'discharged',
    'Critical': 'critical',
}


def to_local_date(value) -> Optional[datetime.date]:
    """Coerce a date, datetime or ISO string to a local calendar date."""
    if value in (None, ''):
        return None
    if isinstance(value, datetime.datetime):
        return timezone.localtime(value).date() if timezone.is_aware(value) else value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        text = str(value)
        dt = parse_datetime(text)
        if dt is not None and ('T' in text or ' ' in text):
            return to_local_date(dt)
        return parse_date(text[:10])
    except ValueError:
        return None


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"


def period_key(d: datetime.date, granularity: str) -> str:
    return d.strftime(_KEY_FORMATS[granularity])


def period_label(d: datetime.date, granularity: str) -> str:
    if granularity == 'day':
        return f"{d:%B} {_ordinal(d.day)}, {d.year}"
    if granularity == 'month':
        return f"{d:%B} {d.year}"
    return str(d.year)


def aggregate(invoices: Iterable[dict], patients: Iterable[dict], granularity: str,
              selected=None) -> List[Dict]:
    if granularity not in GRANULARITIES:
        raise ValueError(f'unknown granularity: {granularity}')

    buckets: Dict[str, Dict] = {}

    def bucket(d):
        key = period_key(d, granularity)
        if key not in buckets:
            buckets[key] = {
                'period': period_label(d, granularity),
                'periodKey': key,
                'totalRevenue': 0.0,
                'patientCount': 0,
                'admitted': 0,
                'discharged': 0,
                'critical': 0,
            }
        return buckets[key]

    for inv in invoices:
        d = to_local_date(inv.get('issueDate'))
        if d is None:
            logger.debug("Skipping invoice %s without a usable issue date", inv.get('id'))
            continue
        bucket(d)['totalRevenue'] += float(inv.get('total') or 0)

    for p in patients:
        d = to_local_date(p.get('admissionDate'))
        if d is None:
            logger.debug("Skipping patient %s without a usable admission date", p.get('id'))
            continue
        row = bucket(d)
        row['patientCount'] += 1
        counter = _STATUS_COUNTERS.get(p.get('status'))
        if counter:
            row[counter] += 1

    rows = list(buckets.values())
    selected = to_local_date(selected)
    if selected is not None:
        wanted = period_key(selected, granularity)
        rows = [r for r in rows if r['periodKey'] == wanted]
    for r in rows:
        r['totalRevenue'] = round(r['totalRevenue'], 2)
    rows.sort(key=lambda r: r['periodKey'], reverse=True)
    return rows
