"""
List filtering over the cached collections.

Each filter is a linear predicate scan; filters combine with AND and a
value of ``All`` (or nothing) switches a filter off.
"""
from typing import Dict, Iterable, List, Optional


def _enabled(value) -> bool:
    return value not in (None, '', 'All')


def _icontains(haystack, needle: str) -> bool:
    return needle.lower() in str(haystack or '').lower()


def _contains(haystack, needle: str) -> bool:
    return needle in str(haystack or '')


def _equals(records: Iterable[dict], key: str, value) -> List[dict]:
    if not _enabled(value):
        return list(records)
    return [r for r in records if r.get(key) == value]


def filter_patients(records, q: Optional[str] = None, status=None) -> List[dict]:
    if _enabled(q):
        records = [r for r in records if _icontains(r['fullName'], q) or _contains(r['phone'], q)]
    return _equals(records, 'status', status)


def filter_doctors(records, q=None, department=None, status=None) -> List[dict]:
    if _enabled(q):
        records = [r for r in records if _icontains(r['fullName'], q) or _icontains(r['specialization'], q)]
    records = _equals(records, 'department', department)
    return _equals(records, 'status', status)


def filter_rooms(records, q=None, room_type=None, status=None) -> List[dict]:
    if _enabled(q):
        records = [r for r in records if _contains(r['roomNumber'], q) or _icontains(r['type'], q)]
    records = _equals(records, 'type', room_type)
    return _equals(records, 'status', status)


def filter_invoices(records, patient_names: Dict[str, str], q=None, status=None) -> List[dict]:
    if _enabled(q):
        records = [
            r for r in records
            if _icontains(r['invoiceNumber'], q) or _icontains(patient_names.get(r['patientId']), q)
        ]
    return _equals(records, 'status', status)


def filter_appointments(records, patient_names: Dict[str, str], doctor_names: Dict[str, str],
                        q=None, status=None, date=None) -> List[dict]:
    if _enabled(q):
        records = [
            r for r in records
            if _icontains(patient_names.get(r['patientId']), q) or _icontains(doctor_names.get(r['doctorId']), q)
        ]
    records = _equals(records, 'status', status)
    return _equals(records, 'appointmentDate', date)


def filter_medical_records(records, patient_names: Dict[str, str], doctor_names: Dict[str, str],
                           q=None) -> List[dict]:
    if not _enabled(q):
        return list(records)
    return [
        r for r in records
        if _icontains(patient_names.get(r['patientId']), q)
        or _icontains(doctor_names.get(r['doctorId']), q)
        or _icontains(r['diagnosis'], q)
    ]


def filter_face_sheets(records, q=None) -> List[dict]:
    if not _enabled(q):
        return list(records)
    return [
        r for r in records
        if _icontains(r['patientName'], q) or _contains(r['prnNo'], q) or _contains(r['ipdNo'], q)
    ]
