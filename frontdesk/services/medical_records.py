from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.activity import log_activity

VITAL_SIGNS = ('temperature', 'bloodPressure', 'heartRate', 'respiratoryRate', 'oxygenSaturation')


def _to_number(value):
    if value in (None, ''):
        return 0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if number.is_integer() else number


def coerce_vitals(vitals) -> dict:
    """Numeric vitals, 0 when blank.  Blood pressure stays a string ("120/80")."""
    vitals = vitals or {}
    result = {}
    for key in VITAL_SIGNS:
        value = vitals.get(key)
        if key == 'bloodPressure':
            result[key] = str(value or '')
        else:
            result[key] = _to_number(value)
    return result


def create_medical_record(data: dict, user=None) -> dict:
    data = dict(data)
    data.setdefault('visitDate', timezone.localdate())
    data['vitalSigns'] = coerce_vitals(data.get('vitalSigns'))
    # point-in-time copy of the patient row; never refreshed
    data['faceSheetSnapshot'] = tables.patients.snapshot(data['patientId'])
    record = tables.medical_records.add(data)
    log_activity(f"Added medical record for patient {record['patientId']}", user=user)
    return record


def summary(records, today=None) -> dict:
    today = today or timezone.localdate()
    month_prefix = today.strftime('%Y-%m')
    return {
        'total': len(records),
        'thisMonth': sum(1 for r in records if (r['visitDate'] or '').startswith(month_prefix)),
        'criticalResults': sum(
            1 for r in records for lab in (r['labResults'] or []) if lab.get('status') == 'Critical'
        ),
        'followUpsDue': sum(1 for r in records if r['followUpDate'] and r['followUpDate'] >= today.isoformat()),
    }
