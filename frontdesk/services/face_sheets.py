import random

from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.activity import log_activity

UPPERCASE_FIELDS = ('patientName', 'patientAddress', 'relativeName')


def _admission_number(prefix: str, today=None) -> str:
    today = today or timezone.localdate()
    return f"{prefix}{today:%y%m}/{random.randint(0, 99999):05d}"


def generate_prn(today=None) -> str:
    return _admission_number('VMH', today)


def generate_ipd(today=None) -> str:
    return _admission_number('IPD', today)


def create_face_sheet(data: dict, user=None) -> dict:
    data = dict(data)
    for key in UPPERCASE_FIELDS:
        if data.get(key):
            data[key] = data[key].upper()
    if not data.get('prnNo'):
        data['prnNo'] = generate_prn()
    if not data.get('ipdNo'):
        data['ipdNo'] = generate_ipd()
    data.setdefault('dateOfAdmission', timezone.localdate())
    data.setdefault('patientCategory', 'CASH')
    data.setdefault('typeOfDischarge', 'Normal Discharge')
    record = tables.face_sheets.add(data)
    log_activity(f"Created face sheet {record['ipdNo']} for {record['patientName']}", user=user)
    return record


def delete_face_sheet(pk, user=None) -> None:
    sheet = tables.face_sheets.get(pk)
    tables.face_sheets.delete(pk)
    log_activity(f"Deleted face sheet {sheet['ipdNo']}", user=user)
