import logging

from django.db import transaction
from django.utils import timezone

from rest_framework.exceptions import NotFound

from frontdesk.exceptions import AlreadyDischarged
from frontdesk.models import Patient
from frontdesk.services import tables
from frontdesk.services.activity import log_activity

logger = logging.getLogger(__name__)


def create_patient(data: dict, user=None) -> dict:
    data = dict(data)
    data.setdefault('admissionDate', timezone.localdate())
    data.setdefault('status', Patient.STATUS_ADMITTED)
    if data['status'] == Patient.STATUS_DISCHARGED:
        data.setdefault('dischargeDate', timezone.localdate())
    record = tables.patients.add(data)
    log_activity(f"Admitted patient {record['fullName']}", user=user)
    return record


def update_patient(pk, data: dict, user=None) -> dict:
    data = dict(data)
    if data.get('status') == Patient.STATUS_DISCHARGED and 'dischargeDate' not in data:
        current = tables.patients.get(pk)
        if current['status'] != Patient.STATUS_DISCHARGED:
            data['dischargeDate'] = timezone.localdate()
    record = tables.patients.update(pk, data)
    log_activity(f"Updated patient {record['fullName']}", user=user)
    return record


def discharge_patient(pk, user=None) -> dict:
    """Mark a patient discharged as of today.

    Only a patient whose status is already Discharged is rejected; a
    readmitted patient keeps the old date until discharged again, which
    replaces it.
    """
    with transaction.atomic():
        obj = Patient.objects.select_for_update().filter(pk=pk).first()
        if obj is None:
            raise NotFound('Patient not found')
        if obj.status == Patient.STATUS_DISCHARGED:
            logger.info("Patient %s already discharged on %s", pk, obj.discharge_date)
            since = f' on {obj.discharge_date.isoformat()}' if obj.discharge_date else ''
            raise AlreadyDischarged(f'Patient was already discharged{since}.')
        record = tables.patients.update(pk, {
            'status': Patient.STATUS_DISCHARGED,
            'dischargeDate': timezone.localdate(),
        })
    log_activity(f"Discharged patient {record['fullName']}", user=user)
    return record
