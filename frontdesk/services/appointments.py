from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.activity import log_activity

SPECIALIZATION_FEES = {
    'Cardiology': 200,
    'Neurology': 250,
}
DEFAULT_FEE = 150
DEFAULT_DURATION = 30


def fee_for_doctor(doctor) -> float:
    if not doctor:
        return DEFAULT_FEE
    return SPECIALIZATION_FEES.get(doctor.get('specialization'), DEFAULT_FEE)


def create_appointment(data: dict, user=None) -> dict:
    data = dict(data)
    data.setdefault('status', 'Scheduled')
    data.setdefault('duration', DEFAULT_DURATION)
    doctor = tables.doctors.find(data['doctorId'])
    # fixed at booking; later specialization changes do not reprice
    data['fee'] = fee_for_doctor(doctor)
    record = tables.appointments.add(data)
    log_activity(f"Scheduled appointment on {record['appointmentDate']} at {record['appointmentTime']}", user=user)
    return record


def update_appointment(pk, data: dict, user=None) -> dict:
    data = {k: v for k, v in data.items() if k != 'fee'}
    record = tables.appointments.update(pk, data)
    log_activity(f"Updated appointment {record['id']}", user=user)
    return record


def set_appointment_status(pk, status: str, user=None) -> dict:
    record = tables.appointments.update(pk, {'status': status})
    log_activity(f"Appointment {record['id']} marked {status}", user=user)
    return record


def summary(records, today=None) -> dict:
    today = (today or timezone.localdate()).isoformat()
    todays = [r for r in records if r['appointmentDate'] == today]
    return {
        'scheduled': sum(1 for r in records if r['status'] == 'Scheduled'),
        'completed': sum(1 for r in records if r['status'] == 'Completed'),
        'today': len(todays),
        'todaysFees': round(sum(r['fee'] or 0 for r in todays), 2),
    }
