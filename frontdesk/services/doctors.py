from frontdesk.services import tables
from frontdesk.services.activity import log_activity

DEFAULT_CONSULTATION_FEE = 150
DEFAULT_MAX_PATIENTS = 20
WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')


def default_schedule() -> dict:
    """Mon-Fri 09:00-17:00, Sat 09:00-13:00, Sunday off."""
    schedule = {day: {'start': '09:00', 'end': '17:00', 'available': True} for day in WEEKDAYS[:5]}
    schedule['saturday'] = {'start': '09:00', 'end': '13:00', 'available': True}
    schedule['sunday'] = {'start': '', 'end': '', 'available': False}
    return schedule


def create_doctor(data: dict, user=None) -> dict:
    data = dict(data)
    data.setdefault('consultationFee', DEFAULT_CONSULTATION_FEE)
    data.setdefault('maxPatientsPerDay', DEFAULT_MAX_PATIENTS)
    data.setdefault('status', 'Active')
    if not data.get('schedule'):
        data['schedule'] = default_schedule()
    record = tables.doctors.add(data)
    log_activity(f"Added doctor {record['fullName']}", user=user)
    return record


def update_doctor(pk, data: dict, user=None) -> dict:
    record = tables.doctors.update(pk, data)
    log_activity(f"Updated doctor {record['fullName']}", user=user)
    return record
