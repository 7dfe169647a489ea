from datetime import date

import pytest
from django.urls import reverse

from frontdesk.services.stats import compute_stats

pytestmark = pytest.mark.django_db

TODAY = date(2024, 6, 15)


def test_compute_stats_reductions():
    patients = [
        {'status': 'Admitted', 'dischargeDate': None},
        {'status': 'Critical', 'dischargeDate': None},
        {'status': 'Discharged', 'dischargeDate': '2024-06-15'},
        {'status': 'Discharged', 'dischargeDate': '2024-06-01'},
    ]
    rooms = [
        {'capacity': 4, 'currentOccupancy': 1, 'status': 'Available'},
        {'capacity': 2, 'currentOccupancy': 2, 'status': 'Occupied'},
        {'capacity': 2, 'currentOccupancy': 0, 'status': 'Maintenance'},
    ]
    invoices = [
        {'total': 100, 'paymentDate': '2024-06-15'},
        {'total': 40, 'paymentDate': '2024-06-02'},
        {'total': 999, 'paymentDate': '2024-05-31'},
        {'total': 7, 'paymentDate': None},
    ]
    users = [
        {'role': 'doctor', 'is_active': True},
        {'role': 'doctor', 'is_active': False},
        {'role': 'staff', 'is_active': True},
        {'role': 'admin', 'is_active': True},
    ]
    appointments = [{'appointmentDate': '2024-06-15'}, {'appointmentDate': '2024-06-16'}]

    s = compute_stats(patients, rooms, invoices, users, appointments, today=TODAY)
    assert s['totalPatients'] == 4
    assert s['admittedPatients'] == 2
    assert s['dischargedToday'] == 1
    assert s['totalBeds'] == 8
    assert s['availableBeds'] == 3
    # 3 of 8 beds occupied -> 37.5 rounds half up
    assert s['occupancyRate'] == 38
    assert s['todaysAppointments'] == 1
    assert s['todaysRevenue'] == 100
    assert s['monthlyRevenue'] == 140
    assert s['activeDoctors'] == 1
    assert s['activeStaff'] == 1
    assert s['criticalPatients'] == 1


def test_no_rooms_means_zero_occupancy():
    s = compute_stats([], [], [], [], [], today=TODAY)
    assert s['occupancyRate'] == 0
    assert s['totalBeds'] == 0


def test_stats_endpoint_requires_session(client):
    r = client.get(reverse('dashboard_stats'))
    assert r.status_code in (401, 403)


def test_stats_endpoint(api, staff_user):
    api.post(reverse('rooms'), {'roomNumber': '101', 'type': 'General', 'floor': 1, 'capacity': 2}, format='json')
    r = api.get(reverse('dashboard_stats'))
    assert r.status_code == 200
    assert r.data['ok'] is True
    assert r.data['data']['totalBeds'] == 2
    assert r.data['data']['availableBeds'] == 2
    assert r.data['data']['activeStaff'] == 1
