from frontdesk.services import filters

PATIENTS = [
    {'id': 'p1', 'fullName': 'John Doe', 'phone': '+1234567890', 'status': 'Admitted'},
    {'id': 'p2', 'fullName': 'Sarah Wilson', 'phone': '+1987654321', 'status': 'Stable'},
    {'id': 'p3', 'fullName': 'Johnny Cash', 'phone': '555', 'status': 'Discharged'},
]


def test_patient_search_by_name_case_insensitive():
    assert [p['id'] for p in filters.filter_patients(PATIENTS, 'john')] == ['p1', 'p3']


def test_patient_search_by_phone_substring():
    assert [p['id'] for p in filters.filter_patients(PATIENTS, '98765')] == ['p2']


def test_all_disables_filter_and_filters_combine():
    assert len(filters.filter_patients(PATIENTS, None, 'All')) == 3
    assert [p['id'] for p in filters.filter_patients(PATIENTS, 'john', 'Discharged')] == ['p3']


def test_rooms_search_number_or_type():
    rooms = [
        {'id': 'r1', 'roomNumber': '204', 'type': 'Private', 'status': 'Occupied'},
        {'id': 'r2', 'roomNumber': 'ICU-1', 'type': 'ICU', 'status': 'Available'},
    ]
    assert [r['id'] for r in filters.filter_rooms(rooms, 'icu')] == ['r2']
    assert [r['id'] for r in filters.filter_rooms(rooms, '20')] == ['r1']
    assert [r['id'] for r in filters.filter_rooms(rooms, None, 'All', 'Available')] == ['r2']


def test_invoice_search_uses_patient_names():
    invoices = [
        {'id': 'i1', 'invoiceNumber': 'INV-2024-001', 'patientId': 'p1', 'status': 'Paid'},
        {'id': 'i2', 'invoiceNumber': 'INV-2024-002', 'patientId': 'p2', 'status': 'Pending'},
    ]
    names = {p['id']: p['fullName'] for p in PATIENTS}
    assert [i['id'] for i in filters.filter_invoices(invoices, names, 'wilson')] == ['i2']
    assert [i['id'] for i in filters.filter_invoices(invoices, names, 'inv-2024-001')] == ['i1']
    assert [i['id'] for i in filters.filter_invoices(invoices, names, None, 'Paid')] == ['i1']


def test_appointments_by_doctor_name_and_date():
    appts = [
        {'id': 'a1', 'patientId': 'p1', 'doctorId': 'd1', 'status': 'Scheduled', 'appointmentDate': '2024-06-15'},
        {'id': 'a2', 'patientId': 'p2', 'doctorId': 'd2', 'status': 'Completed', 'appointmentDate': '2024-06-16'},
    ]
    doctors = {'d1': 'Dr. Sarah Johnson', 'd2': 'Dr. Michael Chen'}
    patients = {p['id']: p['fullName'] for p in PATIENTS}
    assert [a['id'] for a in filters.filter_appointments(appts, patients, doctors, q='chen')] == ['a2']
    assert [a['id'] for a in filters.filter_appointments(appts, patients, doctors, date='2024-06-15')] == ['a1']
    assert filters.filter_appointments(appts, patients, doctors, q='chen', status='Scheduled') == []


def test_medical_records_match_diagnosis():
    records = [
        {'id': 'm1', 'patientId': 'p1', 'doctorId': 'd1', 'diagnosis': 'Pneumonia'},
        {'id': 'm2', 'patientId': 'p2', 'doctorId': 'd1', 'diagnosis': 'Appendicitis'},
    ]
    assert [r['id'] for r in filters.filter_medical_records(records, {}, {}, q='PNEU')] == ['m1']


def test_face_sheets_match_name_or_numbers():
    sheets = [
        {'id': 'f1', 'patientName': 'RAVI KUMAR', 'prnNo': 'VMH2506/00032', 'ipdNo': 'IPD2506/00637'},
        {'id': 'f2', 'patientName': 'ANITA DESAI', 'prnNo': 'VMH2507/00001', 'ipdNo': 'IPD2507/00002'},
    ]
    assert [s['id'] for s in filters.filter_face_sheets(sheets, 'ravi')] == ['f1']
    assert [s['id'] for s in filters.filter_face_sheets(sheets, 'IPD2507')] == ['f2']
