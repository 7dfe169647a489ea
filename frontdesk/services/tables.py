"""
Per-table repositories and their camelCase <-> column maps.
"""
from typing import Dict, List

from frontdesk.models import Appointment, Doctor, FaceSheet, Invoice, MedicalRecord, Patient, Room
from frontdesk.services.repository import Repository

PATIENT_FIELDS = {
    'fullName': 'full_name',
    'age': 'age',
    'gender': 'gender',
    'phone': 'phone',
    'email': 'email',
    'address': 'address',
    'emergencyContact': 'emergency_contact',
    'emergencyPhone': 'emergency_phone',
    'bloodType': 'blood_type',
    'allergies': 'allergies',
    'admissionDate': 'admission_date',
    'dischargeDate': 'discharge_date',
    'status': 'status',
    'assignedDoctorId': 'assigned_doctor_id',
    'assignedRoomId': 'assigned_room_id',
    'insuranceInfo': 'insurance_info',
    'medicalHistory': 'medical_history',
    'currentDiagnosis': 'current_diagnosis',
}

DOCTOR_FIELDS = {
    'fullName': 'full_name',
    'specialization': 'specialization',
    'qualification': 'qualification',
    'experience': 'experience',
    'phone': 'phone',
    'email': 'email',
    'department': 'department',
    'schedule': 'schedule',
    'consultationFee': 'consultation_fee',
    'status': 'status',
    'maxPatientsPerDay': 'max_patients_per_day',
}

INVOICE_FIELDS = {
    'patientId': 'patient_id',
    'invoiceNumber': 'invoice_number',
    'issueDate': 'issue_date',
    'dueDate': 'due_date',
    'items': 'items',
    'subtotal': 'subtotal',
    'tax': 'tax',
    'discount': 'discount',
    'total': 'total',
    'status': 'status',
    'paymentMethod': 'payment_method',
    'paymentDate': 'payment_date',
    'notes': 'notes',
}

ROOM_FIELDS = {
    'roomNumber': 'room_number',
    'type': 'type',
    'floor': 'floor',
    'capacity': 'capacity',
    'currentOccupancy': 'current_occupancy',
    'status': 'status',
    'dailyRate': 'daily_rate',
    'amenities': 'amenities',
    'assignedPatients': 'assigned_patients',
    'lastCleaned': 'last_cleaned',
    'equipment': 'equipment',
}

MEDICAL_RECORD_FIELDS = {
    'patientId': 'patient_id',
    'doctorId': 'doctor_id',
    'visitDate': 'visit_date',
    'chiefComplaint': 'chief_complaint',
    'diagnosis': 'diagnosis',
    'treatment': 'treatment',
    'medications': 'medications',
    'vitalSigns': 'vital_signs',
    'labResults': 'lab_results',
    'notes': 'notes',
    'followUpDate': 'follow_up_date',
    'faceSheetSnapshot': 'face_sheet_snapshot',
}

APPOINTMENT_FIELDS = {
    'patientId': 'patient_id',
    'doctorId': 'doctor_id',
    'appointmentDate': 'appointment_date',
    'appointmentTime': 'appointment_time',
    'duration': 'duration',
    'type': 'type',
    'status': 'status',
    'notes': 'notes',
    'fee': 'fee',
    'roomId': 'room_id',
}

FACE_SHEET_FIELDS = {
    'patientName': 'patient_name',
    'age': 'age',
    'sex': 'sex',
    'prnNo': 'prn_no',
    'ipdNo': 'ipd_no',
    'patientCategory': 'patient_category',
    'patientSubCategory': 'patient_sub_category',
    'dateOfAdmission': 'date_of_admission',
    'time': 'time',
    'consultantDoctor': 'consultant_doctor',
    'refByDoctor': 'ref_by_doctor',
    'patientAddress': 'patient_address',
    'wardName': 'ward_name',
    'bedNo': 'bed_no',
    'idProofTaken': 'id_proof_taken',
    'relativeName': 'relative_name',
    'contactNo': 'contact_no',
    'relativeAddress': 'relative_address',
    'provisionalDiagnosis': 'provisional_diagnosis',
    'finalDiagnosis': 'final_diagnosis',
    'icdCodes': 'icd_codes',
    'dischargeDate': 'discharge_date',
    'dischargeTime': 'discharge_time',
    'typeOfDischarge': 'type_of_discharge',
    'dischargeCardPreparedBy': 'discharge_card_prepared_by',
}

patients = Repository(Patient, 'patients', PATIENT_FIELDS)
doctors = Repository(Doctor, 'doctors', DOCTOR_FIELDS)
invoices = Repository(Invoice, 'invoices', INVOICE_FIELDS)
rooms = Repository(Room, 'rooms', ROOM_FIELDS)
medical_records = Repository(MedicalRecord, 'medical_records', MEDICAL_RECORD_FIELDS, label='Medical record')
appointments = Repository(Appointment, 'appointments', APPOINTMENT_FIELDS)
face_sheets = Repository(FaceSheet, 'face_sheets', FACE_SHEET_FIELDS, label='Face sheet')

ALL = (patients, doctors, invoices, rooms, medical_records, appointments, face_sheets)


def patient_names() -> List[Dict[str, str]]:
    """Patient drop-down source: id, name and email sorted by name."""
    names = [{'id': p['id'], 'fullName': p['fullName'], 'email': p['email']} for p in patients.all()]
    return sorted(names, key=lambda p: (p['fullName'] or '').lower())


def name_index(records) -> Dict[str, str]:
    return {r['id']: r.get('fullName') or '' for r in records}
