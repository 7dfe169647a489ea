"""
Management command to load demo data.

Demo accounts are (re)created on every run with known passwords.  Doctors,
rooms, patients, appointments and invoices are only added when the
patient table is empty, so running the command twice does not duplicate
them.
"""
from datetime import timedelta

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand
from django.utils import timezone

from frontdesk.models import Patient, User
from frontdesk.services.appointments import create_appointment
from frontdesk.services.billing import create_invoice
from frontdesk.services.doctors import create_doctor, default_schedule
from frontdesk.services.patients import create_patient
from frontdesk.services.rooms import create_room

DEMO_USERS = [
    ("admin@visionhospital.com", "admin123", "admin", "Hospital Administrator"),
    ("doctor@visionhospital.com", "doctor123", "doctor", "Dr. Sarah Johnson"),
    ("staff@visionhospital.com", "staff123", "staff", "Front Desk Staff"),
]


class Command(BaseCommand):
    help = 'Load demo users and hospital data (idempotent)'

    def handle(self, *args, **options):
        self.ensure_users()
        if Patient.objects.exists():
            self.stdout.write("Patients already present, skipping demo records.")
            return
        doctors = self.create_doctors()
        rooms = self.create_rooms()
        patients = self.create_patients(doctors, rooms)
        self.create_appointments(patients, doctors)
        self.create_invoices(patients)
        self.stdout.write(self.style.SUCCESS('Demo data loaded.'))

    def ensure_users(self):
        now = timezone.now()
        for email, password, role, full_name in DEMO_USERS:
            u, created = User.objects.get_or_create(
                username=email,
                defaults={
                    "email": email,
                    "role": role,
                    "full_name": full_name,
                    "password": make_password(password),
                    "is_active": True,
                    "is_staff": role == "admin",
                    "created_at": now,
                    "updated_at": now,
                },
            )
            if not created:
                u.password = make_password(password)
                u.role = role
                u.is_active = True
                u.updated_at = now
                u.save(update_fields=["password", "role", "is_active", "updated_at"])
            self.stdout.write(self.style.SUCCESS(f"ok: {email} ({role})"))

    def create_doctors(self):
        neurology_hours = {day: {'start': '08:00', 'end': '16:00', 'available': True}
                           for day in ('monday', 'tuesday', 'wednesday', 'thursday', 'friday')}
        neurology_hours['saturday'] = {'start': '', 'end': '', 'available': False}
        neurology_hours['sunday'] = {'start': '', 'end': '', 'available': False}
        return [
            create_doctor({
                'fullName': 'Dr. Sarah Johnson', 'specialization': 'Cardiology', 'qualification': 'MD, FACC',
                'experience': 15, 'phone': '+1234567894', 'email': 'sarah.johnson@hospital.com',
                'department': 'Cardiology', 'schedule': default_schedule(), 'consultationFee': 200,
            }),
            create_doctor({
                'fullName': 'Dr. Michael Chen', 'specialization': 'Neurology', 'qualification': 'MD, PhD',
                'experience': 12, 'phone': '+1234567895', 'email': 'michael.chen@hospital.com',
                'department': 'Neurology', 'schedule': neurology_hours, 'consultationFee': 250,
            }),
            create_doctor({
                'fullName': 'Dr. Priya Patil', 'specialization': 'General Medicine', 'qualification': 'MBBS, MD',
                'experience': 8, 'phone': '+1234567896', 'email': 'priya.patil@hospital.com',
                'department': 'General Medicine',
            }),
        ]

    def create_rooms(self):
        return [
            create_room({'roomNumber': '204', 'type': 'Private', 'floor': 2, 'capacity': 1,
                         'currentOccupancy': 1, 'status': 'Occupied', 'dailyRate': 350,
                         'amenities': ['TV', 'AC', 'Attached Bathroom'], 'equipment': ['Oxygen Supply']}),
            create_room({'roomNumber': '301', 'type': 'General', 'floor': 3, 'capacity': 4,
                         'currentOccupancy': 1, 'status': 'Available', 'dailyRate': 200,
                         'amenities': ['Fan'], 'equipment': ['Patient Monitor']}),
            create_room({'roomNumber': 'ICU-1', 'type': 'ICU', 'floor': 1, 'capacity': 2,
                         'status': 'Available', 'dailyRate': 1200,
                         'equipment': ['Ventilator', 'Defibrillator', 'Patient Monitor']}),
        ]

    def create_patients(self, doctors, rooms):
        today = timezone.localdate()
        return [
            create_patient({
                'fullName': 'John Doe', 'age': 35, 'gender': 'Male', 'phone': '+1234567890',
                'email': 'john.doe@email.com', 'address': '123 Main St, City', 'emergencyContact': 'Jane Doe',
                'emergencyPhone': '+1234567891', 'bloodType': 'O+', 'allergies': ['Penicillin'],
                'admissionDate': today - timedelta(days=3), 'assignedDoctorId': doctors[0]['id'],
                'assignedRoomId': rooms[0]['id'], 'medicalHistory': 'Hypertension, Diabetes',
                'currentDiagnosis': 'Pneumonia',
            }),
            create_patient({
                'fullName': 'Sarah Wilson', 'age': 28, 'gender': 'Female', 'phone': '+1234567892',
                'email': 'sarah.wilson@email.com', 'address': '456 Oak Ave, City', 'emergencyContact': 'Mike Wilson',
                'emergencyPhone': '+1234567893', 'bloodType': 'A-', 'allergies': ['Shellfish'],
                'admissionDate': today - timedelta(days=1), 'status': 'Stable',
                'assignedDoctorId': doctors[1]['id'], 'assignedRoomId': rooms[1]['id'],
                'medicalHistory': 'None', 'currentDiagnosis': 'Appendicitis',
            }),
        ]

    def create_appointments(self, patients, doctors):
        today = timezone.localdate()
        create_appointment({'patientId': patients[0]['id'], 'doctorId': doctors[0]['id'],
                            'appointmentDate': today, 'appointmentTime': '10:00', 'type': 'Follow-up'})
        create_appointment({'patientId': patients[1]['id'], 'doctorId': doctors[1]['id'],
                            'appointmentDate': today + timedelta(days=1), 'appointmentTime': '14:30',
                            'type': 'Consultation'})

    def create_invoices(self, patients):
        today = timezone.localdate()
        create_invoice({
            'patientId': patients[0]['id'], 'issueDate': today, 'dueDate': today + timedelta(days=15),
            'items': [
                {'description': 'Cardiology consultation', 'category': 'Consultation', 'quantity': 1, 'unitPrice': 200},
                {'description': 'Private room (3 days)', 'category': 'Room Charge', 'quantity': 3, 'unitPrice': 350},
            ],
            'tax': 50, 'status': 'Paid', 'paymentMethod': 'Cash', 'paymentDate': today,
        })
        create_invoice({
            'patientId': patients[1]['id'], 'issueDate': today, 'dueDate': today + timedelta(days=30),
            'items': [{'description': 'Blood panel', 'category': 'Lab Test', 'quantity': 1, 'unitPrice': 80}],
        })
