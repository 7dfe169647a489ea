"""
Database models for the hospital administration backend.

These models capture the tables the front desk works with: users,
patients, doctors, invoices, rooms, medical records, appointments and
face sheets.  Column names are snake_case and mirror the records the
front-end edits (camelCase) one to one; the mapping lives in
:mod:`frontdesk.services.tables`.

Cross-table references (``assigned_doctor_id``, ``patient_id`` and so
on) are plain string ids rather than foreign keys: lookups are done by
scanning the cached collections and nothing enforces referential
integrity.  ``created_at``/``updated_at`` are stamped by the repository
layer, not by the database.
"""
from __future__ import annotations

import uuid
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Application user with a role label.

    Roles mirror the front-end roles: 'admin', 'doctor' and 'staff'.
    The role only decides which actions the client offers; it is not
    enforced by the API.
    """
    ROLE_CHOICES = [
        ('admin', 'Administrator'),
        ('doctor', 'Doctor'),
        ('staff', 'Staff'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default='staff', db_index=True)
    full_name = models.CharField(max_length=255, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    department = models.CharField(max_length=128, blank=True)
    permissions = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'users'

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Patient(models.Model):
    """An admitted (or previously admitted) patient.

    Created on admission, mutated by edits and the discharge action,
    never hard-deleted.
    """
    STATUS_ADMITTED = 'Admitted'
    STATUS_STABLE = 'Stable'
    STATUS_CRITICAL = 'Critical'
    STATUS_DISCHARGED = 'Discharged'
    STATUS_CHOICES = [
        (STATUS_ADMITTED, 'Admitted'),
        (STATUS_STABLE, 'Stable'),
        (STATUS_CRITICAL, 'Critical'),
        (STATUS_DISCHARGED, 'Discharged'),
    ]
    GENDER_CHOICES = [('Male', 'Male'), ('Female', 'Female'), ('Other', 'Other')]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    full_name = models.CharField(max_length=255)
    age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    email = models.CharField(max_length=254, blank=True)
    address = models.TextField(blank=True)
    emergency_contact = models.CharField(max_length=255, blank=True)
    emergency_phone = models.CharField(max_length=32, blank=True)
    blood_type = models.CharField(max_length=8, blank=True)
    allergies = models.JSONField(default=list, blank=True)
    admission_date = models.DateField(null=True, blank=True)
    discharge_date = models.DateField(null=True, blank=True)
    # Filtered on by every patient list; index it
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_ADMITTED, db_index=True)
    assigned_doctor_id = models.CharField(max_length=64, blank=True)
    assigned_room_id = models.CharField(max_length=64, blank=True)
    insurance_info = models.TextField(blank=True)
    medical_history = models.TextField(blank=True)
    current_diagnosis = models.TextField(blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'patients'

    def __str__(self) -> str:
        return f"{self.full_name} ({self.status})"


class Doctor(models.Model):
    """A member of the medical staff with a weekly schedule.

    ``schedule`` maps a lower-case day name to
    ``{"start": "09:00", "end": "17:00", "available": true}``.
    """
    STATUS_CHOICES = [
        ('Active', 'Active'),
        ('On Leave', 'On Leave'),
        ('Inactive', 'Inactive'),
    ]
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    full_name = models.CharField(max_length=255)
    specialization = models.CharField(max_length=128, blank=True)
    qualification = models.CharField(max_length=255, blank=True)
    experience = models.PositiveIntegerField(default=0)
    phone = models.CharField(max_length=32, blank=True)
    email = models.CharField(max_length=254, blank=True)
    department = models.CharField(max_length=128, blank=True, db_index=True)
    schedule = models.JSONField(default=dict, blank=True)
    consultation_fee = models.FloatField(default=0)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='Active')
    max_patients_per_day = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'doctors'

    def __str__(self) -> str:
        return f"{self.full_name} ({self.specialization})"


class Invoice(models.Model):
    """A patient bill.

    ``items`` is an ordered list of
    ``{description, category, quantity, unitPrice, total}`` objects.  The
    money columns are recomputed from the items on every write (see
    :mod:`frontdesk.services.billing`); the database does not check them.
    """
    STATUS_CHOICES = [
        ('Pending', 'Pending'),
        ('Paid', 'Paid'),
        ('Overdue', 'Overdue'),
        ('Cancelled', 'Cancelled'),
    ]
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.CharField(max_length=64, db_index=True)
    invoice_number = models.CharField(max_length=32, db_index=True)
    issue_date = models.DateField(null=True, blank=True)
    due_date = models.DateField(null=True, blank=True)
    items = models.JSONField(default=list, blank=True)
    subtotal = models.FloatField(default=0)
    tax = models.FloatField(default=0)
    discount = models.FloatField(default=0)
    total = models.FloatField(default=0)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='Pending', db_index=True)
    payment_method = models.CharField(max_length=64, blank=True)
    payment_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'invoices'

    def __str__(self) -> str:
        return f"{self.invoice_number} ({self.status})"


class Room(models.Model):
    """A ward room and its beds.

    ``assigned_patients`` is maintained by hand and is not tied to
    ``Patient.assigned_room_id``.
    """
    TYPE_CHOICES = [
        ('General', 'General'),
        ('ICU', 'ICU'),
        ('Private', 'Private'),
        ('Semi-Private', 'Semi-Private'),
        ('Emergency', 'Emergency'),
        ('Surgery', 'Surgery'),
    ]
    STATUS_CHOICES = [
        ('Available', 'Available'),
        ('Occupied', 'Occupied'),
        ('Maintenance', 'Maintenance'),
        ('Reserved', 'Reserved'),
    ]
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    room_number = models.CharField(max_length=32)
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, blank=True)
    floor = models.IntegerField(null=True, blank=True)
    capacity = models.PositiveIntegerField(default=1)
    current_occupancy = models.PositiveIntegerField(default=0)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='Available', db_index=True)
    daily_rate = models.FloatField(default=0)
    amenities = models.JSONField(default=list, blank=True)
    assigned_patients = models.JSONField(default=list, blank=True)
    last_cleaned = models.DateTimeField(null=True, blank=True)
    equipment = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'rooms'

    def __str__(self) -> str:
        return f"Room {self.room_number} ({self.status})"


class MedicalRecord(models.Model):
    """A visit note for a patient.

    ``face_sheet_snapshot`` is a copy of the patient row taken when the
    record is created and never synchronised afterwards.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.CharField(max_length=64, db_index=True)
    doctor_id = models.CharField(max_length=64, db_index=True)
    visit_date = models.DateField(null=True, blank=True)
    chief_complaint = models.TextField(blank=True)
    diagnosis = models.TextField(blank=True)
    treatment = models.TextField(blank=True)
    medications = models.JSONField(default=list, blank=True)
    vital_signs = models.JSONField(default=dict, blank=True)
    lab_results = models.JSONField(default=list, blank=True)
    notes = models.TextField(blank=True)
    follow_up_date = models.DateField(null=True, blank=True)
    face_sheet_snapshot = models.JSONField(null=True, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'medical_records'

    def __str__(self) -> str:
        return f"Record {self.id} for {self.patient_id}"


class Appointment(models.Model):
    TYPE_CHOICES = [
        ('Consultation', 'Consultation'),
        ('Follow-up', 'Follow-up'),
        ('Emergency', 'Emergency'),
        ('Surgery', 'Surgery'),
    ]
    STATUS_CHOICES = [
        ('Scheduled', 'Scheduled'),
        ('Completed', 'Completed'),
        ('Cancelled', 'Cancelled'),
        ('No Show', 'No Show'),
    ]
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_id = models.CharField(max_length=64, db_index=True)
    doctor_id = models.CharField(max_length=64, db_index=True)
    appointment_date = models.DateField(null=True, blank=True)
    appointment_time = models.CharField(max_length=16, blank=True)
    duration = models.PositiveIntegerField(default=30)
    type = models.CharField(max_length=16, choices=TYPE_CHOICES, blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default='Scheduled', db_index=True)
    notes = models.TextField(blank=True)
    fee = models.FloatField(default=0)
    room_id = models.CharField(max_length=64, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'appointments'

    def __str__(self) -> str:
        return f"Appointment {self.appointment_date} {self.appointment_time} ({self.status})"


class FaceSheet(models.Model):
    """IPD case paper: admission paperwork kept as its own document.

    Independent of :class:`Patient` once created.
    """
    DISCHARGE_CHOICES = [
        ('Normal Discharge', 'Normal Discharge'),
        ('Against Medical Advice', 'Against Medical Advice'),
        ('Discharged On Requested', 'Discharged On Requested'),
        ('Absconded/Died', 'Absconded/Died'),
    ]
    SEX_CHOICES = [('M', 'M'), ('F', 'F')]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    patient_name = models.CharField(max_length=255)
    age = models.PositiveIntegerField(null=True, blank=True)
    sex = models.CharField(max_length=1, choices=SEX_CHOICES, blank=True)
    prn_no = models.CharField(max_length=32, db_index=True)
    ipd_no = models.CharField(max_length=32, db_index=True)
    patient_category = models.CharField(max_length=64, default='CASH')
    patient_sub_category = models.CharField(max_length=64, blank=True)
    date_of_admission = models.DateField(null=True, blank=True)
    time = models.CharField(max_length=16, blank=True)
    consultant_doctor = models.CharField(max_length=255, blank=True)
    ref_by_doctor = models.CharField(max_length=255, blank=True)
    patient_address = models.TextField(blank=True)
    ward_name = models.CharField(max_length=64, blank=True)
    bed_no = models.CharField(max_length=32, blank=True)
    id_proof_taken = models.CharField(max_length=128, blank=True)
    relative_name = models.CharField(max_length=255, blank=True)
    contact_no = models.CharField(max_length=64, blank=True)
    relative_address = models.TextField(blank=True)
    provisional_diagnosis = models.TextField(blank=True)
    final_diagnosis = models.TextField(blank=True)
    icd_codes = models.CharField(max_length=255, blank=True)
    discharge_date = models.DateField(null=True, blank=True)
    discharge_time = models.CharField(max_length=16, blank=True)
    type_of_discharge = models.CharField(max_length=32, choices=DISCHARGE_CHOICES, default='Normal Discharge')
    discharge_card_prepared_by = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'face_sheets'

    def __str__(self) -> str:
        return f"{self.patient_name} ({self.ipd_no})"
