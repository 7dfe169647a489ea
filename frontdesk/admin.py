"""
Django admin registrations for the front desk models.

Superusers can inspect and correct rows at ``/admin/``.  Edits made
here bypass the API, so cached collections only pick them up when the
table cache expires.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import Appointment, Doctor, FaceSheet, Invoice, MedicalRecord, Patient, Room, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ('username', 'email', 'full_name', 'role', 'is_active', 'is_staff')
    list_filter = ('role', 'is_active', 'is_staff')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Hospital', {'fields': ('full_name', 'role', 'phone', 'department', 'permissions')}),
    )


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'age', 'phone', 'status', 'admission_date', 'discharge_date')
    list_filter = ('status', 'gender')
    search_fields = ('full_name', 'phone', 'email')


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('full_name', 'specialization', 'department', 'status', 'consultation_fee')
    list_filter = ('department', 'status')
    search_fields = ('full_name', 'specialization')


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ('room_number', 'type', 'floor', 'capacity', 'current_occupancy', 'status')
    list_filter = ('type', 'status')
    search_fields = ('room_number',)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('appointment_date', 'appointment_time', 'patient_id', 'doctor_id', 'status', 'fee')
    list_filter = ('status', 'type')


@admin.register(MedicalRecord)
class MedicalRecordAdmin(admin.ModelAdmin):
    list_display = ('visit_date', 'patient_id', 'doctor_id', 'diagnosis')
    search_fields = ('diagnosis', 'chief_complaint')


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ('invoice_number', 'patient_id', 'issue_date', 'total', 'status')
    list_filter = ('status',)
    search_fields = ('invoice_number',)


@admin.register(FaceSheet)
class FaceSheetAdmin(admin.ModelAdmin):
    list_display = ('patient_name', 'prn_no', 'ipd_no', 'date_of_admission', 'type_of_discharge')
    search_fields = ('patient_name', 'prn_no', 'ipd_no')
