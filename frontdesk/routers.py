"""
URL mappings for the hospital administration API.

Trailing slashes are omitted on API paths.  Every route is named so
tests and the smoke script can reverse them.
"""
from django.urls import path, include

from .auth_views import jwt_refresh_view, login_view, logout_view, session_view, signup_view
from .views import (
    allergies,
    appointments,
    dashboard,
    doctors,
    face_sheets,
    health,
    index,
    invoices,
    medical_records,
    patients,
    reports,
    rooms,
)

urlpatterns = [
    path('', index.index, name='index'),
    path('metrics', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),

    path('api/auth/login', login_view, name='login_view'),
    path('api/auth/signup', signup_view, name='signup_view'),
    path('api/auth/session', session_view, name='session_view'),
    path('api/auth/logout', logout_view, name='logout_view'),
    path('api/auth/refresh', jwt_refresh_view, name='jwt_refresh_view'),

    path('api/patients', patients.patients, name='patients'),
    path('api/patients/names', patients.patient_names, name='patient_names'),
    path('api/patients/<uuid:pk>', patients.patient_detail, name='patient_detail'),
    path('api/patients/<uuid:pk>/discharge', patients.patient_discharge, name='patient_discharge'),

    path('api/doctors', doctors.doctors, name='doctors'),
    path('api/doctors/<uuid:pk>', doctors.doctor_detail, name='doctor_detail'),

    path('api/rooms', rooms.rooms, name='rooms'),
    path('api/rooms/<uuid:pk>', rooms.room_detail, name='room_detail'),
    path('api/rooms/<uuid:pk>/status', rooms.room_status, name='room_status'),
    path('api/rooms/<uuid:pk>/clean', rooms.room_clean, name='room_clean'),

    path('api/appointments', appointments.appointments, name='appointments'),
    path('api/appointments/<uuid:pk>', appointments.appointment_detail, name='appointment_detail'),
    path('api/appointments/<uuid:pk>/status', appointments.appointment_status, name='appointment_status'),

    path('api/medical-records', medical_records.medical_records, name='medical_records'),
    path('api/medical-records/<uuid:pk>', medical_records.medical_record_detail, name='medical_record_detail'),

    path('api/invoices', invoices.invoices, name='invoices'),
    path('api/invoices/preview', invoices.invoice_preview, name='invoice_preview'),
    path('api/invoices/<uuid:pk>', invoices.invoice_detail, name='invoice_detail'),
    path('api/invoices/<uuid:pk>/print', invoices.invoice_print, name='invoice_print'),

    path('api/face-sheets', face_sheets.face_sheets, name='face_sheets'),
    path('api/face-sheets/<uuid:pk>', face_sheets.face_sheet_detail, name='face_sheet_detail'),
    path('api/face-sheets/<uuid:pk>/print', face_sheets.face_sheet_print, name='face_sheet_print'),

    path('api/reports', reports.period_report, name='period_report'),
    path('api/dashboard/stats', dashboard.stats, name='dashboard_stats'),
    path('api/activity', dashboard.activity, name='activity'),
    path('api/allergies/suggest', allergies.allergy_suggestions, name='allergy_suggestions'),
]
