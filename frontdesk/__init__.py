"""Front desk application for the hospital administration backend.

This package contains models, serializers, services, views and route
registrations for admissions, doctors, rooms, appointments, medical
records, billing, face sheets and reporting.
"""
