"""
Landing route and the JSON not-found handler.
"""
from django.http import JsonResponse
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from ..permissions import ReadOnly

MODULES = [
    {'id': 'dashboard', 'name': 'Dashboard', 'description': 'Hospital statistics and recent activity', 'endpoint': '/api/dashboard/stats'},
    {'id': 'patients', 'name': 'Patients', 'description': 'Admissions, edits and discharges', 'endpoint': '/api/patients'},
    {'id': 'doctors', 'name': 'Doctors', 'description': 'Medical staff and weekly schedules', 'endpoint': '/api/doctors'},
    {'id': 'rooms', 'name': 'Rooms', 'description': 'Wards, beds and cleaning', 'endpoint': '/api/rooms'},
    {'id': 'appointments', 'name': 'Appointments', 'description': 'Scheduling and visit status', 'endpoint': '/api/appointments'},
    {'id': 'records', 'name': 'Medical Records', 'description': 'Visit notes, vitals and lab results', 'endpoint': '/api/medical-records'},
    {'id': 'billing', 'name': 'Billing', 'description': 'Invoices and payments', 'endpoint': '/api/invoices'},
    {'id': 'face-sheet', 'name': 'Face Sheet', 'description': 'IPD case papers', 'endpoint': '/api/face-sheets'},
    {'id': 'reports', 'name': 'Reports', 'description': 'Revenue and patient counts by period', 'endpoint': '/api/reports'},
]


@api_view(['GET'])
@permission_classes([ReadOnly])
def index(request):
    return Response({'ok': True, 'data': MODULES})


def not_found(request, exception=None):
    return JsonResponse(
        {'ok': False, 'error': {'code': 'not_found', 'message': f'No route for {request.path}'}},
        status=404,
    )
