"""
Patient admission views.

Patients are listed from the cached collection, admitted, edited and
discharged.  ``names`` feeds the patient drop-downs of the other
screens.
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.patient import PatientCreateSerializer, PatientListQuerySerializer, PatientUpdateSerializer
from ..services import filters, tables
from ..services.patients import create_patient, discharge_patient, update_patient


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def patients(request):
    if request.method == 'POST':
        s = PatientCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        record = create_patient(s.validated_data, user=request.user)
        return Response({'ok': True, 'data': record}, status=status.HTTP_201_CREATED)

    q = PatientListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    records = tables.patients.all()
    data = filters.filter_patients(records, q.validated_data.get('q'), q.validated_data.get('status'))
    return Response({'ok': True, 'data': data, 'meta': {'total': len(records), 'count': len(data)}})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def patient_detail(request, pk):
    if request.method == 'PATCH':
        s = PatientUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': update_patient(pk, s.validated_data, user=request.user)})
    return Response({'ok': True, 'data': tables.patients.get(pk)})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def patient_discharge(request, pk):
    return Response({'ok': True, 'data': discharge_patient(pk, user=request.user)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def patient_names(request):
    return Response({'ok': True, 'data': tables.patient_names()})
