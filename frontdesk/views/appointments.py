from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.appointment import (
    AppointmentCreateSerializer,
    AppointmentListQuerySerializer,
    AppointmentStatusSerializer,
    AppointmentUpdateSerializer,
)
from ..services import appointments as appointment_service, filters, tables


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def appointments(request):
    if request.method == 'POST':
        s = AppointmentCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        record = appointment_service.create_appointment(s.validated_data, user=request.user)
        return Response({'ok': True, 'data': record}, status=status.HTTP_201_CREATED)

    q = AppointmentListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    v = q.validated_data
    records = tables.appointments.all()
    selected_date = v.get('date')
    data = filters.filter_appointments(
        records,
        tables.name_index(tables.patients.all()),
        tables.name_index(tables.doctors.all()),
        q=v.get('q'),
        status=v.get('status'),
        date=selected_date.isoformat() if selected_date else None,
    )
    return Response({'ok': True, 'data': data,
                     'meta': appointment_service.summary(records, timezone.localdate())})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def appointment_detail(request, pk):
    if request.method == 'PATCH':
        s = AppointmentUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        record = appointment_service.update_appointment(pk, s.validated_data, user=request.user)
        return Response({'ok': True, 'data': record})
    return Response({'ok': True, 'data': tables.appointments.get(pk)})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def appointment_status(request, pk):
    s = AppointmentStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    record = appointment_service.set_appointment_status(pk, s.validated_data['status'], user=request.user)
    return Response({'ok': True, 'data': record})
