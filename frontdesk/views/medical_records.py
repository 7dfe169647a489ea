from django.utils import timezone
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.common import ListQuerySerializer
from ..serializers.medical_record import MedicalRecordCreateSerializer
from ..services import filters, medical_records as record_service, tables


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def medical_records(request):
    if request.method == 'POST':
        s = MedicalRecordCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        record = record_service.create_medical_record(s.validated_data, user=request.user)
        return Response({'ok': True, 'data': record}, status=status.HTTP_201_CREATED)

    q = ListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    records = tables.medical_records.all()
    data = filters.filter_medical_records(
        records,
        tables.name_index(tables.patients.all()),
        tables.name_index(tables.doctors.all()),
        q=q.validated_data.get('q'),
    )
    return Response({'ok': True, 'data': data, 'meta': record_service.summary(records, timezone.localdate())})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def medical_record_detail(request, pk):
    record = tables.medical_records.get(pk)
    return Response({
        'ok': True,
        'data': record,
        'meta': {
            'patient': tables.patients.find(record['patientId']),
            'doctor': tables.doctors.find(record['doctorId']),
        },
    })
