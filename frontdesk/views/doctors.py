from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.doctor import DoctorCreateSerializer, DoctorListQuerySerializer, DoctorUpdateSerializer
from ..services import filters, tables
from ..services.doctors import create_doctor, update_doctor


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def doctors(request):
    """List doctors (search by name or specialization) or add one."""
    if request.method == 'POST':
        s = DoctorCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': create_doctor(s.validated_data, user=request.user)},
                        status=status.HTTP_201_CREATED)

    q = DoctorListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    v = q.validated_data
    records = tables.doctors.all()
    data = filters.filter_doctors(records, v.get('q'), v.get('department'), v.get('status'))
    departments = sorted({r['department'] for r in records if r['department']})
    return Response({'ok': True, 'data': data, 'meta': {'total': len(records), 'count': len(data), 'departments': departments}})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def doctor_detail(request, pk):
    if request.method == 'PATCH':
        s = DoctorUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': update_doctor(pk, s.validated_data, user=request.user)})
    return Response({'ok': True, 'data': tables.doctors.get(pk)})
