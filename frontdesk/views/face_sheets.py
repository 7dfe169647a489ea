from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.common import ListQuerySerializer
from ..serializers.face_sheet import FaceSheetCreateSerializer
from ..services import filters, tables
from ..services.face_sheets import create_face_sheet, delete_face_sheet
from ..services.printing import render_face_sheet


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def face_sheets(request):
    if request.method == 'POST':
        s = FaceSheetCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': create_face_sheet(s.validated_data, user=request.user)},
                        status=status.HTTP_201_CREATED)

    q = ListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    records = tables.face_sheets.all()
    data = filters.filter_face_sheets(records, q.validated_data.get('q'))
    return Response({'ok': True, 'data': data, 'meta': {'total': len(records), 'count': len(data)}})


@api_view(['GET', 'DELETE'])
@permission_classes([IsAuthenticated])
def face_sheet_detail(request, pk):
    if request.method == 'DELETE':
        delete_face_sheet(pk, user=request.user)
        return Response({'ok': True})
    return Response({'ok': True, 'data': tables.face_sheets.get(pk)})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def face_sheet_print(request, pk):
    """IPD case paper as a printable HTML page."""
    html = render_face_sheet(tables.face_sheets.get(pk))
    return HttpResponse(html, content_type='text/html; charset=utf-8')
