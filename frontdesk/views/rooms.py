from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.room import RoomCreateSerializer, RoomListQuerySerializer, RoomStatusSerializer, RoomUpdateSerializer
from ..services import filters, rooms as room_service, tables


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def rooms(request):
    if request.method == 'POST':
        s = RoomCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': room_service.create_room(s.validated_data, user=request.user)},
                        status=status.HTTP_201_CREATED)

    q = RoomListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    v = q.validated_data
    records = tables.rooms.all()
    data = filters.filter_rooms(records, v.get('q'), v.get('type'), v.get('status'))
    return Response({'ok': True, 'data': data, 'meta': room_service.summary(records)})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def room_detail(request, pk):
    if request.method == 'PATCH':
        s = RoomUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': room_service.update_room(pk, s.validated_data, user=request.user)})
    return Response({'ok': True, 'data': tables.rooms.get(pk)})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def room_status(request, pk):
    s = RoomStatusSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    return Response({'ok': True, 'data': room_service.set_room_status(pk, s.validated_data['status'], user=request.user)})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def room_clean(request, pk):
    """Stamp ``lastCleaned`` with the current time."""
    return Response({'ok': True, 'data': room_service.record_cleaning(pk, user=request.user)})
