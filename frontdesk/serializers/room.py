from rest_framework import serializers

from frontdesk.models import Room
from frontdesk.serializers.common import ListOrCommaField, ListQuerySerializer, PatchMixin

ROOM_TYPES = [c[0] for c in Room.TYPE_CHOICES]
ROOM_STATUSES = [c[0] for c in Room.STATUS_CHOICES]


class RoomCreateSerializer(serializers.Serializer):
    roomNumber = serializers.CharField(max_length=32)
    type = serializers.ChoiceField(choices=ROOM_TYPES)
    floor = serializers.IntegerField()
    capacity = serializers.IntegerField(required=False, min_value=1)
    currentOccupancy = serializers.IntegerField(required=False, min_value=0)
    status = serializers.ChoiceField(choices=ROOM_STATUSES, required=False)
    dailyRate = serializers.FloatField(required=False, min_value=0)
    amenities = ListOrCommaField(required=False)
    equipment = ListOrCommaField(required=False)
    assignedPatients = serializers.ListField(child=serializers.CharField(max_length=64), required=False)


class RoomUpdateSerializer(PatchMixin, RoomCreateSerializer):
    lastCleaned = serializers.DateTimeField(required=False)


class RoomStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ROOM_STATUSES)


class RoomListQuerySerializer(ListQuerySerializer):
    type = serializers.CharField(required=False, allow_blank=True, max_length=20)
