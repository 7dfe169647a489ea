from rest_framework import serializers

from frontdesk.models import Doctor
from frontdesk.serializers.common import CleanCharField, ListQuerySerializer, PatchMixin


class DayScheduleSerializer(serializers.Serializer):
    start = serializers.CharField(allow_blank=True, max_length=5)
    end = serializers.CharField(allow_blank=True, max_length=5)
    available = serializers.BooleanField()


class DoctorCreateSerializer(serializers.Serializer):
    fullName = CleanCharField(max_length=255)
    specialization = CleanCharField(max_length=128)
    phone = CleanCharField(max_length=32)
    qualification = CleanCharField(required=False, allow_blank=True, max_length=255)
    experience = serializers.IntegerField(required=False, min_value=0)
    email = serializers.EmailField(required=False, allow_blank=True)
    department = CleanCharField(required=False, allow_blank=True, max_length=128)
    schedule = serializers.DictField(child=DayScheduleSerializer(), required=False)
    consultationFee = serializers.FloatField(required=False, min_value=0)
    status = serializers.ChoiceField(choices=[c[0] for c in Doctor.STATUS_CHOICES], required=False)
    maxPatientsPerDay = serializers.IntegerField(required=False, min_value=0)


class DoctorUpdateSerializer(PatchMixin, DoctorCreateSerializer):
    pass


class DoctorListQuerySerializer(ListQuerySerializer):
    department = serializers.CharField(required=False, allow_blank=True, max_length=128)
