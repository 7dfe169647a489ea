from rest_framework import serializers

from frontdesk.models import Appointment
from frontdesk.serializers.common import ListQuerySerializer, PatchMixin


class AppointmentCreateSerializer(serializers.Serializer):
    patientId = serializers.CharField(max_length=64)
    doctorId = serializers.CharField(max_length=64)
    appointmentDate = serializers.DateField()
    appointmentTime = serializers.RegexField(r'^\d{1,2}:\d{2}$', max_length=5)
    duration = serializers.IntegerField(required=False, min_value=5, max_value=480)
    type = serializers.ChoiceField(choices=[c[0] for c in Appointment.TYPE_CHOICES], required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    roomId = serializers.CharField(required=False, allow_blank=True, max_length=64)


class AppointmentUpdateSerializer(PatchMixin, AppointmentCreateSerializer):
    status = serializers.ChoiceField(choices=[c[0] for c in Appointment.STATUS_CHOICES], required=False)


class AppointmentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=['Completed', 'Cancelled', 'No Show'])


class AppointmentListQuerySerializer(ListQuerySerializer):
    date = serializers.DateField(required=False)
