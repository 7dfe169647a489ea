from rest_framework import serializers

from frontdesk.models import Patient
from frontdesk.serializers.common import CleanCharField, ListOrCommaField, ListQuerySerializer, PatchMixin

STATUS_CHOICES = [c[0] for c in Patient.STATUS_CHOICES]
GENDER_CHOICES = [c[0] for c in Patient.GENDER_CHOICES]


class PatientCreateSerializer(serializers.Serializer):
    fullName = CleanCharField(max_length=255)
    age = serializers.IntegerField(min_value=0, max_value=150)
    phone = CleanCharField(max_length=32)
    gender = serializers.ChoiceField(choices=GENDER_CHOICES, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    address = CleanCharField(required=False, allow_blank=True)
    emergencyContact = CleanCharField(required=False, allow_blank=True, max_length=255)
    emergencyPhone = CleanCharField(required=False, allow_blank=True, max_length=32)
    bloodType = serializers.CharField(required=False, allow_blank=True, max_length=8)
    allergies = ListOrCommaField(required=False)
    admissionDate = serializers.DateField(required=False)
    status = serializers.ChoiceField(choices=STATUS_CHOICES, required=False)
    assignedDoctorId = serializers.CharField(required=False, allow_blank=True, max_length=64)
    assignedRoomId = serializers.CharField(required=False, allow_blank=True, max_length=64)
    insuranceInfo = CleanCharField(required=False, allow_blank=True)
    medicalHistory = CleanCharField(required=False, allow_blank=True)
    currentDiagnosis = CleanCharField(required=False, allow_blank=True)


class PatientUpdateSerializer(PatchMixin, PatientCreateSerializer):
    # a discharge date can be corrected but never cleared
    dischargeDate = serializers.DateField(required=False, allow_null=False)


class PatientListQuerySerializer(ListQuerySerializer):
    pass
