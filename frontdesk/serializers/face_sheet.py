from rest_framework import serializers

from frontdesk.models import FaceSheet
from frontdesk.serializers.common import CleanCharField


class FaceSheetCreateSerializer(serializers.Serializer):
    patientName = CleanCharField(max_length=255)
    age = serializers.IntegerField(min_value=0, max_value=150)
    contactNo = CleanCharField(max_length=64)
    sex = serializers.ChoiceField(choices=[c[0] for c in FaceSheet.SEX_CHOICES], required=False, allow_blank=True)
    prnNo = serializers.CharField(required=False, allow_blank=True, max_length=32)
    ipdNo = serializers.CharField(required=False, allow_blank=True, max_length=32)
    patientCategory = serializers.CharField(required=False, allow_blank=True, max_length=64)
    patientSubCategory = serializers.CharField(required=False, allow_blank=True, max_length=64)
    dateOfAdmission = serializers.DateField(required=False)
    time = serializers.CharField(required=False, allow_blank=True, max_length=16)
    consultantDoctor = CleanCharField(required=False, allow_blank=True, max_length=255)
    refByDoctor = CleanCharField(required=False, allow_blank=True, max_length=255)
    patientAddress = CleanCharField(required=False, allow_blank=True)
    wardName = serializers.CharField(required=False, allow_blank=True, max_length=64)
    bedNo = serializers.CharField(required=False, allow_blank=True, max_length=32)
    idProofTaken = serializers.CharField(required=False, allow_blank=True, max_length=128)
    relativeName = CleanCharField(required=False, allow_blank=True, max_length=255)
    relativeAddress = CleanCharField(required=False, allow_blank=True)
    provisionalDiagnosis = CleanCharField(required=False, allow_blank=True)
    finalDiagnosis = CleanCharField(required=False, allow_blank=True)
    icdCodes = serializers.CharField(required=False, allow_blank=True, max_length=255)
    dischargeDate = serializers.DateField(required=False, allow_null=True)
    dischargeTime = serializers.CharField(required=False, allow_blank=True, max_length=16)
    typeOfDischarge = serializers.ChoiceField(choices=[c[0] for c in FaceSheet.DISCHARGE_CHOICES], required=False)
    dischargeCardPreparedBy = CleanCharField(required=False, allow_blank=True, max_length=255)
