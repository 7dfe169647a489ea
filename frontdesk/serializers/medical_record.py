from rest_framework import serializers


class VitalSignsSerializer(serializers.Serializer):
    temperature = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    bloodPressure = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    heartRate = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    respiratoryRate = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    oxygenSaturation = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LabResultSerializer(serializers.Serializer):
    testName = serializers.CharField(max_length=128)
    result = serializers.CharField(allow_blank=True)
    normalRange = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=['Normal', 'Abnormal', 'Critical'], required=False)


class MedicalRecordCreateSerializer(serializers.Serializer):
    patientId = serializers.CharField(max_length=64)
    doctorId = serializers.CharField(max_length=64)
    chiefComplaint = serializers.CharField()
    visitDate = serializers.DateField(required=False)
    diagnosis = serializers.CharField(required=False, allow_blank=True)
    treatment = serializers.CharField(required=False, allow_blank=True)
    medications = serializers.ListField(child=serializers.CharField(), required=False)
    vitalSigns = VitalSignsSerializer(required=False)
    labResults = serializers.ListField(child=LabResultSerializer(), required=False)
    notes = serializers.CharField(required=False, allow_blank=True)
    followUpDate = serializers.DateField(required=False, allow_null=True)
