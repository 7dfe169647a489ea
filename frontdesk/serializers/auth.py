from rest_framework import serializers

from frontdesk.permissions import ROLES
from frontdesk.serializers.common import CleanCharField


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField()

    def validate_username(self, v):
        v = (v or '').strip()
        if not v:
            raise serializers.ValidationError('Username is required')
        return v


class SignupSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    fullName = CleanCharField(max_length=255)
    role = serializers.ChoiceField(choices=ROLES, required=False, default='staff')
    phone = CleanCharField(required=False, allow_blank=True, max_length=32)
    department = CleanCharField(required=False, allow_blank=True, max_length=128)
