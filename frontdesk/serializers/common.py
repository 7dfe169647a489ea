import bleach
from rest_framework import serializers


class CleanCharField(serializers.CharField):
    """CharField that strips markup from free text."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, strip=True).strip()


class ListOrCommaField(serializers.Field):
    """A list of strings, also accepted as one comma separated string."""
    default_error_messages = {
        'invalid': 'Expected a list or a comma separated string.',
    }

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.split(',')
        if not isinstance(data, (list, tuple)):
            self.fail('invalid')
        items = [bleach.clean(str(v), strip=True).strip() for v in data]
        return [v for v in items if v]

    def to_representation(self, value):
        return list(value or [])


class PatchMixin:
    """Partial update: only the keys sent are validated and returned."""

    def __init__(self, *args, **kwargs):
        kwargs['partial'] = True
        super().__init__(*args, **kwargs)


class ListQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, max_length=128)
    status = serializers.CharField(required=False, allow_blank=True, max_length=32)
