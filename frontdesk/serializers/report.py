from rest_framework import serializers

from frontdesk.services.reports import GRANULARITIES


class ReportQuerySerializer(serializers.Serializer):
    granularity = serializers.ChoiceField(choices=GRANULARITIES, required=False, default='day')
    selected = serializers.DateField(required=False)


class AllergySuggestQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, max_length=64)
    exclude = serializers.CharField(required=False, allow_blank=True)
