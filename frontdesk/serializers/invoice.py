from rest_framework import serializers

from frontdesk.models import Invoice
from frontdesk.serializers.common import ListQuerySerializer, PatchMixin
from frontdesk.services.billing import ITEM_CATEGORIES


class InvoiceItemSerializer(serializers.Serializer):
    description = serializers.CharField(required=False, allow_blank=True, max_length=255)
    category = serializers.ChoiceField(choices=ITEM_CATEGORIES, required=False)
    quantity = serializers.IntegerField(required=False, min_value=0)
    unitPrice = serializers.FloatField(required=False, min_value=0)
    # recomputed server-side
    total = serializers.FloatField(required=False)


class InvoiceCreateSerializer(serializers.Serializer):
    patientId = serializers.CharField(max_length=64)
    issueDate = serializers.DateField()
    dueDate = serializers.DateField()
    items = serializers.ListField(child=InvoiceItemSerializer(), min_length=1)
    invoiceNumber = serializers.CharField(required=False, allow_blank=True, max_length=32)
    tax = serializers.FloatField(required=False, min_value=0)
    discount = serializers.FloatField(required=False, min_value=0)
    status = serializers.ChoiceField(choices=[c[0] for c in Invoice.STATUS_CHOICES], required=False)
    paymentMethod = serializers.CharField(required=False, allow_blank=True, max_length=64)
    paymentDate = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True)


class InvoiceUpdateSerializer(PatchMixin, InvoiceCreateSerializer):
    pass


class InvoicePreviewSerializer(serializers.Serializer):
    """Draft totals, optionally after adding or removing a line."""
    items = serializers.ListField(child=InvoiceItemSerializer(), required=False)
    tax = serializers.FloatField(required=False, min_value=0)
    discount = serializers.FloatField(required=False, min_value=0)
    action = serializers.ChoiceField(choices=['add', 'remove'], required=False)
    index = serializers.IntegerField(required=False, min_value=0)


class InvoiceListQuerySerializer(ListQuerySerializer):
    pass
