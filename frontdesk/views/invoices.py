"""
Billing views.

Totals sent by the client are ignored; the service recomputes them from
the line items.  ``preview`` lets the invoice editor show totals for a
draft without saving it.
"""
from __future__ import annotations

from django.http import HttpResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.invoice import (
    InvoiceCreateSerializer,
    InvoiceListQuerySerializer,
    InvoicePreviewSerializer,
    InvoiceUpdateSerializer,
)
from ..services import billing, filters, tables
from ..services.printing import render_invoice


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def invoices(request):
    if request.method == 'POST':
        s = InvoiceCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': billing.create_invoice(s.validated_data, user=request.user)},
                        status=status.HTTP_201_CREATED)

    q = InvoiceListQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    records = tables.invoices.all()
    data = filters.filter_invoices(
        records,
        tables.name_index(tables.patients.all()),
        q=q.validated_data.get('q'),
        status=q.validated_data.get('status'),
    )
    return Response({'ok': True, 'data': data, 'meta': billing.summary(records)})


@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def invoice_detail(request, pk):
    if request.method == 'PATCH':
        s = InvoiceUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': billing.update_invoice(pk, s.validated_data, user=request.user)})
    return Response({'ok': True, 'data': tables.invoices.get(pk)})


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def invoice_preview(request):
    s = InvoicePreviewSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    v = s.validated_data
    items = v.get('items') or [billing.new_item()]
    if v.get('action') == 'add':
        items = billing.add_item(items)
    elif v.get('action') == 'remove':
        items = billing.remove_item(items, v.get('index', len(items) - 1))
    return Response({'ok': True, 'data': billing.compute_totals(items, v.get('tax'), v.get('discount')),
                     'meta': {'categories': billing.ITEM_CATEGORIES}})


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def invoice_print(request, pk):
    invoice = tables.invoices.get(pk)
    html = render_invoice(invoice, billing.find_patient(invoice))
    return HttpResponse(html, content_type='text/html; charset=utf-8')
