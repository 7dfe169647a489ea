"""
Invoice arithmetic and invoice mutations.

Totals are never trusted from the client: every create, update and
preview recomputes ``item.total = quantity * unitPrice``,
``subtotal = sum(item.total)`` and
``total = max(subtotal + tax - discount, 0)``.
"""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional

from django.utils import timezone

from frontdesk.services import tables
from frontdesk.services.activity import log_activity

logger = logging.getLogger(__name__)

ITEM_CATEGORIES = [
    'Consultation',
    'Medication',
    'Lab Test',
    'Room Charge',
    'Procedure',
    'Laboratory',
    'Radiology',
    'Surgery',
    'Room Charges',
    'Equipment',
    'Other',
]

INVOICE_STATUSES = ('Pending', 'Paid', 'Overdue', 'Cancelled')


def _money(value) -> float:
    return round(float(value or 0), 2)


def new_item() -> Dict[str, Any]:
    return {'description': '', 'category': 'Consultation', 'quantity': 1, 'unitPrice': 0, 'total': 0}


def normalise_items(items: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    result = []
    for item in items:
        quantity = item.get('quantity') or 0
        unit_price = _money(item.get('unitPrice'))
        result.append({
            'description': item.get('description', ''),
            'category': item.get('category') or 'Other',
            'quantity': quantity,
            'unitPrice': unit_price,
            'total': _money(quantity * unit_price),
        })
    return result


def compute_totals(items, tax=0, discount=0) -> Dict[str, Any]:
    items = normalise_items(items)
    subtotal = _money(sum(item['total'] for item in items))
    tax = _money(tax)
    discount = _money(discount)
    return {
        'items': items,
        'subtotal': subtotal,
        'tax': tax,
        'discount': discount,
        'total': max(_money(subtotal + tax - discount), 0),
    }


def add_item(items) -> List[Dict[str, Any]]:
    return [*items, new_item()]


def remove_item(items, index: int) -> List[Dict[str, Any]]:
    """Drop one line; an invoice always keeps at least one."""
    items = list(items)
    if len(items) <= 1 or not 0 <= index < len(items):
        return items
    del items[index]
    return items


def generate_invoice_number(today=None) -> str:
    year = (today or timezone.localdate()).year
    return f"INV-{year}-{random.randint(1, 999):03d}"


def create_invoice(data: dict, user=None) -> dict:
    data = dict(data)
    if not data.get('invoiceNumber'):
        data['invoiceNumber'] = generate_invoice_number()
    data.setdefault('status', 'Pending')
    data.update(compute_totals(data['items'], data.get('tax'), data.get('discount')))
    record = tables.invoices.add(data)
    log_activity(f"Created invoice {record['invoiceNumber']}", user=user)
    return record


def update_invoice(pk, data: dict, user=None) -> dict:
    data = {k: v for k, v in data.items() if k not in ('subtotal', 'total')}
    if {'items', 'tax', 'discount'} & data.keys():
        current = tables.invoices.get(pk)
        data.update(compute_totals(
            data.get('items', current['items']),
            data.get('tax', current['tax']),
            data.get('discount', current['discount']),
        ))
    record = tables.invoices.update(pk, data)
    log_activity(f"Updated invoice {record['invoiceNumber']}", user=user)
    return record


def summary(records) -> Dict[str, Any]:
    counts = {status.lower(): 0 for status in INVOICE_STATUSES}
    outstanding = paid = 0.0
    for r in records:
        key = (r['status'] or '').lower()
        if key in counts:
            counts[key] += 1
        if r['status'] in ('Pending', 'Overdue'):
            outstanding += r['total'] or 0
        elif r['status'] == 'Paid':
            paid += r['total'] or 0
    return {**counts, 'total': len(records), 'outstandingAmount': _money(outstanding), 'paidAmount': _money(paid)}


def find_patient(invoice: dict) -> Optional[dict]:
    return tables.patients.find(invoice['patientId'])
