"""
Printable HTML for invoices and IPD case papers.

The documents are presentation only.  Each page opens the browser print
dialog on load.
"""
from django.conf import settings
from django.template.loader import render_to_string

from frontdesk.services.reports import to_local_date


def letterhead() -> dict:
    return {
        'name': settings.HMS_HOSPITAL_NAME,
        'address': settings.HMS_HOSPITAL_ADDRESS,
        'phone': settings.HMS_HOSPITAL_PHONE,
        'currency': settings.HMS_CURRENCY_SYMBOL,
    }


def render_invoice(invoice: dict, patient=None) -> str:
    return render_to_string('frontdesk/print/invoice.html', {
        'hospital': letterhead(),
        'invoice': invoice,
        'patient': patient,
        'issue_date': to_local_date(invoice.get('issueDate')),
        'due_date': to_local_date(invoice.get('dueDate')),
    })


def render_face_sheet(sheet: dict) -> str:
    return render_to_string('frontdesk/print/face_sheet.html', {
        'hospital': letterhead(),
        'sheet': sheet,
        'admission_date': to_local_date(sheet.get('dateOfAdmission')),
        'discharge_date': to_local_date(sheet.get('dischargeDate')),
        'discharge_types': ['Normal Discharge', 'Against Medical Advice', 'Discharged On Requested', 'Absconded/Died'],
    })
