from datetime import date

from frontdesk.services import billing


def test_item_totals_are_recomputed_from_quantity_and_price():
    items = [
        {'description': 'Consult', 'category': 'Consultation', 'quantity': 2, 'unitPrice': 150, 'total': 1},
        {'description': 'X-ray', 'category': 'Radiology', 'quantity': 1, 'unitPrice': 99.99, 'total': 0},
    ]
    result = billing.compute_totals(items, tax=10, discount=5)
    assert [i['total'] for i in result['items']] == [300.0, 99.99]
    assert result['subtotal'] == 399.99
    assert result['total'] == 404.99


def test_total_never_goes_negative():
    result = billing.compute_totals([{'quantity': 1, 'unitPrice': 20}], tax=0, discount=50)
    assert result['subtotal'] == 20.0
    assert result['total'] == 0


def test_empty_items_give_zero_totals():
    result = billing.compute_totals([])
    assert result['subtotal'] == 0
    assert result['total'] == 0


def test_remove_item_keeps_last_line():
    one = [billing.new_item()]
    assert billing.remove_item(one, 0) == one
    two = billing.add_item(one)
    assert len(two) == 2
    assert len(billing.remove_item(two, 1)) == 1
    # out of range index leaves the list alone
    assert len(billing.remove_item(two, 5)) == 2


def test_invoice_number_format():
    number = billing.generate_invoice_number(date(2024, 6, 15))
    prefix, year, seq = number.split('-')
    assert prefix == 'INV' and year == '2024'
    assert len(seq) == 3 and seq.isdigit() and 1 <= int(seq) <= 999


def test_summary_counts_and_amounts():
    records = [
        {'status': 'Paid', 'total': 100},
        {'status': 'Pending', 'total': 40},
        {'status': 'Overdue', 'total': 10},
        {'status': 'Cancelled', 'total': 999},
    ]
    s = billing.summary(records)
    assert s['paid'] == 1 and s['pending'] == 1 and s['overdue'] == 1 and s['cancelled'] == 1
    assert s['outstandingAmount'] == 50.0
    assert s['paidAmount'] == 100.0
