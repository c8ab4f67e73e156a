"""
Demo records for every registered entity list.

Records mirror the JSON the backend returns (camelCase keys, nested
counterparty objects) so the demo service exercises the same search
paths and columns as the REST service.
"""

from datetime import date, timedelta

from backoffice_ui.models.records import Record

_VENDORS = [
    {"_id": "v-1", "vendor_name": "Acme Supplies", "phone": "555-0101"},
    {"_id": "v-2", "vendor_name": "Northwind Traders", "phone": "555-0102"},
    {"_id": "v-3", "vendor_name": "Globex Hardware", "phone": "555-0103"},
    {"_id": "v-4", "vendor_name": "Initech Parts", "phone": "555-0104"},
]

_CUSTOMERS = [
    {"_id": "c-1", "name": "Contoso Retail", "phone": "555-0201"},
    {"_id": "c-2", "name": "Acme Stores", "phone": "555-0202"},
    {"_id": "c-3", "name": "Fabrikam Ltd", "phone": "555-0203"},
    {"_id": "c-4", "name": "Wayne Enterprises", "phone": "555-0204"},
]

_START = date(2025, 1, 6)


def _day(index: int) -> str:
    return (_START + timedelta(days=index * 3)).isoformat()


def _amount(index: int) -> float:
    return round(250 + index * 137.5, 2)


def _purchase_orders() -> list[Record]:
    statuses = ["NEW", "PENDING", "COMPLETED", "CANCELLED"]
    return [
        {
            "_id": f"po-{i}",
            "purchaseOrderId": f"PO-{1000 + i}",
            "vendorInfo": dict(_VENDORS[i % len(_VENDORS)]),
            "purchaseOrderDate": _day(i),
            "dueDate": _day(i + 10),
            "referenceNo": f"REF-{300 + i}",
            "TotalAmount": _amount(i),
            "status": statuses[i % len(statuses)],
            "notes": "Urgent restock" if i % 5 == 0 else "",
        }
        for i in range(1, 13)
    ]


def _purchases() -> list[Record]:
    return [
        {
            "_id": f"pu-{i}",
            "purchaseId": f"PUR-{2000 + i}",
            "vendorInfo": dict(_VENDORS[(i + 1) % len(_VENDORS)]),
            "supplierInvoiceSerialNumber": f"SUP-{i:04d}",
            "purchaseDate": _day(i),
            "TotalAmount": _amount(i + 2),
            "status": "PAID" if i % 3 == 0 else "UNPAID",
            "notes": "Received damaged" if i % 4 == 0 else "",
        }
        for i in range(1, 11)
    ]


def _expenses() -> list[Record]:
    modes = ["Cash", "Card", "Bank Transfer"]
    return [
        {
            "_id": f"ex-{i}",
            "expenseId": f"EXP-{i:04d}",
            "reference": f"Office {('rent', 'supplies', 'travel')[i % 3]}",
            "amount": _amount(i),
            "paymentMode": modes[i % len(modes)],
            "expenseDate": _day(i),
            "status": "PAID" if i % 2 else "PENDING",
            "description": f"Monthly expense #{i}",
        }
        for i in range(1, 11)
    ]


def _delivery_challans() -> list[Record]:
    statuses = ["ACTIVE", "CONVERTED", "CANCELLED"]
    return [
        {
            "_id": f"dc-{i}",
            "deliveryChallanNumber": f"DC-{500 + i}",
            "customerId": dict(_CUSTOMERS[i % len(_CUSTOMERS)]),
            "deliveryChallanDate": _day(i),
            "TotalAmount": _amount(i + 1),
            "status": statuses[i % len(statuses)],
            "notes": "",
        }
        for i in range(1, 11)
    ]


def _quotations() -> list[Record]:
    statuses = ["OPEN", "SENT", "ACCEPTED", "EXPIRED"]
    return [
        {
            "_id": f"qt-{i}",
            "quotation_id": f"QUO-{700 + i}",
            "customerId": dict(_CUSTOMERS[(i + 2) % len(_CUSTOMERS)]),
            "quotation_date": _day(i),
            "expiry_date": _day(i + 15),
            "TotalAmount": _amount(i + 3),
            "status": statuses[i % len(statuses)],
            "notes": "Includes installation" if i % 3 == 0 else "",
        }
        for i in range(1, 11)
    ]


def _invoices() -> list[Record]:
    statuses = ["DRAFTED", "SENT", "PARTIALLY_PAID", "PAID", "OVERDUE"]
    return [
        {
            "_id": f"in-{i}",
            "invoiceNumber": f"INV-{9000 + i}",
            "customerId": dict(_CUSTOMERS[i % len(_CUSTOMERS)]),
            "invoiceDate": _day(i),
            "dueDate": _day(i + 30),
            "TotalAmount": _amount(i + 4),
            "paidAmount": 0.0 if i % 2 else _amount(i + 4),
            "status": statuses[i % len(statuses)],
            "notes": "",
        }
        for i in range(1, 13)
    ]


def _sales_returns() -> list[Record]:
    return [
        {
            "_id": f"sr-{i}",
            "credit_note_id": f"CN-{i:04d}",
            "customerInfo": dict(_CUSTOMERS[(i + 1) % len(_CUSTOMERS)]),
            "credit_note_date": _day(i),
            "TotalAmount": _amount(i),
            "status": "REFUNDED" if i % 2 else "PENDING",
        }
        for i in range(1, 7)
    ]


def _debit_notes() -> list[Record]:
    return [
        {
            "_id": f"dn-{i}",
            "debit_note_id": f"DN-{i:04d}",
            "vendorInfo": dict(_VENDORS[i % len(_VENDORS)]),
            "purchaseOrderDate": _day(i),
            "TotalAmount": _amount(i + 1),
            "status": "SETTLED" if i % 2 else "OPEN",
            "notes": "",
        }
        for i in range(1, 7)
    ]


DEMO_RECORDS: dict[str, list[Record]] = {
    "purchase_orders": _purchase_orders(),
    "purchases": _purchases(),
    "expenses": _expenses(),
    "delivery_challans": _delivery_challans(),
    "quotations": _quotations(),
    "invoices": _invoices(),
    "sales_returns": _sales_returns(),
    "debit_notes": _debit_notes(),
}
