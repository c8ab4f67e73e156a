"""
Entity registry for the back-office lists.

Each EntityConfig describes one list screen: how records are labelled,
which backend endpoints serve it, which (dotted) fields the local search
matches against and which columns the table starts with.

Endpoints place the record id in one of three ways:

    path   - substituted into a `{id}` placeholder in the path
    query  - sent as a query parameter named by `id_key`
    body   - sent as a JSON body `{id_key: id}`
"""

from dataclasses import dataclass
from typing import Any

ID_IN_PATH = "path"
ID_IN_QUERY = "query"
ID_IN_BODY = "body"


@dataclass(frozen=True)
class Endpoint:
    """A backend endpoint addressed by record id."""

    method: str
    path: str
    id_location: str = ID_IN_PATH
    id_key: str = "_id"

    def __post_init__(self) -> None:
        if self.id_location not in (ID_IN_PATH, ID_IN_QUERY, ID_IN_BODY):
            raise ValueError(f"Unknown id location: {self.id_location}")

    def request(self, record_id: str, extra: dict[str, Any] | None = None) -> dict:
        """
        Build the fetch_with_auth() keyword arguments for a record.

        Args:
            record_id: Identifier of the target record.
            extra: Additional JSON body fields (e.g. convert options).

        Returns:
            Dict with endpoint, method, params and json keys.
        """
        path = self.path
        params: dict[str, Any] | None = None
        body: dict[str, Any] | None = dict(extra) if extra else None
        if self.id_location == ID_IN_PATH:
            path = path.format(id=record_id)
        elif self.id_location == ID_IN_QUERY:
            params = {self.id_key: record_id}
        else:
            body = {self.id_key: record_id, **(body or {})}
        return {"endpoint": path, "method": self.method, "params": params, "json": body}


@dataclass(frozen=True)
class ColumnSpec:
    """Default table column for an entity list."""

    key: str
    label: str
    visible: bool = True
    sortable: bool = True


@dataclass(frozen=True)
class EntityConfig:
    """
    Static description of one entity list.

    Attributes:
        name: Registry key (e.g. "purchase_orders").
        label: Singular display label used in messages.
        plural: Plural display label.
        list_path: Paged list endpoint path.
        search_fields: Dotted record paths matched by local search.
        columns: Default table columns.
        delete: Delete endpoint, if supported.
        clone: Clone endpoint, if supported.
        convert: Convert endpoint, if supported.
        print_download: Print/download endpoint, if supported.
        convert_label: What a convert produces (e.g. "invoice").
        statuses: Status tabs offered by the list, "ALL" first.
    """

    name: str
    label: str
    plural: str
    list_path: str
    search_fields: tuple[str, ...]
    columns: tuple[ColumnSpec, ...] = ()
    delete: Endpoint | None = None
    clone: Endpoint | None = None
    convert: Endpoint | None = None
    print_download: Endpoint | None = None
    convert_label: str = ""
    statuses: tuple[str, ...] = ("ALL",)

    @property
    def title(self) -> str:
        return self.plural.title()


_PURCHASE_ORDERS = EntityConfig(
    name="purchase_orders",
    label="purchase order",
    plural="purchase orders",
    list_path="/purchase_orders/getAllData",
    search_fields=(
        "purchaseOrderId",
        "vendorInfo.vendor_name",
        "vendorInfo.phone",
        "referenceNo",
        "notes",
    ),
    columns=(
        ColumnSpec("purchaseOrderId", "PO Number"),
        ColumnSpec("vendorInfo.vendor_name", "Vendor"),
        ColumnSpec("purchaseOrderDate", "Date"),
        ColumnSpec("dueDate", "Due Date", visible=False),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("PATCH", "/purchase_orders/{id}/softDelete"),
    clone=Endpoint("POST", "/purchase_orders/purchaseOrders/{id}/clone"),
    convert=Endpoint("POST", "/purchase_orders/convert", id_location=ID_IN_BODY),
    print_download=Endpoint(
        "GET", "/purchase_orders/pdfDownload", ID_IN_QUERY, "purchaseOrderId"
    ),
    convert_label="purchase",
    statuses=("ALL", "NEW", "PENDING", "COMPLETED", "CANCELLED"),
)

_PURCHASES = EntityConfig(
    name="purchases",
    label="purchase",
    plural="purchases",
    list_path="/purchases/listPurchases",
    search_fields=(
        "purchaseId",
        "vendorInfo.vendor_name",
        "vendorInfo.phone",
        "notes",
        "supplierInvoiceSerialNumber",
    ),
    columns=(
        ColumnSpec("purchaseId", "Purchase ID"),
        ColumnSpec("vendorInfo.vendor_name", "Vendor"),
        ColumnSpec("supplierInvoiceSerialNumber", "Supplier Invoice"),
        ColumnSpec("purchaseDate", "Date"),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("POST", "/purchases/deletePurchase", id_location=ID_IN_BODY),
)

_EXPENSES = EntityConfig(
    name="expenses",
    label="expense",
    plural="expenses",
    list_path="/expense/listExpenses",
    search_fields=("expenseId", "reference", "paymentMode", "description"),
    columns=(
        ColumnSpec("expenseId", "Expense ID"),
        ColumnSpec("reference", "Reference"),
        ColumnSpec("amount", "Amount"),
        ColumnSpec("paymentMode", "Payment Mode"),
        ColumnSpec("expenseDate", "Date"),
        ColumnSpec("status", "Status"),
        ColumnSpec("description", "Description", visible=False, sortable=False),
    ),
    delete=Endpoint("POST", "/expense/deleteExpense", id_location=ID_IN_BODY),
)

_DELIVERY_CHALLANS = EntityConfig(
    name="delivery_challans",
    label="delivery challan",
    plural="delivery challans",
    list_path="/delivery_challans/listDeliverychallans",
    search_fields=(
        "deliveryChallanNumber",
        "customerId.name",
        "customerId.phone",
        "notes",
    ),
    columns=(
        ColumnSpec("deliveryChallanNumber", "Challan Number"),
        ColumnSpec("customerId.name", "Customer"),
        ColumnSpec("deliveryChallanDate", "Date"),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("POST", "/delivery_challans/deleteDeliverychallan", ID_IN_BODY),
    clone=Endpoint("POST", "/delivery_challans/{id}/clone"),
    convert=Endpoint("POST", "/delivery_challans/convertToInvoice", ID_IN_BODY),
    convert_label="invoice",
    statuses=("ALL", "ACTIVE", "CONVERTED", "CANCELLED"),
)

_QUOTATIONS = EntityConfig(
    name="quotations",
    label="quotation",
    plural="quotations",
    list_path="/quotation/quotationList",
    search_fields=("quotation_id", "customerId.name", "customerId.phone", "notes"),
    columns=(
        ColumnSpec("quotation_id", "Quotation ID"),
        ColumnSpec("customerId.name", "Customer"),
        ColumnSpec("quotation_date", "Date"),
        ColumnSpec("expiry_date", "Expiry", visible=False),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("PATCH", "/quotation/deleteQuotation/{id}"),
    convert=Endpoint("POST", "/quotation/convertInvoice", ID_IN_BODY),
    convert_label="invoice",
    statuses=("ALL", "OPEN", "SENT", "ACCEPTED", "EXPIRED"),
)

_INVOICES = EntityConfig(
    name="invoices",
    label="invoice",
    plural="invoices",
    list_path="/invoice/invoiceList",
    search_fields=("invoiceNumber", "customerId.name", "customerId.phone", "notes"),
    columns=(
        ColumnSpec("invoiceNumber", "Invoice Number"),
        ColumnSpec("customerId.name", "Customer"),
        ColumnSpec("invoiceDate", "Date"),
        ColumnSpec("dueDate", "Due Date"),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("paidAmount", "Paid", visible=False),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("PATCH", "/invoice/{id}/softDelete"),
    clone=Endpoint("POST", "/invoice/{id}/clone"),
    convert=Endpoint("POST", "/invoice/{id}/convertsalesreturn"),
    print_download=Endpoint("GET", "/invoice/pdfDownload", ID_IN_QUERY, "invoiceId"),
    convert_label="sales return",
    statuses=("ALL", "DRAFTED", "SENT", "PARTIALLY_PAID", "PAID", "OVERDUE"),
)

_SALES_RETURNS = EntityConfig(
    name="sales_returns",
    label="sales return",
    plural="sales returns",
    list_path="/sales_return/listSales_return",
    search_fields=("credit_note_id", "customerInfo.name", "customerInfo.phone"),
    columns=(
        ColumnSpec("credit_note_id", "Credit Note"),
        ColumnSpec("customerInfo.name", "Customer"),
        ColumnSpec("credit_note_date", "Date"),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("POST", "/sales_return/deleteSales_return", ID_IN_BODY),
    clone=Endpoint("POST", "/sales_return/{id}/clone"),
)

_DEBIT_NOTES = EntityConfig(
    name="debit_notes",
    label="purchase return",
    plural="purchase returns",
    list_path="/debit_note/debitNotesList",
    search_fields=("debit_note_id", "vendorInfo.vendor_name", "vendorInfo.phone", "notes"),
    columns=(
        ColumnSpec("debit_note_id", "Debit Note"),
        ColumnSpec("vendorInfo.vendor_name", "Vendor"),
        ColumnSpec("purchaseOrderDate", "Date"),
        ColumnSpec("TotalAmount", "Amount"),
        ColumnSpec("status", "Status"),
    ),
    delete=Endpoint("PATCH", "/debit_note/{id}/softDelete"),
    clone=Endpoint("POST", "/debit_note/{id}/clone"),
)

ENTITIES: dict[str, EntityConfig] = {
    entity.name: entity
    for entity in (
        _PURCHASE_ORDERS,
        _PURCHASES,
        _EXPENSES,
        _DELIVERY_CHALLANS,
        _QUOTATIONS,
        _INVOICES,
        _SALES_RETURNS,
        _DEBIT_NOTES,
    )
}


def get_entity(name: str) -> EntityConfig:
    """Return the registered entity config, raising ValueError if unknown."""
    try:
        return ENTITIES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown entity: {name}") from exc
