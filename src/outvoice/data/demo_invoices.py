"""Sample invoices used to seed the demo store."""

from datetime import date

from outvoice.models.invoice import Invoice, InvoiceItem

DEMO_INVOICES: tuple[Invoice, ...] = (
    Invoice(
        id="demo-0003",
        invoice_number="INV-202405-0417",
        issue_date=date(2024, 5, 14),
        due_date=date(2024, 6, 13),
        issuer_name="Northlight Studio",
        issuer_address="18 Harbour Road\nBristol BS1 5TY",
        client_name="Fairview Developments",
        client_address="2 Quay Street\nBristol BS1 4DB",
        items=[
            InvoiceItem(
                id="demo-0003-1",
                description="Architectural Design & Planning",
                quantity=10,
                unit_price=150,
            ),
            InvoiceItem(
                id="demo-0003-2",
                description="Site survey",
                quantity=1,
                unit_price=420,
            ),
        ],
        notes="Thank you for your business. Please make payment within 30 days.",
        tax_rate_percent=20,
        theme_id="elegant",
        currency_code="GBP",
    ),
    Invoice(
        id="demo-0002",
        invoice_number="INV-202404-2290",
        issue_date=date(2024, 4, 2),
        due_date=date(2024, 5, 2),
        issuer_name="Northlight Studio",
        issuer_address="18 Harbour Road\nBristol BS1 5TY",
        client_name="Okafor & Daughters",
        client_address="77 Mill Lane\nLeeds LS1 6AB",
        items=[
            InvoiceItem(
                id="demo-0002-1",
                description="Brand refresh",
                quantity=1,
                unit_price=2400,
            ),
            InvoiceItem(
                id="demo-0002-2",
                description="Credit: deposit received",
                quantity=-1,
                unit_price=500,
            ),
        ],
        notes="",
        tax_rate_percent=0,
        theme_id="bold",
        currency_code="GBP",
    ),
    Invoice(
        id="demo-0001",
        invoice_number="INV-202403-0058",
        issue_date=date(2024, 3, 11),
        due_date=date(2024, 4, 10),
        issuer_name="Northlight Studio",
        issuer_address="18 Harbour Road\nBristol BS1 5TY",
        client_name="Client Company",
        client_address="456 Client Avenue, Client City, 54321",
        items=[
            InvoiceItem(
                id="demo-0001-1",
                description="Service Description",
                quantity=1,
                unit_price=100,
            ),
        ],
        notes="Thank you for your business. Please make payment within 30 days.",
        tax_rate_percent=5,
        theme_id="modern",
        currency_code="USD",
    ),
)
