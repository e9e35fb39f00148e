"""Request payloads and identity headers shared by API tests."""

SALES_HEADERS = {"X-Actor-Id": "sales-1", "X-Actor-Name": "Sales Rep", "X-Actor-Role": "sales-team"}
DESIGN_HEADERS = {"X-Actor-Id": "design-1", "X-Actor-Name": "Designer", "X-Actor-Role": "design-team"}
MANAGER_HEADERS = {"X-Actor-Id": "manager-1", "X-Actor-Name": "Manager", "X-Actor-Role": "manager"}

CREATE_BODY = {
    "title": "Business cards - ACME",
    "description": "Two-sided business cards",
    "client_name": "ACME Corp",
    "client_contact": "buyer@acme.example",
    "priority": "high",
    "assigned_team": "design-team",
    "due_date": "2026-01-20T00:00:00Z",
    "estimated_value": 500,
    "specifications": {
        "quantity": 1000,
        "size": "9x5 cm",
        "material": "Premium card stock",
        "colors": "4-color CMYK",
        "finishes": ["Matte lamination"],
    },
}

ARTWORK_ATTACHMENT = {
    "file_name": "logo.pdf",
    "url": "https://files.example/acme/logo.pdf",
    "uploaded_by": "sales-1",
    "uploaded_at": "2026-01-15T09:00:00Z",
}
