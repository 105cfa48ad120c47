"""Domain services shared by the apps: invoice rendering and reference data."""

from services.invoice import format_money, invoice_filename, render_invoice_pdf
from services.reference_data import PREDEFINED_PARTS, PREDEFINED_SKILLS

__all__ = [
    "PREDEFINED_PARTS",
    "PREDEFINED_SKILLS",
    "format_money",
    "invoice_filename",
    "render_invoice_pdf",
]
