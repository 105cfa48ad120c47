"""Invoice PDF rendering for completed jobs."""

import io
import logging
from datetime import datetime
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from models import Company, Job

logger = logging.getLogger(__name__)

HEADER_COLOR = colors.HexColor("#34495E")


def invoice_filename(job_id: str) -> str:
    return f"Invoice_{job_id}.pdf"


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


def _line_items(job: Job) -> list[list[str]]:
    rows = [["Item", "Amount"], [job.title, format_money(job.quoted_value or 0)]]
    rows.extend([part, "See materials cost"] for part in job.required_parts)
    if job.expected_parts_cost:
        rows.append(["Materials Cost", format_money(job.expected_parts_cost)])
    return rows


def render_invoice_pdf(job: Job, company: Company, issued_on: datetime | None = None) -> bytes:
    """Render a one-page invoice and return the PDF bytes.

    The total is quoted value plus expected parts cost. Title, author and
    subject are written to the document metadata.
    """
    total = job.invoice_total
    issued_on = issued_on or datetime.now()

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=f"Invoice {job.id}",
        author=company.name,
        subject=f"Invoice for job {job.id}, total {format_money(total)}",
        invariant=1,
    )
    styles = getSampleStyleSheet()
    company_style = ParagraphStyle(
        "CompanyName", parent=styles["Heading1"], fontSize=20, spaceAfter=6
    )
    heading_style = ParagraphStyle(
        "InvoiceHeading",
        parent=styles["Heading2"],
        fontSize=12,
        textColor=HEADER_COLOR,
        spaceAfter=8,
    )
    right_style = ParagraphStyle("Right", parent=styles["Normal"], alignment=2)
    small_style = ParagraphStyle("Small", parent=styles["Normal"], fontSize=8)

    address = company.settings.address if company.settings else None
    story = [
        Paragraph(escape(company.name), company_style),
        Paragraph(escape(address or ""), styles["Normal"]),
        Spacer(1, 0.2 * inch),
        Paragraph("<b>INVOICE</b>", right_style),
        Paragraph(f"Job ID: {escape(job.id)}", right_style),
        Paragraph(f"Date: {issued_on.strftime('%b %d, %Y')}", right_style),
        Spacer(1, 0.3 * inch),
        Paragraph("BILL TO:", heading_style),
    ]
    bill_to = [
        job.customer_name,
        job.location.address or "",
        job.customer_email or "",
        job.customer_phone,
    ]
    story.extend(Paragraph(escape(line), styles["Normal"]) for line in bill_to if line)
    story.append(Spacer(1, 0.3 * inch))

    items_table = Table(_line_items(job), colWidths=[4.5 * inch, 1.8 * inch])
    items_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_COLOR),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F2F4F5")]),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
            ]
        )
    )
    story.append(items_table)
    story.append(Spacer(1, 0.2 * inch))

    total_table = Table([["Total:", format_money(total)]], colWidths=[4.5 * inch, 1.8 * inch])
    total_table.setStyle(
        TableStyle(
            [
                ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 12),
                ("LINEABOVE", (0, 0), (-1, 0), 1, HEADER_COLOR),
            ]
        )
    )
    story.append(total_table)
    story.append(Spacer(1, 0.6 * inch))

    story.append(Paragraph("Thank you for your business!", small_style))
    story.append(
        Paragraph(
            "Please contact us with any questions regarding this invoice.", small_style
        )
    )

    doc.build(story)
    logger.info("Rendered invoice for job %s (total %s)", job.id, format_money(total))
    return buffer.getvalue()
