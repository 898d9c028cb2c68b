from __future__ import annotations

from pathlib import Path
from typing import Protocol

from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from ..common.money import round_money
from ..core.constants import DEDUCTION_PERCENTAGE
from ..users.model import Employee
from .model import PayoutRecord


class SlipRenderer(Protocol):
    def render(self, record: PayoutRecord, employee: Employee) -> Path:
        raise NotImplementedError

    def url_for(self, path: Path) -> str:
        raise NotImplementedError


class PdfSlipRenderer(SlipRenderer):
    """Writes one A4 payslip PDF per payout into ``output_dir``."""

    def __init__(self, output_dir: str | Path, *, url_prefix: str = "/payslips"):
        self._output_dir = Path(output_dir)
        self._url_prefix = url_prefix.rstrip("/")

    def render(self, record: PayoutRecord, employee: Employee) -> Path:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / f"payslip_{record.employee_id}_{record.period}_{record.payout_id}.pdf"

        c = canvas.Canvas(str(path), pagesize=A4)
        width, height = A4
        y = height - 60

        c.setFont("Helvetica-Bold", 16)
        c.drawString(50, y, "Payslip")
        c.setFont("Helvetica", 11)
        c.drawRightString(width - 50, y, f"Period: {record.period}")
        y -= 30

        c.drawString(50, y, f"Employee: {employee.display_name}")
        y -= 18
        c.drawString(50, y, f"Email: {employee.email}")
        y -= 18
        c.drawString(50, y, f"Generated: {record.generated_date:%Y-%m-%d %H:%M}")
        y -= 30

        c.line(50, y + 10, width - 50, y + 10)
        rows = [
            ("Days worked", str(record.total_days_worked)),
            ("Gross pay", f"{round_money(record.gross_pay):,.2f}"),
            (f"Deductions ({DEDUCTION_PERCENTAGE}%)", f"{round_money(record.deductions):,.2f}"),
            ("Net pay", f"{round_money(record.net_pay):,.2f}"),
            ("Status", record.status.value),
        ]
        for label, value in rows:
            y -= 20
            c.setFont("Helvetica-Bold" if label == "Net pay" else "Helvetica", 11)
            c.drawString(50, y, label)
            c.drawRightString(width - 50, y, value)

        c.showPage()
        c.save()
        return path

    def url_for(self, path: Path) -> str:
        return f"{self._url_prefix}/{Path(path).name}"
