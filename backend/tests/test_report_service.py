import io
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from openpyxl import load_workbook

from app.schemas.report import AssetTransactionReportRow
from app.services.report_service import ReportService, build_report_workbook, report_filename


def _row(**overrides) -> dict:
    row = {
        "employee_code": "EMP-1",
        "full_name": "Ann Lee",
        "email": "ann@company.com",
        "category_name": "Laptops",
        "category_id": 3,
        "asset_name": "ThinkPad X1",
        "asset_code": "AST-1",
        "serial_number": "SN-1",
        "condition": "Good",
        "purchase_date": date(2025, 6, 1),
        "transaction_date": datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc),
        "purchase_price": Decimal("1234.50"),
        "notes": "hand-over",
    }
    row.update(overrides)
    return row


def test_filename_format() -> None:
    assert report_filename(datetime(2026, 3, 1, 9, 5, 7)) == "Asset_Transaction_Report_20260301_090507.xlsx"


def test_workbook_layout() -> None:
    rows = [AssetTransactionReportRow.model_validate(_row())]
    content = build_report_workbook(rows, generated_at=datetime(2026, 3, 2, 10, 0, 0))

    ws = load_workbook(io.BytesIO(content)).active
    assert ws.title == "Asset Transaction Report"
    assert ws["A1"].value == "Asset Transaction Report"
    assert "A1:M1" in [str(r) for r in ws.merged_cells.ranges]
    assert ws["A2"].value == "Generated on: 2026-03-02 10:00:00"

    headers = [c.value for c in ws[3]]
    assert headers[:3] == ["Employee Code", "Full Name", "Email"]
    assert headers[-1] == "Notes"
    assert ws["A3"].font.bold

    assert ws["A4"].value == "EMP-1"
    assert ws["J4"].number_format == "yyyy-mm-dd"
    assert ws["K4"].number_format == "yyyy-mm-dd hh:mm:ss"
    assert ws["K4"].value == datetime(2026, 3, 1, 9, 30)
    assert ws["L4"].number_format == "#,##0.00"
    assert ws["L4"].value == 1234.5
    assert ws["M4"].border.left.style == "thin"


def test_workbook_with_no_rows_has_headers_only() -> None:
    ws = load_workbook(io.BytesIO(build_report_workbook([]))).active

    assert ws.max_row == 3


async def test_report_data() -> None:
    repo = AsyncMock()
    repo.asset_transaction_rows.return_value = [_row(), _row(full_name=None, employee_code=None)]

    result = await ReportService(repo).get_report_data()

    assert result.success
    assert len(result.data) == 2
    assert result.data[1].full_name is None


async def test_excel_report_failure() -> None:
    repo = AsyncMock()
    repo.asset_transaction_rows.side_effect = RuntimeError("timeout")

    result = await ReportService(repo).generate_excel_report()

    assert not result.success
    assert result.message == "Failed to generate Excel report"


async def test_excel_report_bytes() -> None:
    repo = AsyncMock()
    repo.asset_transaction_rows.return_value = [_row()]

    result = await ReportService(repo).generate_excel_report()

    assert result.success
    assert result.data[:2] == b"PK"
