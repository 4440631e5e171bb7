"""AssetTrack — ReportService: asset transaction report as data or as an Excel workbook."""
import io
import logging
from datetime import date, datetime, timezone
from decimal import Decimal

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from app.repositories.report_repository import ReportRepository
from app.schemas.common import Result
from app.schemas.report import AssetTransactionReportRow
from app.services.base import as_result

logger = logging.getLogger(__name__)

REPORT_TITLE = "Asset Transaction Report"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

HEADER_FILL = PatternFill(start_color="D3D3D3", end_color="D3D3D3", fill_type="solid")
HEADER_FONT = Font(bold=True)
THIN = Side(style="thin")
THIN_BORDER = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)

DATE_FORMAT = "yyyy-mm-dd"
DATETIME_FORMAT = "yyyy-mm-dd hh:mm:ss"
MONEY_FORMAT = "#,##0.00"

COLUMNS = list(AssetTransactionReportRow.model_fields.items())


def report_filename(now: datetime | None = None) -> str:
    now = now or datetime.now()
    return f"Asset_Transaction_Report_{now:%Y%m%d_%H%M%S}.xlsx"


def _excel_value(value):
    """openpyxl rejects tz-aware datetimes; store them as naive UTC."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    if isinstance(value, Decimal):
        return float(value)
    return value


def build_report_workbook(rows: list[AssetTransactionReportRow], generated_at: datetime | None = None) -> bytes:
    """Render report rows to .xlsx bytes.

    Row 1 is the merged title, row 2 the generation time, row 3 the headers
    and data starts on row 4.
    """
    generated_at = generated_at or datetime.now()
    last_col = get_column_letter(len(COLUMNS))

    wb = Workbook()
    ws = wb.active
    ws.title = REPORT_TITLE

    ws.merge_cells(f"A1:{last_col}1")
    title = ws["A1"]
    title.value = REPORT_TITLE
    title.font = Font(bold=True, size=16)
    title.alignment = Alignment(horizontal="center", vertical="center")

    ws.merge_cells(f"A2:{last_col}2")
    subtitle = ws["A2"]
    subtitle.value = f"Generated on: {generated_at:%Y-%m-%d %H:%M:%S}"
    subtitle.font = Font(italic=True)
    subtitle.alignment = Alignment(horizontal="center")

    for col_idx, (_, field) in enumerate(COLUMNS, start=1):
        cell = ws.cell(row=3, column=col_idx, value=field.title)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")

    for row_idx, row in enumerate(rows, start=4):
        for col_idx, (name, _) in enumerate(COLUMNS, start=1):
            raw = getattr(row, name)
            cell = ws.cell(row=row_idx, column=col_idx, value=_excel_value(raw))
            if isinstance(raw, datetime):
                cell.number_format = DATETIME_FORMAT
            elif isinstance(raw, date):
                cell.number_format = DATE_FORMAT
            elif isinstance(raw, Decimal):
                cell.number_format = MONEY_FORMAT
                cell.alignment = Alignment(horizontal="right")
            else:
                cell.alignment = Alignment(horizontal="left")

    last_row = len(rows) + 3
    for ws_row in ws.iter_rows(min_row=1, max_row=last_row, max_col=len(COLUMNS)):
        for cell in ws_row:
            cell.border = THIN_BORDER

    # Auto-width
    for col_idx, (_, field) in enumerate(COLUMNS, start=1):
        max_len = len(field.title)
        for row_idx in range(4, last_row + 1):
            val = ws.cell(row=row_idx, column=col_idx).value
            if val is not None:
                shown = 19 if isinstance(val, datetime) else len(str(val))
                max_len = max(max_len, shown)
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max_len + 3, 50)

    ws.freeze_panes = "A4"

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class ReportService:

    def __init__(self, repo: ReportRepository):
        self.repo = repo

    @as_result("get report data")
    async def get_report_data(self) -> Result[list[AssetTransactionReportRow]]:
        rows = await self.repo.asset_transaction_rows()
        return Result.ok([AssetTransactionReportRow.model_validate(r) for r in rows])

    @as_result("generate Excel report")
    async def generate_excel_report(self) -> Result[bytes]:
        rows = await self.repo.asset_transaction_rows()
        items = [AssetTransactionReportRow.model_validate(r) for r in rows]
        content = build_report_workbook(items)
        logger.info("Built asset transaction report with %d rows", len(items))
        return Result.ok(content)
