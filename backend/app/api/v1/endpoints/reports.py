"""AssetTrack — Report endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.api.deps import AuthUser, get_report_service
from app.core.responses import handle_result
from app.schemas.common import Result
from app.schemas.report import AssetTransactionReportRow
from app.services.report_service import XLSX_MEDIA_TYPE, ReportService, report_filename

router = APIRouter()

Service = Annotated[ReportService, Depends(get_report_service)]


@router.get("/data", response_model=Result[list[AssetTransactionReportRow]])
async def report_data(user: AuthUser, svc: Service):
    """Asset transaction report rows as JSON."""
    return handle_result(await svc.get_report_data())


async def _excel_response(svc: ReportService) -> Response:
    result = await svc.generate_excel_report()
    if not result.success:
        return handle_result(result)
    return Response(
        content=result.data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{report_filename()}"'},
    )


@router.get("/excel")
async def report_excel(user: AuthUser, svc: Service):
    """Asset transaction report as an .xlsx workbook."""
    return await _excel_response(svc)


@router.get("/excel/download")
async def report_excel_download(user: AuthUser, svc: Service):
    return await _excel_response(svc)
