"""AssetTrack — Employee endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import AuthUser, PageParams, get_employee_service
from app.core.responses import handle_result
from app.schemas.common import PaginatedResult, Result
from app.schemas.employee import EmployeeCreate, EmployeeDetail, EmployeeListItem, EmployeeUpdate
from app.services.employee_service import EmployeeService

router = APIRouter()

Service = Annotated[EmployeeService, Depends(get_employee_service)]


@router.get("/active", response_model=Result[list[EmployeeListItem]])
async def list_active_employees(user: AuthUser, svc: Service):
    """Active employees only."""
    return handle_result(await svc.get_active())


@router.get("/grid", response_model=PaginatedResult[EmployeeListItem])
async def employee_grid(
    user: AuthUser,
    svc: Service,
    paging: PageParams,
    search: str | None = Query(None),
):
    """One page of active employees, filtered by name, code, department or position."""
    return handle_result(await svc.get_grid(paging.page, paging.page_size, search))


@router.get("/{employee_id}", response_model=Result[EmployeeDetail])
async def get_employee(employee_id: int, user: AuthUser, svc: Service):
    return handle_result(await svc.get_by_id(employee_id))


@router.get("", response_model=Result[list[EmployeeListItem]])
async def list_employees(user: AuthUser, svc: Service):
    return handle_result(await svc.get_all())


@router.post("", response_model=Result[EmployeeDetail], status_code=status.HTTP_201_CREATED)
async def create_employee(body: EmployeeCreate, user: AuthUser, svc: Service):
    """Create an employee. A code is generated when none is given."""
    return handle_result(await svc.create(body, created_by=user.email), status.HTTP_201_CREATED)


@router.put("/{employee_id}", response_model=Result[EmployeeDetail])
async def update_employee(employee_id: int, body: EmployeeUpdate, user: AuthUser, svc: Service):
    return handle_result(await svc.update(employee_id, body))


@router.delete("/{employee_id}", response_model=Result[None])
async def delete_employee(employee_id: int, user: AuthUser, svc: Service):
    """Soft delete; refused while the employee holds an active asset."""
    return handle_result(await svc.delete(employee_id))
