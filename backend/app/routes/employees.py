"""
Employee Directory Backend - Employee Route Handlers
====================================================

What:  The five /api/employees operations.
How:   Path ids and JSON bodies are validated by FastAPI; each handler makes
       one gateway call and maps the outcome to a status code.
Who:   Called by the directory frontend and any HTTP client.

Outcome Mapping:
    list    → 200 [..]  (always; [] when empty or on a soft read failure)
    create  → 201 {..}  | 500
    get     → 200 {..}  | 200 null  (absence is in the body, never 404)
    update  → 200 {..}  | 404 | 500
    delete  → 204       | 404 | 500

    404 and 500 bodies are empty; NotFoundError and DatabaseError are turned
    into responses by the handlers registered in main.py.

A non-integer or out-of-range id never reaches a handler: FastAPI answers
422 during path validation.
"""

import logging
from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Response, status

from app.dependencies import get_gateway
from app.exceptions import NotFoundError
from app.schemas.employee import EmployeeCreate, EmployeeResponse
from app.services.employee_gateway import EmployeeGateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Employees"])

# Store ids are 32-bit integers assigned from 1 upward
EmployeeId = Annotated[
    int,
    Path(ge=1, le=2_147_483_647, description="Employee database id"),
]

_NOT_FOUND = {404: {"description": "Employee not found (empty body)"}}
_SERVER_ERROR = {500: {"description": "Store error (empty body)"}}


@router.get(
    "/employees",
    response_model=List[EmployeeResponse],
    summary="List all employees",
    description="Returns every employee ordered by id.",
)
async def list_employees(
    gateway: EmployeeGateway = Depends(get_gateway),
) -> List[EmployeeResponse]:
    return await gateway.list_all()


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_SERVER_ERROR},
    summary="Create an employee",
    description="Stores a new employee. The id is assigned by the database.",
)
async def create_employee(
    payload: EmployeeCreate,
    gateway: EmployeeGateway = Depends(get_gateway),
) -> EmployeeResponse:
    return await gateway.insert(payload)


@router.get(
    "/employees/{employee_id}",
    response_model=Optional[EmployeeResponse],
    summary="Get a single employee by id",
    description="Returns the employee, or null when no employee has this id.",
)
async def get_employee_by_id(
    employee_id: EmployeeId,
    gateway: EmployeeGateway = Depends(get_gateway),
) -> Optional[EmployeeResponse]:
    return await gateway.get_by_id(employee_id)


@router.put(
    "/employees/{employee_id}",
    response_model=EmployeeResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace an employee",
    description=(
        "Overwrites first_name, last_name and email. "
        "Fields missing from the body are stored as null."
    ),
)
async def update_employee(
    employee_id: EmployeeId,
    payload: EmployeeCreate,
    gateway: EmployeeGateway = Depends(get_gateway),
) -> EmployeeResponse:
    updated = await gateway.update_by_id(employee_id, payload)
    if updated is None:
        raise NotFoundError(resource="employee", resource_id=str(employee_id))
    return updated


@router.delete(
    "/employees/{employee_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: EmployeeId,
    gateway: EmployeeGateway = Depends(get_gateway),
) -> Response:
    affected = await gateway.delete_by_id(employee_id)
    if affected == 0:
        raise NotFoundError(resource="employee", resource_id=str(employee_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
