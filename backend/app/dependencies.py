"""
Employee Directory Backend - FastAPI Dependencies
=================================================

What:  Hands the shared EmployeeGateway to route handlers.
How:   The lifespan stores the gateway on `app.state`; this dependency reads
       it back per request. Tests replace it through
       `app.dependency_overrides[get_gateway]`.
"""

from fastapi import Request

from app.services.employee_gateway import EmployeeGateway


def get_gateway(request: Request) -> EmployeeGateway:
    """The process-wide gateway created at startup."""
    return request.app.state.gateway
