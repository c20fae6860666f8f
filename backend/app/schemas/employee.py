"""
Employee Directory Backend - Pydantic Request/Response Schemas
==============================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate the OpenAPI document served at
       /api-docs/openapi.json.

Schemas are kept separate from the SQLAlchemy model so the request body
(no id) and the response body (with id) can differ.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeCreate(BaseModel):
    """
    What:  Body for POST /api/employees and PUT /api/employees/{id}.

    Every field is optional. An omitted field and an explicit null both
    store NULL; on update that overwrites the previous value (full
    replacement, no merge). Unknown keys, including "id", are ignored.
    """
    first_name: Optional[str] = Field(default=None, description="Given name", examples=["Ada"])
    last_name: Optional[str] = Field(default=None, description="Family name", examples=["Lovelace"])
    email: Optional[str] = Field(default=None, description="Contact email (not validated)", examples=["ada@example.com"])


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  A stored employee as returned by every employee endpoint.
    How:   Built from ORM objects or RETURNING rows via from_attributes.
    """
    id: int = Field(description="Store-assigned identifier")
    first_name: Optional[str] = Field(default=None, description="Given name")
    last_name: Optional[str] = Field(default=None, description="Family name")
    email: Optional[str] = Field(default=None, description="Contact email")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
