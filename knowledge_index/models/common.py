"""
Common API model base and simple responses.

All wire models use camelCase field names; Python code uses snake_case.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="'healthy' or 'unhealthy'")
    message: str = Field(description="Human-readable status")
