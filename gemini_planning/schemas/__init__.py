"""Tool input schemas.

Centralized pydantic models for tool arguments, so validation and the
documented shapes stay in one place.
"""

from .tool_schemas import (
    LibraryRequest,
    CreateContextInput,
    GeneratePlanInput,
    RenderChecklistInput,
)

__all__ = [
    'LibraryRequest',
    'CreateContextInput',
    'GeneratePlanInput',
    'RenderChecklistInput',
]
