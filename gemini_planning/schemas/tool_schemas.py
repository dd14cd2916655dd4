"""Tool input schemas - centralized validation

Field aliases keep the camelCase argument names used on the wire
(``projectName``, ``contextId``) while the models expose snake_case
attributes.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError


def _blank_to_none(v):
    """Treat empty or whitespace-only strings as absent"""
    if isinstance(v, str) and not v.strip():
        return None
    return v


class LibraryRequest(BaseModel):
    """One documentation fetch to perform before prompting

    Used by: generate_plan_with_gemini tool
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {"name": "fastapi", "topic": "routing", "tokens": 5000}
    })

    name: str = Field(..., min_length=1, description="Library name to resolve")
    topic: Optional[str] = Field(None, description="Documentation topic to focus on")
    tokens: Optional[int] = Field(None, gt=0, description="Maximum documentation tokens")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Library name cannot be empty or whitespace only")
        return v.strip()

    @field_validator('topic', mode='before')
    @classmethod
    def blank_topic(cls, v):
        return _blank_to_none(v)


class CreateContextInput(BaseModel):
    """Schema for create_project_context"""
    model_config = ConfigDict(populate_by_name=True)

    project_name: str = Field(..., alias="projectName", min_length=1, description="Name of the project")
    requirements: str = Field(..., min_length=1, description="Project requirements")
    constraints: Optional[str] = Field(None, description="Any constraints")

    @field_validator('project_name', 'requirements')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace only")
        return v

    @field_validator('constraints', mode='before')
    @classmethod
    def blank_constraints(cls, v):
        return _blank_to_none(v)


class GeneratePlanInput(BaseModel):
    """Schema for generate_plan_with_gemini

    Either ``contextId`` or both ``projectName`` and ``requirements``.
    """
    model_config = ConfigDict(populate_by_name=True)

    context_id: Optional[str] = Field(None, alias="contextId", description="Project context ID")
    project_name: Optional[str] = Field(None, alias="projectName", description="Project name (if no contextId)")
    requirements: Optional[str] = Field(None, description="Requirements (if no contextId)")
    constraints: Optional[str] = Field(None, description="Additional constraints")
    libraries: List[LibraryRequest] = Field(default_factory=list, description="Libraries to fetch docs for")

    @field_validator('context_id', 'project_name', 'requirements', 'constraints', mode='before')
    @classmethod
    def blank_fields(cls, v):
        return _blank_to_none(v)

    @field_validator('libraries', mode='before')
    @classmethod
    def none_libraries(cls, v):
        return [] if v is None else v

    @model_validator(mode='after')
    def check_context_source(self):
        if not self.context_id and not (self.project_name and self.requirements):
            raise ValueError("Provide contextId OR projectName + requirements")
        return self


class RenderChecklistInput(BaseModel):
    """Schema for render_plan_checklist"""
    model_config = ConfigDict(populate_by_name=True)

    context_id: str = Field(..., alias="contextId", min_length=1, description="Context ID")

    @field_validator('context_id')
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("Context ID cannot be empty")
        return v.strip()


def parse_arguments(model: type, arguments: Optional[dict]):
    """
    Validate raw tool arguments against a schema model

    Raises:
        ValidationError: With a readable summary of every failed field
    """
    try:
        return model.model_validate(arguments or {})
    except PydanticValidationError as e:
        problems = []
        for err in e.errors():
            location = ".".join(str(part) for part in err.get("loc", ()))
            message = err.get("msg", "invalid value")
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            problems.append(f"{location}: {message}" if location else message)
        raise ValidationError("Invalid arguments: " + "; ".join(problems)) from e
