"""Data models for the parsed API description.

The loader converts the raw OpenAPI document into these models so the
grouper and renderer never touch untyped dictionaries.
"""

from pydantic import BaseModel


class Param(BaseModel):
    """A single operation parameter (path, query, header, or cookie)."""

    name: str
    location: str  # path / query / header / cookie
    required: bool = False
    param_type: str = "string"
    description: str = ""
    example: str = ""


class ApiEndpoint(BaseModel):
    """One documented HTTP operation."""

    method: str  # GET / POST / PUT / PATCH / DELETE
    path: str  # /api/agents/{agentId}
    tags: list[str] = []
    summary: str = ""
    description: str = ""
    parameters: list[Param] = []
    has_request_body: bool = False
    request_body_examples: dict[str, str] = {}  # {content_type: raw example}
    responses: dict[str, dict] = {}  # {status_code: {description}}


class CategoryPage(BaseModel):
    """All endpoints rendered into one output document."""

    tag: str
    filename: str
    endpoints: list[ApiEndpoint]
