"""OpenAPI document loader.

Deserializes the YAML description and flattens ``paths`` into ApiEndpoint
models. No schema validation is done: optional fields may be missing and
every downstream stage tolerates that.
"""

import json
from pathlib import Path

import yaml

from api_docs_gen.exceptions import SpecParseError
from .base import ApiEndpoint, Param

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def load_spec(file_path: Path) -> dict:
    """Read and deserialize an OpenAPI file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecParseError(str(e), source=str(file_path)) from e
    try:
        return load_spec_text(text)
    except SpecParseError as e:
        raise SpecParseError(str(e), source=str(file_path)) from e


def load_spec_text(text: str) -> dict:
    """Deserialize OpenAPI YAML (or JSON) text into a dict with a ``paths`` mapping."""
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SpecParseError(f"invalid YAML: {e}") from e

    if not isinstance(doc, dict):
        raise SpecParseError("document root must be a mapping")
    if not isinstance(doc.get("paths"), dict):
        raise SpecParseError("document has no 'paths' mapping")
    return doc


def parse_endpoints(doc: dict) -> list[ApiEndpoint]:
    """Flatten ``paths`` into endpoints, in declaration order."""
    endpoints = []

    for path, methods in doc["paths"].items():
        if not isinstance(methods, dict):
            continue
        for method, operation in methods.items():
            if str(method).upper() not in HTTP_METHODS:
                continue
            if not isinstance(operation, dict):
                operation = {}
            request_body = operation.get("requestBody")

            endpoints.append(
                ApiEndpoint(
                    method=str(method).upper(),
                    path=str(path),
                    tags=_parse_tags(operation.get("tags")),
                    summary=_as_text(operation.get("summary")),
                    description=_as_text(operation.get("description")),
                    parameters=_parse_parameters(operation.get("parameters")),
                    has_request_body=request_body is not None,
                    request_body_examples=_parse_request_body_examples(request_body),
                    responses=_parse_responses(operation.get("responses")),
                )
            )

    return endpoints


def parse_openapi(file_path: Path) -> list[ApiEndpoint]:
    """Parse an OpenAPI file into a list of ApiEndpoint."""
    return parse_endpoints(load_spec(file_path))


def _parse_tags(tags) -> list[str]:
    if isinstance(tags, str):
        return [tags]
    if not isinstance(tags, list):
        return []
    return [str(t) for t in tags if t is not None]


def _parse_parameters(params: list | None) -> list[Param]:
    result = []
    if not isinstance(params, list):
        return result
    for p in params:
        if not isinstance(p, dict) or "name" not in p:
            continue
        schema = p.get("schema")
        if not isinstance(schema, dict):
            schema = {}
        result.append(
            Param(
                name=str(p["name"]),
                location=_as_text(p.get("in")) or "query",
                required=bool(p.get("required", False)),
                param_type=_schema_type(schema),
                description=_as_text(p.get("description")),
                example=_as_text(p.get("example")),
            )
        )
    return result


def _parse_request_body_examples(body: dict | None) -> dict[str, str]:
    if not isinstance(body, dict) or not isinstance(body.get("content"), dict):
        return {}
    examples = {}
    for content_type, media in body["content"].items():
        schema = media.get("schema") if isinstance(media, dict) else None
        if not isinstance(schema, dict):
            continue
        example = schema.get("example")
        if example:
            examples[str(content_type)] = _as_text(example)
    return examples


def _parse_responses(responses: dict | None) -> dict:
    result = {}
    if not isinstance(responses, dict):
        return result
    for status_code, resp in responses.items():
        description = resp.get("description") if isinstance(resp, dict) else None
        result[str(status_code)] = {"description": _as_text(description)}
    return result


def _as_text(value) -> str:
    """Render a YAML scalar or structure as the raw string the renderer expects."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _schema_type(schema: dict) -> str:
    """Schema type as a single label; OpenAPI 3.1 allows a list such as [string, "null"]."""
    type_ = schema.get("type")
    if isinstance(type_, list):
        names = [str(t) for t in type_ if t is not None and t != "null"]
        return " | ".join(names) or "string"
    return _as_text(type_) or "string"
