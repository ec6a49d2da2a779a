"""Declarative argument validation for registry tools.

Each tool declares a schema dict mapping argument names to field descriptors.
The same schema renders the MCP ``inputSchema`` advertised to clients and
validates incoming arguments before the handler runs, so handlers never
re-check their inputs.

Example::

    _SCHEMA = {
        "query": Str(required=True, description="prometheus query expression"),
        "time": Str(description="evaluation timestamp"),
    }

    args = validate_arguments(raw_arguments, _SCHEMA, tool_name="prometheus_query")
    # args holds only declared fields, values unchanged
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from prometheus_mcp.core.errors import ToolArgumentError

# ---------------------------------------------------------------------------
# Schema types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Str:
    """String parameter.

    Values pass through unchanged by default; PromQL and timestamps are
    opaque to the server. ``strip`` and ``allow_empty=False`` opt in to
    normalisation and blank rejection.
    """

    required: bool = False
    description: Optional[str] = None
    strip: bool = False
    allow_empty: bool = True

    json_type = "string"


# Union of all field-level schema types.
FieldSchema = Union[Str]

ArgumentSchema = Mapping[str, FieldSchema]


# ---------------------------------------------------------------------------
# JSON Schema rendering
# ---------------------------------------------------------------------------


def to_json_schema(schema: ArgumentSchema) -> Dict[str, Any]:
    """Render *schema* as the JSON Schema object advertised over MCP."""
    properties: Dict[str, Any] = {}
    required: List[str] = []

    for field_name, spec in schema.items():
        prop: Dict[str, Any] = {"type": spec.json_type}
        if spec.description:
            prop["description"] = spec.description
        properties[field_name] = prop
        if spec.required:
            required.append(field_name)

    json_schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        json_schema["required"] = required
    return json_schema


# ---------------------------------------------------------------------------
# Validation engine
# ---------------------------------------------------------------------------


def validate_arguments(
    arguments: Optional[Mapping[str, Any]],
    schema: ArgumentSchema,
    *,
    tool_name: str,
) -> Dict[str, Any]:
    """Validate *arguments* against *schema* and return the normalised values.

    Every field is checked before reporting, so a single ToolArgumentError
    names all offending fields. Undeclared arguments are dropped; absent
    optional fields are left out of the result.

    Validation order per field:
      1. Required field presence
      2. Type check
      3. Format checks (empty string)
      4. Normalisation (strip strings, when requested)

    Raises:
        ToolArgumentError: if any field is invalid
    """
    payload = dict(arguments or {})
    validated: Dict[str, Any] = {}
    errors: List[str] = []

    for field_name, spec in schema.items():
        value = payload.get(field_name)

        # 1. Required presence -----------------------------------
        if value is None:
            if spec.required:
                errors.append(f"{field_name}: required field is missing")
            continue

        # 2. Type check ------------------------------------------
        err = _check_type(field_name, value, spec)
        if err is not None:
            errors.append(err)
            continue

        # 3. Format checks ---------------------------------------
        err = _check_format(field_name, value, spec)
        if err is not None:
            errors.append(err)
            continue

        # 4. Normalisation ----------------------------------------
        validated[field_name] = _normalise(value, spec)

    if errors:
        raise ToolArgumentError(tool_name, errors)
    return validated


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _check_type(field: str, value: Any, spec: FieldSchema) -> Optional[str]:
    """Return an error message if *value* fails the type check for *spec*."""
    if isinstance(spec, Str) and not isinstance(value, str):
        return f"{field}: expected string, got {type(value).__name__}"
    return None


def _check_format(field: str, value: Any, spec: FieldSchema) -> Optional[str]:
    """Return an error message if *value* fails format checks for *spec*."""
    if isinstance(spec, Str):
        text = value.strip() if spec.strip else value
        if spec.required and not spec.allow_empty and not text:
            return f"{field}: must be a non-empty string"
    return None


def _normalise(value: Any, spec: FieldSchema) -> Any:
    if isinstance(spec, Str) and spec.strip:
        return value.strip()
    return value
