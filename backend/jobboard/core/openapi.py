"""
OpenAPI Documentation Registry

Collects component schemas, security schemes and per-path documentation
from the route modules and merges them into the document FastAPI
generates. One registry is created by the application factory and handed
to each route module's `register_openapi` function.
"""

import copy
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel

from jobboard.utils.logger import get_logger

logger = get_logger(__name__)

COMPONENT_TYPES = (
    "schemas",
    "responses",
    "parameters",
    "examples",
    "requestBodies",
    "headers",
    "securitySchemes",
    "links",
    "callbacks",
)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

SCHEMA_REF_TEMPLATE = "#/components/schemas/{model}"


class OpenAPIRegistry:
    """Ordered collection of OpenAPI definitions."""

    def __init__(self) -> None:
        self._definitions: List[Dict[str, Any]] = []
        self._component_names = set()

    @property
    def definitions(self) -> List[Dict[str, Any]]:
        return list(self._definitions)

    def register_component(self, component_type: str, name: str, component: Dict[str, Any]) -> Dict[str, Any]:
        """
        Register a reusable component, such as a security scheme.

        Raises:
            ValueError: On an unknown component type or a duplicate name
        """
        if component_type not in COMPONENT_TYPES:
            raise ValueError(f"Unknown OpenAPI component type: {component_type}")
        if (component_type, name) in self._component_names:
            raise ValueError(f"OpenAPI component {component_type}/{name} is already registered")

        self._component_names.add((component_type, name))
        self._definitions.append({
            "type": "component",
            "component_type": component_type,
            "name": name,
            "component": copy.deepcopy(component),
        })
        return {"$ref": f"#/components/{component_type}/{name}"}

    def register_schema(self, model: Type[BaseModel], name: Optional[str] = None) -> Dict[str, Any]:
        """Register a pydantic model under components/schemas and return its $ref."""
        name = name or model.__name__
        schema = model.model_json_schema(by_alias=True, ref_template=SCHEMA_REF_TEMPLATE)
        nested = schema.pop("$defs", {})

        ref = self.register_component("schemas", name, schema)
        for nested_name, nested_schema in nested.items():
            if ("schemas", nested_name) not in self._component_names:
                self.register_component("schemas", nested_name, nested_schema)
        return ref

    def register_path(
        self,
        method: str,
        path: str,
        summary: Optional[str] = None,
        tags: Optional[List[str]] = None,
        responses: Optional[Dict[int, Dict[str, Any]]] = None,
        security: Optional[List[Dict[str, List[str]]]] = None,
        description: Optional[str] = None,
    ) -> None:
        """Document one operation. Fields set here win over generated ones."""
        method = method.lower()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unknown HTTP method: {method}")

        operation: Dict[str, Any] = {}
        if summary:
            operation["summary"] = summary
        if description:
            operation["description"] = description
        if tags:
            operation["tags"] = list(tags)
        if responses:
            operation["responses"] = {
                str(code): copy.deepcopy(response) for code, response in responses.items()
            }
        if security is not None:
            operation["security"] = copy.deepcopy(security)

        self._definitions.append({
            "type": "route",
            "method": method,
            "path": path,
            "operation": operation,
        })

    def generate_document(self, base_document: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Merge the registered definitions into `base_document`.

        The input is not modified.
        """
        document = copy.deepcopy(base_document) if base_document else {
            "openapi": "3.1.0",
            "info": {"title": "API", "version": "1.0.0"},
            "paths": {},
        }
        components = document.setdefault("components", {})
        paths = document.setdefault("paths", {})

        for definition in self._definitions:
            if definition["type"] == "component":
                section = components.setdefault(definition["component_type"], {})
                section[definition["name"]] = copy.deepcopy(definition["component"])
            else:
                operation = paths.setdefault(definition["path"], {}).setdefault(definition["method"], {})
                for key, value in definition["operation"].items():
                    if key == "responses":
                        operation.setdefault("responses", {}).update(copy.deepcopy(value))
                    else:
                        operation[key] = copy.deepcopy(value)

        logger.debug(
            "OpenAPI document generated",
            paths=len(paths),
            definitions=len(self._definitions),
        )
        return document


def register_security_schemes(registry: OpenAPIRegistry, cookie_name: str) -> None:
    """Register the cookie and bearer schemes used by authenticated routes."""
    registry.register_component("securitySchemes", "SessionCookie", {
        "type": "apiKey",
        "in": "cookie",
        "name": cookie_name,
        "description": f"Session cookie set after login (e.g., {cookie_name}=abc123)",
    })
    registry.register_component("securitySchemes", "BearerAuth", {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    })


AUTHENTICATED = [{"SessionCookie": []}, {"BearerAuth": []}]
