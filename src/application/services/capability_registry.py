"""
Application service: the set of capabilities the reasoning engine may invoke.

Each capability pairs a declared CapabilitySpec with an async handler. At
registration the spec is turned into a pydantic model, which validates and
coerces every call's arguments before dispatch. Every failure is converted
into an ``{"error": ...}`` payload, so callers can feed the result straight
back to the reasoning engine. invoke() never raises, apart from cancellation.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from src.domain.entities.capability import CapabilitySpec
from src.domain.errors import CapabilityArgumentError

logger = logging.getLogger(__name__)

CapabilityHandler = Callable[..., Awaitable[Any]]

_JSON_SCHEMA_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "object": dict,
    "array": list,
}


def build_args_model(spec: CapabilitySpec) -> type[BaseModel]:
    """Pydantic model mirroring the spec's parameters; undeclared keys are ignored."""
    fields: dict[str, Any] = {}
    for name, param in spec.parameters.items():
        annotation = _JSON_SCHEMA_TYPES.get(param.type, Any)
        if name in spec.required:
            fields[name] = (annotation, Field(..., description=param.description))
        else:
            fields[name] = (
                Optional[annotation],
                Field(default=None, description=param.description),
            )
    return create_model(
        f"{spec.name}Args",
        __config__=ConfigDict(extra="ignore", coerce_numbers_to_str=True),
        **fields,
    )


def _describe(name: str, exc: ValidationError) -> str:
    problems = [
        f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
        for error in exc.errors()
    ]
    return f"Invalid arguments for {name}: {'; '.join(problems)}"


class CapabilityRegistry:
    """Maps capability names to their specs and handlers."""

    def __init__(self) -> None:
        self._specs: dict[str, CapabilitySpec] = {}
        self._args_models: dict[str, type[BaseModel]] = {}
        self._handlers: dict[str, CapabilityHandler] = {}

    def register(self, spec: CapabilitySpec, handler: CapabilityHandler) -> None:
        if spec.name in self._specs:
            raise ValueError(f"Capability already registered: {spec.name}")
        missing = [name for name in spec.required if name not in spec.parameters]
        if missing:
            raise ValueError(
                f"Capability {spec.name} requires undeclared parameter(s): {', '.join(missing)}"
            )
        self._specs[spec.name] = spec
        self._args_models[spec.name] = build_args_model(spec)
        self._handlers[spec.name] = handler
        logger.debug("Registered capability %s", spec.name)

    def resolve(self, name: str) -> Optional[CapabilityHandler]:
        """Return the handler registered under *name*, or None."""
        return self._handlers.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._specs)

    def tool_schemas(self) -> list[dict]:
        """Schemas for every capability, in registration order."""
        return [spec.to_tool_schema() for spec in self._specs.values()]

    def validate(self, name: str, args: Optional[dict]) -> dict:
        """Validate *args* against the capability's args model.

        Returns:
            The coerced arguments; optional parameters that were not given
            are left out.

        Raises:
            CapabilityArgumentError: on missing keys or uncoercible values.
        """
        try:
            validated = self._args_models[name].model_validate(args or {})
        except ValidationError as exc:
            raise CapabilityArgumentError(_describe(name, exc)) from exc
        return validated.model_dump(exclude_none=True)

    async def invoke(self, name: str, args: Optional[dict]) -> Any:
        """Validate *args* and run the capability, returning a payload.

        Returns:
            The handler's result on success, or ``{"error": <reason>}``.
        """
        handler = self.resolve(name)
        if handler is None:
            logger.warning("Unknown capability requested: %s", name)
            return {"error": f"Unknown tool: {name}"}

        try:
            validated = self.validate(name, args)
        except CapabilityArgumentError as exc:
            logger.warning("Rejected %s invocation: %s", name, exc)
            return {"error": str(exc)}

        logger.info("Executing %s with args: %s", name, validated)
        try:
            return await handler(**validated)
        except Exception as exc:
            logger.exception("Capability %s failed", name)
            return {"error": f"Capability {name} failed: {exc}"}
