"""
Domain entities describing invocable capabilities (tools).
Zero external dependencies; pure Python dataclasses only.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParameterSpec:
    type: str
    description: str


@dataclass(frozen=True)
class CapabilitySpec:
    name: str
    description: str
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    required: tuple[str, ...] = ()

    def to_tool_schema(self) -> dict:
        """Render as an OpenAI-style function schema, the format bind_tools() accepts."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        name: {"type": param.type, "description": param.description}
                        for name, param in self.parameters.items()
                    },
                    "required": list(self.required),
                },
            },
        }
