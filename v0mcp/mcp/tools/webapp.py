"""Full web application generation tool."""

from typing import Any, Literal

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import compose, join_or


class WebappInput(ToolInput):
    """Arguments for ``generate_webapp``."""

    app_description: str = Field(
        ..., min_length=1, description="Description of the web application to generate"
    )
    framework: Literal["nextjs", "react", "vue", "svelte"] = Field(
        "nextjs", description="Preferred framework"
    )
    features: list[str] = Field(
        default_factory=list,
        description="Specific features to include (e.g. ['authentication', 'database', 'api'])",
    )
    stream: bool = Field(False, description="Whether to stream the response")


@register_tool
class WebappGenerator(ToolContract):
    name = "generate_webapp"
    title = "Web App Generator"
    description = "Generate complete web applications with AI assistance."
    input_model = WebappInput
    max_output_tokens = 5000
    error_prefix = "Error generating web application"
    tags = frozenset({"code-generation", "webapp"})

    def render(self, params: WebappInput) -> str:
        features = join_or(params.features, "")
        return compose(
            f"Create a {params.framework} application: {params.app_description}",
            f"\nRequired features: {features}" if features else "",
            "\nPlease provide complete, production-ready code with proper file "
            "structure, dependencies, and best practices.",
        )

    def describe(self, params: WebappInput) -> dict[str, Any]:
        return {
            "framework": params.framework,
            "features": list(params.features),
        }
