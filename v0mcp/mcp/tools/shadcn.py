"""shadcn/ui component generation tool."""

from typing import Any, Literal, get_args

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import compose, fenced, join_or, numbered, section

ShadcnComponent = Literal[
    "accordion",
    "alert",
    "alert-dialog",
    "aspect-ratio",
    "avatar",
    "badge",
    "breadcrumb",
    "button",
    "calendar",
    "card",
    "carousel",
    "chart",
    "checkbox",
    "collapsible",
    "combobox",
    "command",
    "context-menu",
    "data-table",
    "date-picker",
    "dialog",
    "drawer",
    "dropdown-menu",
    "form",
    "hover-card",
    "input",
    "input-otp",
    "label",
    "menubar",
    "navigation-menu",
    "pagination",
    "popover",
    "progress",
    "radio-group",
    "resizable",
    "scroll-area",
    "select",
    "separator",
    "sheet",
    "sidebar",
    "skeleton",
    "slider",
    "sonner",
    "switch",
    "table",
    "tabs",
    "textarea",
    "toast",
    "toggle",
    "toggle-group",
    "tooltip",
    "typography",
]
SHADCN_CATALOGUE: tuple[str, ...] = get_args(ShadcnComponent)

ShadcnFeature = Literal[
    "responsive",
    "dark-mode",
    "validation",
    "accessibility",
    "animations",
    "state-management",
    "typescript",
    "testing",
]


class ShadcnComponentInput(ToolInput):
    """Arguments for ``shadcn_component_generator``."""

    component_name: str = Field(
        ...,
        min_length=1,
        description="Name of the component to generate (e.g. 'DataTable', 'LoginForm')",
    )
    component_type: ShadcnComponent = Field(..., description="Type of component to generate")
    shadcn_components: list[str] = Field(
        default_factory=list,
        description=(
            "shadcn/ui primitives to use (e.g. ['button', 'card', 'input']); "
            "empty means the whole catalogue"
        ),
    )
    features: list[ShadcnFeature] = Field(
        default_factory=lambda: ["responsive", "accessibility", "typescript"],
        description="Features to include in the component",
    )
    styling_approach: Literal["shadcn-default", "custom-variants", "compound-variants"] = Field(
        "shadcn-default", description="Styling approach for the component"
    )
    include_hooks: bool = Field(True, description="Include custom React hooks for component logic")

    def primitives(self) -> list[str]:
        return list(self.shadcn_components) or list(SHADCN_CATALOGUE)


@register_tool
class ShadcnComponentGenerator(ToolContract):
    name = "shadcn_component_generator"
    title = "shadcn/ui Component Generator"
    description = (
        "Generate sophisticated React components using shadcn/ui primitives "
        "with TypeScript and accessibility."
    )
    input_model = ShadcnComponentInput
    max_output_tokens = 4500
    error_prefix = "Error generating shadcn component"
    tags = frozenset({"code-generation", "react", "shadcn"})

    def render(self, params: ShadcnComponentInput) -> str:
        primitives = ", ".join(params.primitives())
        features = join_or(params.features, "none")
        return compose(
            "You are a senior React developer specializing in the shadcn/ui "
            "component library and modern UI patterns.",
            f"Your task: build a sophisticated {params.component_name} component "
            "using shadcn/ui primitives.",
            section(
                "Context",
                f"- Component name: {params.component_name}\n"
                f"- Component type: {params.component_type}\n"
                f"- shadcn/ui components: {primitives}\n"
                f"- Features: {features}\n"
                f"- Styling approach: {params.styling_approach}\n"
                f"- Include custom hooks: {'Yes' if params.include_hooks else 'No'}",
            ),
            section(
                "Deliverables",
                numbered(
                    [
                        "Main component: TypeScript React component using shadcn/ui.",
                        "Correct shadcn/ui imports.",
                        "Complete prop types and interfaces.",
                        f"Styling with the {params.styling_approach} approach and proper variants.",
                        "Accessibility: ARIA attributes, keyboard navigation, screen reader support.",
                        "Mobile-first responsive behavior.",
                        "Custom hooks for component-specific logic." if params.include_hooks else None,
                        "Usage examples with props.",
                        "Installation guide listing the shadcn/ui components to add.",
                    ]
                ),
            ),
            section("Output format", fenced("// Component implementation\n...", "tsx")),
            f"Implement these features: {features}. Follow shadcn/ui conventions, "
            "include error handling and loading states, and keep the total output "
            "under 350 lines.",
        )

    def describe(self, params: ShadcnComponentInput) -> dict[str, Any]:
        return {
            "component_name": params.component_name,
            "component_type": params.component_type,
            "shadcn_components": params.primitives(),
            "features": list(params.features),
            "styling_approach": params.styling_approach,
            "include_hooks": params.include_hooks,
        }
