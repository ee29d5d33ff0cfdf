"""Tailwind layout generation tool."""

from typing import Any, Literal

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import compose, fenced, join_or, numbered, section

LayoutVariant = Literal[
    "sidebar-left",
    "sidebar-right",
    "header-only",
    "header-footer",
    "split-pane",
    "grid",
]


class TailwindLayoutInput(ToolInput):
    """Arguments for ``tailwind_layout_generator``."""

    layout_name: str = Field(
        ..., min_length=1, description="Name for the layout component (e.g. 'DashboardLayout')"
    )
    pages: list[str] = Field(
        default_factory=list,
        description="Top-level pages to scaffold (e.g. ['dashboard', 'settings'])",
    )
    layout_variants: list[LayoutVariant] = Field(
        default_factory=lambda: ["header-footer"],
        description="Preferred layout variants to generate",
    )
    dark_mode: bool = Field(True, description="Include dark-mode ready classes and examples")
    use_shadcn: bool = Field(
        False, description="Leverage shadcn/ui components for primitives (Button, Card, ...)"
    )


@register_tool
class TailwindLayoutGenerator(ToolContract):
    name = "tailwind_layout_generator"
    title = "Tailwind Layout Generator"
    description = (
        "Generate responsive React/Next.js layout components using Tailwind CSS "
        "(optionally shadcn/ui)."
    )
    input_model = TailwindLayoutInput
    max_output_tokens = 4000
    error_prefix = "Error generating layout"
    tags = frozenset({"code-generation", "layout", "tailwind"})

    def render(self, params: TailwindLayoutInput) -> str:
        return compose(
            "You are a senior front-end engineer specializing in responsive layout "
            "design with Tailwind CSS.",
            f"Your task: build a responsive, accessible layout component named "
            f"{params.layout_name}.",
            section(
                "Context",
                f"- Layout name: {params.layout_name}\n"
                f"- Layout variants: {join_or(params.layout_variants, 'header-footer')}\n"
                f"- Pages to scaffold: {join_or(params.pages, 'None')}\n"
                "- Dark mode: "
                f"{'Include dark mode variants' if params.dark_mode else 'Light mode only'}\n"
                "- Use shadcn/ui: "
                f"{'Leverage shadcn/ui primitives' if params.use_shadcn else 'Pure Tailwind CSS'}",
            ),
            section(
                "Deliverables",
                numbered(
                    [
                        "Layout component: TypeScript React component with Tailwind classes.",
                        "Navigation: example navigation bar for mobile and desktop.",
                        "Accessibility: ARIA roles and keyboard navigation hints.",
                        "Responsive behavior: breakpoints for sm, md and lg screens.",
                        f"Page scaffolding: boilerplate Next.js pages ({len(params.pages)} entries).",
                        "Dark-mode strategy: tailwind 'dark:' classes and prefers-color-scheme."
                        if params.dark_mode
                        else None,
                        "shadcn/ui integration with proper component usage." if params.use_shadcn else None,
                        "Suggested folder structure.",
                        f"Usage example wrapping pages with {params.layout_name}.",
                    ]
                ),
            ),
            section("Output format", fenced("// Layout component\n...", "tsx")),
            "Assume React 18+ and TypeScript 5+ in strict mode, use semantic HTML, "
            "support 320px to 1440px+ and keep the total output under 300 lines.",
        )

    def describe(self, params: TailwindLayoutInput) -> dict[str, Any]:
        return {
            "layout_name": params.layout_name,
            "pages_count": len(params.pages),
            "layout_variants": list(params.layout_variants),
            "dark_mode": params.dark_mode,
            "use_shadcn": params.use_shadcn,
        }
