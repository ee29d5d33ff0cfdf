"""CSS theme generation tool."""

from typing import Annotated, Any, Literal

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import HEX_COLOR_PATTERN, compose, fenced, numbered, section

HexColor = Annotated[str, Field(pattern=HEX_COLOR_PATTERN)]


class CssThemeInput(ToolInput):
    """Arguments for ``css_theme_generator``."""

    theme_name: str = Field(
        ..., min_length=1, description="Human-readable theme name, e.g. 'Corporate Blue'"
    )
    primary_color: HexColor = Field(
        ...,
        description="Primary brand color in HEX format (3-8 digits)",
    )
    secondary_color: HexColor | None = Field(
        None, description="Secondary accent color in HEX format"
    )
    neutral_color: HexColor | None = Field(
        None, description="Neutral (background) color in HEX format"
    )
    border_radius: str = Field("0.5rem", description="Border radius applied across components")
    generate_tailwind_config: bool = Field(
        True, description="Generate a Tailwind theme.extend configuration"
    )
    output_format: Literal["css-vars", "tailwind-config", "both"] = Field(
        "css-vars", description="Desired output format for the theme tokens"
    )


@register_tool
class CssThemeGenerator(ToolContract):
    name = "css_theme_generator"
    title = "CSS Theme Generator"
    description = "Generate accessible CSS/Tailwind themes with design tokens and samples."
    input_model = CssThemeInput
    max_output_tokens = 3500
    error_prefix = "Error generating theme"
    tags = frozenset({"design-system", "css", "tailwind"})

    def render(self, params: CssThemeInput) -> str:
        context = [
            f"- Theme name: {params.theme_name}",
            f"- Primary color: {params.primary_color}",
        ]
        if params.secondary_color:
            context.append(f"- Secondary color: {params.secondary_color}")
        if params.neutral_color:
            context.append(f"- Neutral color: {params.neutral_color}")
        context += [
            f"- Border radius: {params.border_radius}",
            f"- Output format: {params.output_format}",
            f"- Generate Tailwind config: {'Yes' if params.generate_tailwind_config else 'No'}",
        ]
        return compose(
            "You are a senior UI/UX designer specializing in design systems and "
            "accessible color palettes.",
            f'Your task: design a modern, accessible CSS theme called "{params.theme_name}".',
            section("Context", "\n".join(context)),
            section(
                "Deliverables",
                numbered(
                    [
                        "Design tokens: scalable color palette, radius, shadows, typography.",
                        "Accessible colors: AA and AAA contrast ratios with examples.",
                        f"Theme tokens in {params.output_format} format.",
                        "Tailwind config: theme.extend configuration snippet."
                        if params.generate_tailwind_config
                        else None,
                        "Usage examples with React and Tailwind.",
                        "Dark mode strategy using prefers-color-scheme.",
                        "Light/dark variants and semantic colors.",
                        "Implementation guide and best practices.",
                    ]
                ),
            ),
            section("Output format", fenced("/* Theme tokens */\n...", "css")),
            "Ensure WCAG AA compliance (4.5:1 minimum contrast), provide semantic "
            "color names (success, warning, error, info) and include hover/focus states.",
        )

    def describe(self, params: CssThemeInput) -> dict[str, Any]:
        return {
            "theme_name": params.theme_name,
            "primary_color": params.primary_color,
            "secondary_color": params.secondary_color,
            "neutral_color": params.neutral_color,
            "border_radius": params.border_radius,
            "output_format": params.output_format,
            "generate_tailwind_config": params.generate_tailwind_config,
        }
