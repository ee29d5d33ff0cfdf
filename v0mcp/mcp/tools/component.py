"""React component generation and refactoring tools."""

from typing import Any, Literal

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import compose, fenced, join_or, numbered, section

StylingSystem = Literal["tailwind", "css-modules", "styled-components", "emotion"]
RefactorGoal = Literal[
    "performance",
    "accessibility",
    "maintainability",
    "type-safety",
    "modern-patterns",
    "hooks-migration",
    "state-management",
    "testing",
]


class ComponentGeneratorInput(ToolInput):
    """Arguments for ``generate_component``."""

    component_name: str = Field(
        ...,
        min_length=1,
        description="Name of the component to generate (e.g. 'Button', 'Card', 'Modal')",
    )
    theme_description: str = Field(
        ..., min_length=1, description="Visual theme for the component"
    )
    props: list[str] = Field(
        default_factory=list,
        description="Component props (e.g. ['title', 'onClick', 'disabled'])",
    )
    styling_system: StylingSystem = Field("tailwind", description="Styling approach to use")


@register_tool
class ComponentGenerator(ToolContract):
    name = "generate_component"
    title = "Component Generator"
    description = (
        "Generate themed, fully-typed React/Next.js components with Tailwind "
        "or other styling options."
    )
    input_model = ComponentGeneratorInput
    max_output_tokens = 3000
    error_prefix = "Error generating component"
    tags = frozenset({"code-generation", "react", "component"})

    def render(self, params: ComponentGeneratorInput) -> str:
        props = join_or((f"`{prop}`" for prop in params.props), "None, create sensible defaults")
        return compose(
            "You are a senior front-end engineer who specializes in React 18, "
            "TypeScript 5 and modern component architecture.",
            f"Your task: build a reusable {params.component_name} component.",
            section(
                "Context",
                f"- Theme: {params.theme_description}\n"
                f"- Styling system: {params.styling_system} (use its idiomatic patterns)\n"
                f"- Required props: {props}",
            ),
            section(
                "Deliverables",
                numbered(
                    [
                        f"`src/{params.component_name}.tsx`: complete functional component "
                        "in TypeScript with strict typing.",
                        f"Styling that matches the {params.theme_description} aesthetic, "
                        "including dark-mode support if relevant.",
                        f"`interface {params.component_name}Props` with each prop documented "
                        "by a concise JSDoc comment.",
                        "A minimal yet complete usage example (e.g. in App.tsx).",
                        "Accessibility: semantic HTML, ARIA where required, full keyboard support.",
                        "Responsive design from 320 px mobile to 1440 px desktop and beyond.",
                        "Best-practice notes: memoization, composition, sensible defaults.",
                    ]
                ),
            ),
            section("Output format", fenced("// 1. Component\n...", "tsx")),
            "No explanatory text outside the code blocks. Keep the total output "
            "under 250 lines.",
        )

    def describe(self, params: ComponentGeneratorInput) -> dict[str, Any]:
        return {
            "component_name": params.component_name,
            "theme": params.theme_description,
            "styling": params.styling_system,
            "props_count": len(params.props),
        }


class ComponentRefactorInput(ToolInput):
    """Arguments for ``refactor_component``."""

    source_code: str = Field(..., min_length=1, description="React component code to refactor")
    refactor_goals: list[RefactorGoal] = Field(
        default_factory=lambda: ["performance", "maintainability", "modern-patterns"],
        description="Refactoring goals and focus areas",
    )
    target_framework: Literal["react", "next", "remix", "gatsby"] = Field(
        "react", description="Target React framework"
    )
    typescript_level: Literal["basic", "intermediate", "advanced", "strict"] = Field(
        "intermediate", description="TypeScript strictness level"
    )
    component_type: Literal["functional", "class", "mixed"] = Field(
        "functional", description="Preferred component type"
    )
    include_tests: bool = Field(False, description="Include test refactoring suggestions")
    preserve_functionality: bool = Field(
        True, description="Ensure functionality remains unchanged"
    )


@register_tool
class ComponentRefactor(ToolContract):
    name = "refactor_component"
    title = "Component Refactor"
    description = (
        "Refactor existing React components for performance, maintainability, "
        "type-safety and accessibility."
    )
    input_model = ComponentRefactorInput
    max_output_tokens = 4500
    error_prefix = "Error refactoring component"
    tags = frozenset({"code-refactoring", "react", "typescript"})

    def render(self, params: ComponentRefactorInput) -> str:
        goals = join_or(params.refactor_goals, "general quality")
        preserve = (
            "CRITICAL: maintain all existing behavior"
            if params.preserve_functionality
            else "Functionality changes allowed"
        )
        return compose(
            "You are a senior React engineer specializing in code refactoring "
            "and modern best practices.",
            f"Your task: refactor the provided React component for "
            f"{params.target_framework} with focus on: {goals}.",
            section(
                "Context",
                f"- Target framework: {params.target_framework}\n"
                f"- TypeScript level: {params.typescript_level}\n"
                f"- Component type: {params.component_type} components preferred\n"
                f"- Include tests: {'Yes' if params.include_tests else 'No'}\n"
                f"- Preserve functionality: {preserve}",
            ),
            section("Original code", fenced(params.source_code, "tsx")),
            section(
                "Deliverables",
                numbered(
                    [
                        "Refactored component: modern, optimized version.",
                        "Key changes: summary of the improvements made.",
                        "Performance optimizations: React.memo, useMemo, useCallback usage.",
                        "Modern patterns: hooks, composition, custom hooks.",
                        "TypeScript improvements: better typing, interfaces, generics.",
                        "Accessibility enhancements: ARIA attributes, keyboard navigation.",
                        "State management: optimal state handling patterns.",
                        "Test updates: refactored test suggestions." if params.include_tests else None,
                        "Migration guide: step-by-step refactoring process.",
                    ]
                ),
            ),
            section("Output format", fenced("// Refactored component\n...", "tsx")),
            f"Ensure compatibility with {params.target_framework} best practices.",
            "PRESERVE ALL FUNCTIONALITY." if params.preserve_functionality else "",
        )

    def describe(self, params: ComponentRefactorInput) -> dict[str, Any]:
        return {
            "refactor_goals": list(params.refactor_goals),
            "target_framework": params.target_framework,
            "typescript_level": params.typescript_level,
            "component_type": params.component_type,
            "include_tests": params.include_tests,
            "preserve_functionality": params.preserve_functionality,
            "code_length": len(params.source_code),
        }
