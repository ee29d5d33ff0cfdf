"""Reusable prompt templates returned verbatim to the caller.

These are never executed server-side; the tools render their own prompts.
Arguments arrive as strings, so list- and flag-like values are plain text.
"""

from __future__ import annotations

from typing import Callable

from .registry import mcp

_REQUIREMENTS_FOOTER = (
    "Requirements:\n"
    "- Assume React 18+ and TypeScript 5+ with strict mode\n"
    "- Use semantic HTML with ARIA only where necessary\n"
    "- Begin when ready"
)


def _context(**values: str) -> str:
    lines = [f"- {key.replace('_', ' ').capitalize()}: {value}" for key, value in values.items()]
    return "Context:\n" + "\n".join(lines)


def accessibility_auditor(
    code: str,
    audit_level: str = "comprehensive",
    framework: str = "react",
    focus_areas: str = "all",
    include_fixes: str = "true",
    severity_filter: str = "all",
) -> str:
    """Comprehensive accessibility audit of HTML/JSX code."""

    return "\n\n".join(
        [
            "You are a senior accessibility expert specializing in WCAG compliance "
            "and inclusive design.\nYour task: perform a comprehensive accessibility "
            "audit on the provided code.",
            _context(
                audit_level=audit_level,
                framework=framework,
                focus_areas=focus_areas,
                include_fixes=include_fixes,
                severity_filter=severity_filter,
            ),
            f"Code to audit:\n```\n{code}\n```",
            "Deliverables: accessibility issues, WCAG compliance, severity assessment, "
            "impact analysis, screen reader impact, keyboard navigation, color and "
            "contrast, semantic HTML, fixed code (if requested), testing "
            "recommendations and best practices.",
            "Output format:\n## Accessibility Audit Results\n\n### Issues Found\n...",
        ]
    )


def generate_component(
    component_name: str,
    component_description: str,
    theme: str = "modern",
    styling_system: str = "tailwind",
    required_props: str = "",
    optional_props: str = "",
    features: str = "",
) -> str:
    """Themed, fully-typed React/Next.js component with customizable styling."""

    return "\n\n".join(
        [
            "You are a senior front-end engineer who specializes in React 18, "
            "TypeScript 5 and modern component architecture.\n"
            "Your task: build a reusable component.",
            _context(
                component_name=component_name,
                description=component_description,
                theme=theme,
                styling_system=styling_system,
                required_props=required_props,
                optional_props=optional_props,
                features=features,
            ),
            "Deliverables: component file, styling matching the theme, documented "
            "props interface, usage example, accessibility, responsive design from "
            "320px to 1440px+, best-practice notes.",
            "Output format:\n```tsx\n// Component implementation\n...\n```\n"
            "No explanatory text outside the code blocks. Keep the total output "
            "under 250 lines.",
        ]
    )


def component_refactor(
    code: str,
    target_framework: str = "react",
    typescript_level: str = "strict",
    component_type: str = "functional",
    include_tests: str = "false",
    preserve_functionality: str = "true",
    focus_areas: str = "all",
) -> str:
    """Refactor a React component following modern best practices."""

    return "\n\n".join(
        [
            "You are a senior React engineer specializing in code refactoring and "
            "modern best practices.\nYour task: refactor the provided React component "
            "with the specified focus areas.",
            _context(
                target_framework=target_framework,
                typescript_level=typescript_level,
                component_type=component_type,
                include_tests=include_tests,
                preserve_functionality=preserve_functionality,
                focus_areas=focus_areas,
            ),
            f"Original code:\n```tsx\n{code}\n```",
            "Ensure compatibility with the target framework's best practices and "
            "preserve functionality unless told otherwise.",
        ]
    )


def css_theme_generator(
    theme_name: str,
    primary_color: str,
    secondary_color: str = "",
    neutral_color: str = "",
    border_radius: str = "0.5rem",
    output_format: str = "both",
    generate_tailwind_config: str = "true",
    include_dark_mode: str = "true",
) -> str:
    """Accessible CSS theme with design tokens."""

    return "\n\n".join(
        [
            "You are a senior UI/UX designer specializing in design systems and "
            "accessible color palettes.\nYour task: design a modern, accessible CSS theme.",
            _context(
                theme_name=theme_name,
                primary_color=primary_color,
                secondary_color=secondary_color,
                neutral_color=neutral_color,
                border_radius=border_radius,
                output_format=output_format,
                generate_tailwind_config=generate_tailwind_config,
                include_dark_mode=include_dark_mode,
            ),
            "Requirements:\n"
            "- Ensure WCAG AA compliance (4.5:1 contrast ratio minimum)\n"
            "- Provide semantic color names (success, warning, error, info)\n"
            "- Include hover/focus states\n"
            "- Keep code snippets minimal and ready to paste",
        ]
    )


def shadcn_component_generator(
    component_name: str,
    component_type: str,
    shadcn_components: str,
    features: str = "",
    styling_approach: str = "variants",
    include_custom_hooks: str = "false",
    accessibility_level: str = "enhanced",
) -> str:
    """Component built from shadcn/ui primitives."""

    return "\n\n".join(
        [
            "You are a senior React developer specializing in the shadcn/ui component "
            "library and modern UI patterns.\nYour task: build a sophisticated "
            "component using shadcn/ui primitives.",
            _context(
                component_name=component_name,
                component_type=component_type,
                shadcn_components=shadcn_components,
                features=features,
                styling_approach=styling_approach,
                include_custom_hooks=include_custom_hooks,
                accessibility_level=accessibility_level,
            ),
            _REQUIREMENTS_FOOTER.replace(
                "- Begin when ready",
                "- Follow shadcn/ui patterns and conventions\n"
                "- Keep total output under 350 lines\n- Begin when ready",
            ),
        ]
    )


def tailwind_layout_generator(
    layout_name: str,
    layout_variants: str,
    pages_to_scaffold: str = "",
    include_dark_mode: str = "true",
    use_shadcn_ui: str = "false",
    responsive_breakpoints: str = "sm,md,lg,xl",
    navigation_type: str = "navbar",
) -> str:
    """Responsive layout built with Tailwind CSS."""

    return "\n\n".join(
        [
            "You are a senior front-end engineer specializing in responsive layout "
            "design with Tailwind CSS.\nYour task: build a responsive, accessible "
            "layout component.",
            _context(
                layout_name=layout_name,
                layout_variants=layout_variants,
                pages_to_scaffold=pages_to_scaffold,
                dark_mode=include_dark_mode,
                use_shadcn_ui=use_shadcn_ui,
                responsive_breakpoints=responsive_breakpoints,
                navigation_type=navigation_type,
            ),
            _REQUIREMENTS_FOOTER.replace(
                "- Begin when ready",
                "- Implement responsive design from 320px to 1440px+\n"
                "- Keep total output under 300 lines\n- Begin when ready",
            ),
        ]
    )


def webapp_generator(
    app_description: str,
    framework: str = "nextjs",
    features: str = "",
    styling_system: str = "tailwind",
    database_type: str = "",
    deployment_target: str = "vercel",
    include_auth: str = "false",
    include_api: str = "true",
) -> str:
    """Complete web application scaffold."""

    return "\n\n".join(
        [
            "You are an expert full-stack developer specializing in modern web "
            "application development.\nYour task: create a complete web application "
            "based on the requirements.",
            _context(
                application=app_description,
                framework=framework,
                features=features,
                styling=styling_system,
                database=database_type,
                deployment=deployment_target,
                authentication=include_auth,
                api_routes=include_api,
            ),
            "Deliverables: project structure, core components, API routes (if "
            "requested), database schema, authentication (if requested), "
            "configuration, documentation, best practices.",
            "Requirements:\n- Use modern best practices\n- Include proper TypeScript "
            "typing\n- Implement responsive design\n- Follow security guidelines\n"
            "- Provide production-ready code",
        ]
    )


PROMPT_TEMPLATES: dict[str, tuple[str, Callable[..., str]]] = {
    "accessibility-auditor": ("Accessibility Auditor", accessibility_auditor),
    "generate-component": ("Component Generator", generate_component),
    "component-refactor": ("Component Refactor", component_refactor),
    "css-theme-generator": ("CSS Theme Generator", css_theme_generator),
    "shadcn-component-generator": ("shadcn Component Generator", shadcn_component_generator),
    "tailwind-layout-generator": ("Tailwind Layout Generator", tailwind_layout_generator),
    "webapp-generator": ("Web App Generator", webapp_generator),
}

for _name, (_title, _template) in PROMPT_TEMPLATES.items():
    mcp.prompt(name=_name, description=f"{_title}: {_template.__doc__}")(_template)
