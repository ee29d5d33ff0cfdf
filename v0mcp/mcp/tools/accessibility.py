"""Accessibility audit tool."""

from typing import Any, Literal

from pydantic import Field

from ..contract import ToolContract, ToolInput
from ..registry import register_tool
from .utils import compose, fenced, join_or, numbered, section

FocusArea = Literal[
    "keyboard-navigation",
    "screen-readers",
    "color-contrast",
    "semantic-html",
    "aria-attributes",
    "focus-management",
    "responsive-design",
    "forms",
    "images",
    "multimedia",
]

# Rough density of findings per character of audited markup.
_CHARS_PER_ISSUE = 50


class AccessibilityAuditInput(ToolInput):
    """Arguments for ``accessibility_auditor``."""

    source_code: str = Field(
        ..., min_length=1, description="HTML/JSX code to audit for accessibility issues"
    )
    audit_level: Literal["basic", "comprehensive", "wcag-aa", "wcag-aaa"] = Field(
        "comprehensive", description="Level of accessibility audit to perform"
    )
    framework: Literal["html", "react", "vue", "angular", "svelte"] = Field(
        "react", description="Framework/technology used in the code"
    )
    focus_areas: list[FocusArea] = Field(
        default_factory=lambda: ["keyboard-navigation", "screen-readers", "aria-attributes"],
        description="Specific accessibility areas to focus on",
    )
    include_fixes: bool = Field(True, description="Include code fixes and improvements")
    severity_filter: Literal["all", "critical", "high", "medium"] = Field(
        "all", description="Filter issues by severity level"
    )

    @property
    def code_language(self) -> str:
        return "jsx" if self.framework == "react" else "html"


def estimate_issue_count(source_code: str) -> int:
    return max(1, len(source_code) // _CHARS_PER_ISSUE)


@register_tool
class AccessibilityAuditor(ToolContract):
    name = "accessibility_auditor"
    title = "Accessibility Auditor"
    description = (
        "Perform comprehensive accessibility audits on HTML/JSX code with "
        "WCAG compliance checking."
    )
    input_model = AccessibilityAuditInput
    max_output_tokens = 4000
    error_prefix = "Error performing accessibility audit"
    tags = frozenset({"accessibility", "audit", "wcag"})

    def render(self, params: AccessibilityAuditInput) -> str:
        focus = join_or(params.focus_areas, "all areas")
        fixes = (
            "Yes, provide code improvements" if params.include_fixes else "No, analysis only"
        )
        fixed_code = (
            section("Fixed Code", fenced("...", params.code_language))
            if params.include_fixes
            else ""
        )
        return compose(
            "You are a senior accessibility expert specializing in WCAG compliance "
            "and inclusive design.",
            "Your task: perform an accessibility audit on the provided code.",
            section(
                "Context",
                f"- Audit level: {params.audit_level}\n"
                f"- Framework: {params.framework}\n"
                f"- Focus areas: {focus}\n"
                f"- Include fixes: {fixes}\n"
                f"- Severity filter: {params.severity_filter}",
            ),
            section("Code to audit", fenced(params.source_code, params.code_language)),
            section(
                "Deliverables",
                numbered(
                    [
                        "Accessibility issues: detailed list of violations found.",
                        f"WCAG compliance: specific guideline violations ({params.audit_level} level).",
                        "Severity assessment: critical, high, medium, low.",
                        "Impact analysis: how the issues affect users with disabilities.",
                        "Screen reader impact: how content is announced to assistive technology.",
                        "Keyboard navigation: tab order and keyboard accessibility issues.",
                        "Color and contrast concerns.",
                        "Semantic HTML: proper element usage and structure.",
                        "Fixed code: corrected version with improvements." if params.include_fixes else None,
                        "Testing recommendations for the improvements.",
                        f"Best practices for {params.framework}.",
                    ]
                ),
            ),
            section(
                "Output format",
                "## Accessibility Audit Results\n\n"
                f"### Issues Found ({params.severity_filter} severity)\n...",
            ),
            fixed_code,
            f"Focus on {focus}, follow WCAG {params.audit_level.upper()} guidelines, "
            "and give actionable recommendations with specific code examples.",
        )

    def describe(self, params: AccessibilityAuditInput) -> dict[str, Any]:
        return {
            "audit_level": params.audit_level,
            "framework": params.framework,
            "focus_areas": list(params.focus_areas),
            "include_fixes": params.include_fixes,
            "severity_filter": params.severity_filter,
            "code_length": len(params.source_code),
            "issues_found": estimate_issue_count(params.source_code),
        }
