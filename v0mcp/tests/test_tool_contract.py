import asyncio

import pytest

from v0mcp.mcp.registry import get_contract
from v0mcp.mcp.tools.accessibility import estimate_issue_count
from v0mcp.mcp.tools.shadcn import SHADCN_CATALOGUE

COMPONENT_ARGS = {"component_name": "Button", "theme_description": "minimal dark"}


@pytest.mark.asyncio
async def test_buffered_component_generation(runtime, provider):
    contract = get_contract("generate_component")

    result = await contract.handle({**COMPONENT_ARGS, "stream": False}, runtime=runtime)

    assert result.is_error is False
    assert result.text == "generated"
    assert result.metadata["streamed"] is False
    assert result.metadata["chunkCount"] == 0
    assert result.metadata["component_name"] == "Button"
    assert result.metadata["styling"] == "tailwind"
    assert result.metadata["usage"] == {"total_tokens": 42}
    assert provider.requests[0].max_output_tokens == 3000
    assert provider.requests[0].use_streaming is False


@pytest.mark.asyncio
async def test_streamed_component_generation_counts_fragments(runtime, provider):
    provider.fragments = ["export ", "function ", "Button() {}"]
    contract = get_contract("generate_component")

    result = await contract.handle(COMPONENT_ARGS, runtime=runtime)

    assert result.text == "export function Button() {}"
    assert result.metadata["streamed"] is True
    assert result.metadata["chunkCount"] == 3


@pytest.mark.asyncio
async def test_missing_required_field_never_reaches_provider(runtime, provider):
    contract = get_contract("generate_component")

    result = await contract.handle({"component_name": "Button"}, runtime=runtime)

    assert result.is_error is True
    assert len(result.content) == 1
    assert result.text.startswith("Error generating component:")
    assert "theme_description" in result.text
    assert provider.requests == []
    assert len(runtime.sessions) == 0


@pytest.mark.asyncio
async def test_unknown_arguments_are_rejected(runtime, provider):
    contract = get_contract("generate_component")

    result = await contract.handle({**COMPONENT_ARGS, "colour": "red"}, runtime=runtime)

    assert result.is_error is True
    assert "colour" in result.text
    assert provider.requests == []


@pytest.mark.asyncio
async def test_camel_case_arguments_are_accepted(runtime):
    contract = get_contract("generate_component")

    result = await contract.handle(
        {"componentName": "Card", "themeDescription": "glass", "stylingSystem": "emotion"},
        runtime=runtime,
    )

    assert result.is_error is False
    assert result.metadata["component_name"] == "Card"
    assert result.metadata["styling"] == "emotion"


@pytest.mark.asyncio
async def test_stream_failure_returns_error_without_partial_text(runtime, provider):
    provider.fragments = [f"chunk-{index} " for index in range(120)]
    provider.fail_after = 50
    contract = get_contract("generate_component")

    result = await contract.handle(COMPONENT_ARGS, runtime=runtime)

    assert result.is_error is True
    assert result.text == "Error generating component: connection reset by peer"
    assert "chunk-" not in result.text
    assert result.metadata["error_type"] == "ProviderError"


@pytest.mark.asyncio
async def test_cancelled_request_is_reported(runtime, provider):
    cancel_event = asyncio.Event()
    cancel_event.set()
    contract = get_contract("refactor_component")

    result = await contract.handle(
        {"source_code": "export const A = () => <div/>;"},
        runtime=runtime,
        cancel_event=cancel_event,
    )

    assert result.is_error is True
    assert "Request was cancelled" in result.text
    assert provider.requests == []


@pytest.mark.asyncio
async def test_unexpected_failure_becomes_internal_error(runtime, monkeypatch):
    contract = get_contract("generate_component")

    def broken_render(params):
        raise KeyError("template")

    monkeypatch.setattr(contract, "render", broken_render)

    result = await contract.handle(COMPONENT_ARGS, runtime=runtime)

    assert result.is_error is True
    assert result.metadata["error_type"] == "InternalError"


@pytest.mark.asyncio
async def test_calls_share_a_session(runtime):
    contract = get_contract("generate_component")

    first = await contract.handle(COMPONENT_ARGS, runtime=runtime)
    session_id = first.metadata["session_id"]
    second = await get_contract("tailwind_layout_generator").handle(
        {"layout_name": "DashboardLayout"}, runtime=runtime, session_id=session_id
    )

    metrics = second.metadata["performance_metrics"]
    assert second.metadata["session_id"] == session_id
    assert metrics["tools_used"] == 2
    assert metrics["tool_names"] == ["generate_component", "tailwind_layout_generator"]


@pytest.mark.asyncio
async def test_unknown_session_id_starts_that_session(runtime):
    contract = get_contract("generate_component")

    result = await contract.handle(COMPONENT_ARGS, runtime=runtime, session_id="client-42")

    assert result.metadata["session_id"] == "client-42"
    assert runtime.sessions.has_session("client-42")


@pytest.mark.asyncio
async def test_webapp_defaults_to_buffered(runtime, provider):
    result = await get_contract("generate_webapp").handle(
        {"app_description": "todo list", "features": ["authentication"]}, runtime=runtime
    )

    assert result.metadata["streamed"] is False
    assert provider.requests[0].max_output_tokens == 5000
    assert "authentication" in provider.requests[0].prompt_text


@pytest.mark.asyncio
async def test_accessibility_audit_estimates_issues(runtime):
    code = "<img src='a.png'>" * 10

    result = await get_contract("accessibility_auditor").handle(
        {"source_code": code, "framework": "html"}, runtime=runtime
    )

    assert result.metadata["issues_found"] == estimate_issue_count(code)
    assert result.metadata["code_length"] == len(code)


def test_issue_estimate_has_a_floor():
    assert estimate_issue_count("<b>") == 1
    assert estimate_issue_count("x" * 500) == 10


@pytest.mark.asyncio
async def test_theme_rejects_invalid_hex(runtime, provider):
    result = await get_contract("css_theme_generator").handle(
        {"theme_name": "Corporate", "primary_color": "blue"}, runtime=runtime
    )

    assert result.is_error is True
    assert result.text.startswith("Error generating theme:")
    assert provider.requests == []


@pytest.mark.asyncio
async def test_shadcn_uses_full_catalogue_by_default(runtime, provider):
    result = await get_contract("shadcn_component_generator").handle(
        {"component_name": "LoginForm", "component_type": "form"}, runtime=runtime
    )

    assert result.metadata["shadcn_components"] == list(SHADCN_CATALOGUE)
    assert "data-table" in provider.requests[0].prompt_text


def test_render_is_deterministic():
    contract = get_contract("refactor_component")
    params = contract.validate({"source_code": "const A = 1;", "include_tests": True})

    first = contract.render(params)

    assert first == contract.render(params)
    assert "const A = 1;" in first
    assert "Test updates" in first
    assert "PRESERVE ALL FUNCTIONALITY." in first


def test_input_schema_uses_field_names():
    schema = get_contract("generate_component").input_schema()

    assert set(schema["required"]) == {"component_name", "theme_description"}
    assert schema["properties"]["stream"]["default"] is True


@pytest.mark.asyncio
async def test_empty_buffered_output_is_an_error(runtime, provider):
    provider.text = ""

    result = await get_contract("generate_component").handle(
        {**COMPONENT_ARGS, "stream": False}, runtime=runtime
    )

    assert result.is_error is True
    assert result.text == "Error generating component: v0 returned an empty completion"
