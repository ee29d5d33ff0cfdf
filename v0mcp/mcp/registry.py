"""FastMCP server instance and the tool contract table."""

from __future__ import annotations

from typing import Any, Iterator, TypeVar

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool, ToolResult
from mcp.types import TextContent, ToolAnnotations

from ..core.config import SERVER_NAME
from ..core.exceptions import UnknownToolError
from .contract import ToolContract

mcp = FastMCP(
    name=SERVER_NAME,
    instructions=(
        "Generate React/Next.js components, layouts and themes, refactor "
        "components and audit accessibility using the v0 model. Read "
        "v0://docs for the tool catalogue."
    ),
)

_CONTRACTS: dict[str, ToolContract] = {}

ContractT = TypeVar("ContractT", bound=type[ToolContract])


class ContractTool(Tool):
    """FastMCP tool that routes a call through its registered contract."""

    @classmethod
    def from_contract(cls, contract: ToolContract) -> "ContractTool":
        return cls(
            name=contract.name,
            description=contract.description,
            parameters=contract.input_schema(),
            annotations=ToolAnnotations(
                title=contract.title,
                readOnlyHint=True,
                openWorldHint=True,
            ),
            tags=set(contract.tags),
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        envelope = await get_contract(self.name).handle(arguments)
        if envelope.is_error:
            raise ToolError(envelope.text)
        return ToolResult(
            content=[TextContent(type="text", text=block.text) for block in envelope.content],
            structured_content=envelope.metadata,
        )


def register_tool(cls: ContractT) -> ContractT:
    """Class decorator: instantiate a contract and expose it over MCP."""

    contract = cls()
    if contract.name in _CONTRACTS:
        raise ValueError(f"Tool already registered: {contract.name}")
    _CONTRACTS[contract.name] = contract
    mcp.add_tool(ContractTool.from_contract(contract))
    return cls


def get_contract(name: str) -> ToolContract:
    try:
        return _CONTRACTS[name]
    except KeyError as exc:
        raise UnknownToolError(name) from exc


def iter_contracts() -> Iterator[ToolContract]:
    return iter(_CONTRACTS.values())
