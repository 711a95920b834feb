"""
Registration of dictionary-described tools with FastMCP.

Each tool is described by a dict with ``name``, ``description``,
``inputSchema`` (JSON Schema generated from ``inputModel``), the pydantic
``inputModel`` itself and an async ``handler`` taking the raw argument dict
and returning text.
``HandlerTool`` adapts such a descriptor to fastmcp's ``Tool`` interface.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[str]]


class HandlerTool(Tool):
    """A fastmcp tool whose result is the text returned by ``handler``."""

    input_model: type[BaseModel] = Field(exclude=True)
    handler: ToolHandler = Field(exclude=True)

    @classmethod
    def from_descriptor(cls, descriptor: dict[str, Any]) -> "HandlerTool":
        return cls(
            name=descriptor["name"],
            description=descriptor["description"],
            parameters=descriptor["inputSchema"],
            input_model=descriptor["inputModel"],
            handler=descriptor["handler"],
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            self.input_model.model_validate(arguments)
        except ValidationError as e:
            logger.warning("Invalid arguments for %s: %s", self.name, e)
            raise ToolError(f"Invalid arguments for {self.name}: {e}") from e

        # Failures past this point come from the tool itself
        text = await self.handler(arguments)
        return ToolResult(content=[TextContent(type="text", text=text)])


def register_tools(mcp: FastMCP, tools: list[dict[str, Any]]) -> None:
    for tool in tools:
        logger.debug("Registering tool: %s", tool["name"])
        mcp.add_tool(HandlerTool.from_descriptor(tool))

    logger.info("Registered %d tools", len(tools))
