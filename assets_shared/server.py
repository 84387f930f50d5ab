import asyncio
import json
from datetime import datetime
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from . import __version__
from .exports import AssetsLocator
from .generation import GenerationOrchestrator


class AssetsSharedMCPServer:

    def __init__(self):
        self._server = Server("assets-shared")
        self._register_handlers()

    def _register_handlers(self):
        self._server.list_tools()(self._list_tools)
        self._server.call_tool()(self._call_tool)

    async def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="generate_shared",
                description=(
                    "Regenerate shared.ts aggregator files. Writes one file per assets folder "
                    "under src/views (or only the given folders) and runs eslint --fix on them."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the front-end project root"
                        },
                        "roots": {
                            "type": "array",
                            "items": {"type": "string"},
                            "description": "Assets folders to regenerate, absolute or relative to project_path (default: all)"
                        }
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="list_assets_roots",
                description="List every assets folder found under the project's src/views.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the front-end project root"
                        }
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="health_check",
                description="Check server health status.",
                inputSchema={
                    "type": "object",
                    "properties": {}
                }
            ),
        ]

    async def _call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        if name == "generate_shared":
            return self._handle_generate_shared(arguments)
        elif name == "list_assets_roots":
            return self._handle_list_assets_roots(arguments)
        elif name == "health_check":
            return self._handle_health_check(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    def _handle_generate_shared(self, arguments: dict) -> list[TextContent]:
        """Run one generation pass and report what was written."""
        project_path = Path(arguments["project_path"])
        if not project_path.exists():
            return [TextContent(type="text", text=f"Path does not exist: {project_path}")]

        roots = arguments.get("roots")
        orchestrator = GenerationOrchestrator(project_path)
        try:
            result = orchestrator.run([Path(r) for r in roots] if roots else None)
        except FileNotFoundError as e:
            return [TextContent(type="text", text=f"Path does not exist: {e.filename}")]

        payload = {
            "files": [str(f) for f in result.files],
            "lint_status": result.lint.status.value,
            "hint": result.lint.hint,
        }
        return [TextContent(type="text", text=json.dumps(payload, indent=2))]

    def _handle_list_assets_roots(self, arguments: dict) -> list[TextContent]:
        project_path = Path(arguments["project_path"])
        try:
            roots = AssetsLocator(project_path).locate()
        except FileNotFoundError as e:
            return [TextContent(type="text", text=f"Path does not exist: {e.filename}")]
        return [TextContent(type="text", text=json.dumps([str(r) for r in roots], indent=2))]

    def _handle_health_check(self, arguments: dict) -> list[TextContent]:
        """Returns server status."""
        result = {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": __version__
        }
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())


def main():
    server = AssetsSharedMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
