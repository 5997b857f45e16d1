"""
FAQsimple MCP Server - Main facade

Registers tools and resources on the MCP SDK's low-level server and serves
them over stdio.
"""

from typing import Any, Iterable

import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from faqsimple_mcp import __version__
from faqsimple_mcp.api.client import FAQsimpleClient
from faqsimple_mcp.models import HealthStatus

from .resources import MIME_TYPE, FAQResources
from .tools import FAQTools

SERVER_NAME = "mcp-server-faqsimple"


class FAQsimpleMCPServer:
    """
    MCP server exposing a FAQsimple knowledge base

    Usage:
        async with FAQsimpleClient(settings) as client:
            server = FAQsimpleMCPServer(client)
            await server.run()
    """

    def __init__(self, client: FAQsimpleClient, version: str = __version__) -> None:
        self.client: FAQsimpleClient = client
        self.version: str = version
        self.tools = FAQTools(client)
        self.resources = FAQResources(client)
        self.server: Server = self._build_server()

        logger.info(f"FAQsimple MCP Server initialized (v{version})")

    def _build_server(self) -> Server:
        server: Server = Server(SERVER_NAME, version=self.version)

        @server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return self.tools.list_tools()

        @server.call_tool()
        async def _call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
            text: str = await self.tools.call(name, arguments)
            return [types.TextContent(type="text", text=text)]

        @server.list_resources()
        async def _list_resources() -> list[types.Resource]:
            return await self.resources.list_resources()

        @server.read_resource()
        async def _read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
            text: str = await self.resources.read_resource(str(uri))
            return [ReadResourceContents(content=text, mime_type=MIME_TYPE)]

        return server

    async def perform_health_check(self) -> HealthStatus:
        """Log the outcome of a connectivity probe; never gates serving"""
        logger.info("Performing initial health check...")
        health: HealthStatus = await self.client.health_check()

        match health.status:
            case "ok":
                logger.info(f"✅ {health.message}")
            case "connection_error":
                logger.error(f"❌ Connection Error: {health.message}")
            case "auth_error":
                logger.error(f"❌ Authentication Error: {health.message}")
            case _:
                logger.warning(f"⚠️  Health Check Warning: {health.message}")

        return health

    async def run(self) -> None:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("FAQsimple MCP server running on stdio")
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
