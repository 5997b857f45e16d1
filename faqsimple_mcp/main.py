import asyncio
import sys

from loguru import logger

from faqsimple_mcp.api.client import FAQsimpleClient
from faqsimple_mcp.api.errors import ConfigError
from faqsimple_mcp.configuration import load_client_settings, setup_config_store
from faqsimple_mcp.mcp import FAQsimpleMCPServer
from faqsimple_mcp.models import ClientSettings


async def serve() -> None:
    await setup_config_store()

    settings: ClientSettings = load_client_settings()

    async with FAQsimpleClient(settings) as client:
        server = FAQsimpleMCPServer(client)

        # Startup diagnostics only; serving does not wait for it
        health_check: asyncio.Task = asyncio.create_task(server.perform_health_check())
        try:
            await server.run()
        finally:
            health_check.cancel()


def main() -> int:
    try:
        asyncio.run(serve())
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        return 0
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.exception(f"Failed to start server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
