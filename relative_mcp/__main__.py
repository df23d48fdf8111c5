import logging
import sys

import uvicorn
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route, Mount

from relative_mcp.api import api_app
from relative_mcp.config import config
from relative_mcp.server import server

# Configure logging to stderr (stdout is used for MCP protocol in stdio mode)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("relative-mcp")

# Create SSE transport
sse = SseServerTransport("/messages")


async def handle_sse(request):
    async with sse.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        await server.run(
            streams[0], streams[1], server.create_initialization_options()
        )


async def handle_messages(request):
    await sse.handle_post_message(request.scope, request.receive, request._send)


async def handle_health(request):
    return JSONResponse({
        "status": "ok",
        "service": "relative-mcp",
        "enabled_tools": sorted(config.enabled_tools),
    })


# Create Starlette app
app = Starlette(
    routes=[
        Route("/health", endpoint=handle_health),
        Route("/sse", endpoint=handle_sse),
        Route("/messages", endpoint=handle_messages, methods=["POST"]),
        Mount("/v1", app=api_app),
    ],
)


def main() -> None:
    """Run the relative-mcp server."""
    logger.info("Starting relative-mcp server")
    logger.info("Enabled tool groups: %s", ", ".join(sorted(config.enabled_tools)))
    logger.info("Default query: %s %s", config.default_value, config.default_unit)
    logger.info("Server: http://%s:%d", config.host, config.port)

    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
