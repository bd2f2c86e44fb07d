"""FastMCP server initialization for Taskwarrior Web."""

from mcp.server.fastmcp import FastMCP

from taskwarrior_web.config import get_settings
from taskwarrior_web.logging_setup import setup_logging

# Initialize the MCP server
mcp = FastMCP("taskwarrior_web")


def run() -> None:
    """Run the MCP server over stdio."""
    # Registers the tools on `mcp`.
    import taskwarrior_web.tools  # noqa: F401

    setup_logging(get_settings().log_level)
    mcp.run()


if __name__ == "__main__":
    run()
