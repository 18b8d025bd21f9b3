"""MCP server exposing the picture saver as a tool."""

from __future__ import annotations

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .config import DEFAULT_PAGE_URL, SaveConfig, default_output_dir, env_override
from .crawler import save_picture
from .metadata import select_metadata_writer

logger = logging.getLogger("apotd.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="apotd")


@mcp.tool()
def save_today(
    directory: str | None = None,
    filename: str | None = None,
    prepend_count: bool = False,
) -> str:
    """Save today's astronomy picture and return the path it was written to."""
    output_dir = Path(directory or env_override("APOTD_DIR") or default_output_dir())
    config = SaveConfig(
        output_dir=output_dir.expanduser(),
        filename=filename,
        prepend_count=prepend_count,
        page_url=env_override("APOTD_URL") or DEFAULT_PAGE_URL,
    )
    result = save_picture(config, metadata_writer=select_metadata_writer())
    return str(result.path)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
