# SPDX-License-Identifier: MIT
"""
kitsu-helper server entrypoint.

Wires FastMCP with the tool modules under kitsu_helper/tools/.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

# Each tool module provides register_tools(mcp)
from .tools import search, details, meta


def create_app() -> FastMCP:
    mcp = FastMCP("kitsu-helper")

    search.register_tools(mcp)
    details.register_tools(mcp)
    meta.register_tools(mcp)

    return mcp


def main() -> None:
    create_app().run()


if __name__ == "__main__":
    main()
