"""Run the FAQsimple MCP server over stdio (same as the `mcp-server-faqsimple` command)."""

import sys

from faqsimple_mcp.main import main

if __name__ == "__main__":
    sys.exit(main())
