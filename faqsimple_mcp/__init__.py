"""
FAQsimple MCP server

Exposes FAQsimple knowledge bases to AI assistants through the Model Context
Protocol: search across all FAQs, fetch a FAQ by number, list FAQs.
"""

__version__ = "1.0.0"
