"""
DateTime MCP server: current date and time in several formats.
"""

__version__ = "0.2.6"
