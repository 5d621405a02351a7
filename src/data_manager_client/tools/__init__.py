# Data Manager Client
# File: tools/__init__.py
# Version: v1

"""MCP tools over the data-manager facade clients."""
