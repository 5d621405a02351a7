# demo_mcp_find_connections.py
# Version: v1

r"""
Quick demo for the find_connections() MCP task.

Usage (PowerShell):

  $env:DATA_MANAGER_PLATFORM_URL = "https://localhost:9443"
  $env:DATA_MANAGER_SERVER_NAME  = "cocoMDS1"
  $env:DATA_MANAGER_CALLER_ID    = "erinoverview"
  $env:DATA_MANAGER_TEST_SEARCH  = ".*"            # optional
  $env:DATA_MANAGER_TEST_LIMIT   = "20"            # optional
  python demo_mcp_find_connections.py
"""

import asyncio
import os

from data_manager_client.tools.tasks import find_connections, get_connection


QUERY = os.environ.get("DATA_MANAGER_TEST_SEARCH", ".*")
LIMIT = int(os.environ.get("DATA_MANAGER_TEST_LIMIT", "20"))


async def main() -> None:
    print("Calling MCP task: find_connections()")
    print(f"Search string: {QUERY!r}")
    print(f"Page size:     {LIMIT}")
    print()

    result = await find_connections(QUERY, start_from=0, page_size=LIMIT)
    if "error" in result:
        print("Error:", result["error"])
        return

    connections = result["data"]["connections"]
    print(result["summary"])
    print()

    for conn in connections:
        print(f"- {conn['qualified_name']} (guid={conn['guid']}, type={conn.get('type_name')})")

    if connections:
        first = await get_connection(connections[0]["guid"])
        data = first.get("data") or {}
        print()
        print("First connection:")
        print("    connector type:", data.get("connector_type_guid"))
        print("    endpoint:      ", data.get("endpoint_guid"))
        print("    embedded:      ", data.get("embedded_connection_guids"))
    else:
        print("No matching connections found.")


if __name__ == "__main__":
    asyncio.run(main())
