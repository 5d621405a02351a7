# demo_mcp_find_databases.py
# Version: v1
#
# Demo: search the external references, then list the databases
# catalogued on the metadata server.
#
# Usage (PowerShell):
#
#   $env:DATA_MANAGER_PLATFORM_URL = "https://localhost:9443"
#   $env:DATA_MANAGER_SERVER_NAME  = "cocoMDS1"
#   $env:DATA_MANAGER_TEST_REFERENCE = "wiki"
#   python demo_mcp_find_databases.py

import asyncio
import os
from typing import Any, Dict, List

from data_manager_client.tools import tasks

TEST_REFERENCE = os.environ.get("DATA_MANAGER_TEST_REFERENCE", ".*")
TEST_SEARCH = os.environ.get("DATA_MANAGER_TEST_SEARCH", ".*")


async def main() -> None:
    print("Calling MCP task: find_external_references()")
    references = await tasks.find_external_references(TEST_REFERENCE)
    print(references.get("summary") or references.get("error"))
    print()

    print("Calling MCP task: find_databases()")
    result: Dict[str, Any] = await tasks.find_databases(TEST_SEARCH)
    if "error" in result:
        print("Error:", result["error"])
        return

    databases: List[Dict[str, Any]] = result["data"]["databases"]
    print(f"Databases found: {len(databases)}")
    print()

    for db in databases:
        props = db.get("properties", {})
        print(f"- {db.get('qualified_name')}")
        print(f"    type:     {props.get('databaseType')}")
        print(f"    version:  {props.get('databaseVersion')}")
        print()


if __name__ == "__main__":
    asyncio.run(main())
