# Data Manager Client
# File: tools/tasks.py
# Version: v1
#
# NOTE: This module is the single place where read-only facade operations
# are exposed as MCP tools.  The stdio transport simply calls
# `register_tools(server)` to wire these up.

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse

from ..clients import (
    ConnectionManagerClient,
    DatabaseManagerClient,
    ExternalReferenceClient,
    SchemaManagerClient,
)
from ..config import DataManagerConfig, caller_id_from_env
from ..errors import DataManagerError
from ..models import MetadataElement
from ..rest_client import DataManagerRESTClient

logger = logging.getLogger(__name__)

DEFAULT_TOOL_PAGE_SIZE = 50


# ---------------------------------------------------------------------------
# Internal helpers (error shape, client bundle, element summaries)
# ---------------------------------------------------------------------------


def _make_error(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Small, LLM-friendly error shape."""
    err: Dict[str, Any] = {"code": code, "message": message}
    if details:
        err["details"] = details
    return err


@dataclass
class DataManagerClients:
    """Facade clients sharing one REST invoker."""

    connections: ConnectionManagerClient
    databases: DatabaseManagerClient
    schemas: SchemaManagerClient
    external_references: ExternalReferenceClient


def _make_client(cfg: Optional[DataManagerConfig] = None) -> DataManagerClients:
    """Create the facade clients from environment variables.

    Note: Callers should prefer invoking this with *no arguments* to keep
    unit tests monkeypatch-friendly (tests replace _make_client with a
    no-arg lambda).
    """
    cfg = cfg or DataManagerConfig.from_env()
    rest_client = DataManagerRESTClient.from_config(cfg)

    return DataManagerClients(
        connections=ConnectionManagerClient(cfg, rest_client=rest_client),
        databases=DatabaseManagerClient(cfg, rest_client=rest_client),
        schemas=SchemaManagerClient(cfg, rest_client=rest_client),
        external_references=ExternalReferenceClient(cfg, rest_client=rest_client),
    )


def _element_summary(element: MetadataElement) -> Dict[str, Any]:
    header = element.element_header
    props = element.properties
    props_dict = props.to_dict() if props is not None else {}
    return {
        "guid": element.guid,
        "type_name": header.type_name if header else None,
        "qualified_name": props_dict.get("qualifiedName"),
        "display_name": props_dict.get("displayName"),
        "properties": props_dict,
    }


async def _run(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    # Facade calls block on HTTP; keep them off the event loop.
    return await asyncio.to_thread(fn, *args, **kwargs)


async def _guarded(operation: str, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Dict[str, Any]:
    """Run a facade call, turning client errors into an ``error`` payload."""
    try:
        result = await _run(fn, *args, **kwargs)
    except DataManagerError as exc:
        logger.warning("%s failed: %s", operation, exc)
        return {
            "error": _make_error(
                exc.report_error_code or type(exc).__name__,
                exc.error_message,
                details=exc.to_dict(),
            )
        }
    return {"result": result}


def _elements_payload(key: str, elements: List[MetadataElement], start_from: int, page_size: int) -> Dict[str, Any]:
    items = [_element_summary(e) for e in elements]
    return {
        "summary": f"{len(items)} {key} returned",
        "data": {key: items},
        "meta": {"start_from": start_from, "page_size": page_size, "count": len(items)},
    }


# ---------------------------------------------------------------------------
# Core async tasks (library-style)
# ---------------------------------------------------------------------------


async def ping() -> Dict[str, Any]:
    cfg = DataManagerConfig.from_env()
    return {"ok": bool(cfg.server_name and cfg.platform_url_root)}


async def find_connections(
    search_string: str,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_connections",
        clients.connections.find_connections,
        caller_id_from_env(),
        search_string,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    return _elements_payload("connections", out["result"], start_from, page_size)


async def get_connection(connection_guid: str) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "get_connection",
        clients.connections.get_connection_by_guid,
        caller_id_from_env(),
        connection_guid,
    )
    if "error" in out:
        return out

    element = out["result"]
    if element is None:
        return {
            "summary": f"No connection with GUID {connection_guid}",
            "data": None,
            "meta": {"connection_guid": connection_guid},
        }

    data = _element_summary(element)
    data["connector_type_guid"] = element.connector_type.guid if element.connector_type else None
    data["endpoint_guid"] = element.endpoint.guid if element.endpoint else None
    data["embedded_connection_guids"] = [s.guid for s in element.embedded_connections]
    return {
        "summary": f"Connection {data.get('qualified_name') or connection_guid}",
        "data": data,
        "meta": {"connection_guid": connection_guid},
    }


async def find_endpoints(
    search_string: str,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_endpoints",
        clients.connections.find_endpoints,
        caller_id_from_env(),
        search_string,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    return _elements_payload("endpoints", out["result"], start_from, page_size)


async def find_connector_types(
    search_string: str,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_connector_types",
        clients.connections.find_connector_types,
        caller_id_from_env(),
        search_string,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    return _elements_payload("connector_types", out["result"], start_from, page_size)


async def find_databases(
    search_string: str,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_databases",
        clients.databases.find_databases,
        caller_id_from_env(),
        search_string,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    return _elements_payload("databases", out["result"], start_from, page_size)


async def find_schema_types(
    search_string: str,
    type_name: Optional[str] = None,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_schema_types",
        clients.schemas.find_schema_type,
        caller_id_from_env(),
        search_string,
        type_name,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    payload = _elements_payload("schema_types", out["result"], start_from, page_size)
    payload["meta"]["type_name"] = type_name or "SchemaType"
    return payload


async def find_external_references(
    search_string: str,
    start_from: int = 0,
    page_size: int = DEFAULT_TOOL_PAGE_SIZE,
) -> Dict[str, Any]:
    try:
        clients = _make_client()
    except DataManagerError as exc:
        return {"error": _make_error("client_init_failed", str(exc))}

    out = await _guarded(
        "find_external_references",
        clients.external_references.find_external_references,
        caller_id_from_env(),
        search_string,
        start_from,
        page_size,
    )
    if "error" in out:
        return out
    payload = _elements_payload("external_references", out["result"], start_from, page_size)
    for item, element in zip(payload["data"]["external_references"], out["result"]):
        item["url"] = element.properties.url if element.properties is not None else None
    return payload


# ---------------------------------------------------------------------------
# Diagnostics & server info
# ---------------------------------------------------------------------------


def _collect_server_info() -> Dict[str, Any]:
    """Redacted snapshot of the client configuration from env."""
    cfg = DataManagerConfig.from_env()

    host = None
    if cfg.platform_url_root:
        parsed = urlparse(cfg.platform_url_root)
        host = parsed.hostname or cfg.platform_url_root

    return {
        "server_name": cfg.server_name,
        "platform_url_root": cfg.platform_url_root,
        "host": host,
        "caller_id": caller_id_from_env(),
        "verify_tls": bool(cfg.verify_tls),
        "timeout_seconds": cfg.timeout_seconds,
        "credentials": {
            "user_id_configured": bool(cfg.user_id),
            "password_configured": bool(cfg.password),
        },
        "paging": {
            "max_page_size": cfg.max_page_size,
            "clamp_page_size": bool(cfg.clamp_page_size),
        },
    }


async def get_server_info() -> Dict[str, Any]:
    return _collect_server_info()


async def diagnostics() -> Dict[str, Any]:
    started = time.time()
    config_info = _collect_server_info()

    checks: List[Dict[str, Any]] = []
    overall_ok = True

    # Client init
    t0 = time.time()
    try:
        clients = _make_client()
        checks.append({"name": "client_init", "ok": True, "ms": int((time.time() - t0) * 1000)})
    except DataManagerError as exc:
        overall_ok = False
        checks.append(
            {
                "name": "client_init",
                "ok": False,
                "ms": int((time.time() - t0) * 1000),
                "error": _make_error("client_init_failed", str(exc)),
            }
        )
        clients = None

    # Round trip: one connection, any name
    if clients is not None:
        t1 = time.time()
        out = await _guarded(
            "diagnostics",
            clients.connections.find_connections,
            caller_id_from_env(),
            ".*",
            0,
            1,
        )
        ok = "error" not in out
        overall_ok = overall_ok and ok
        check: Dict[str, Any] = {"name": "find_connections", "ok": ok, "ms": int((time.time() - t1) * 1000)}
        if not ok:
            check["error"] = out["error"]
        checks.append(check)

    return {
        "ok": overall_ok,
        "config": config_info,
        "checks": checks,
        "elapsed_ms": int((time.time() - started) * 1000),
    }


# ---------------------------------------------------------------------------
# MCP tool registration
# ---------------------------------------------------------------------------


def register_tools(server: Any) -> None:
    """Register MCP tools on an MCP Server-like instance."""
    if server is None or not hasattr(server, "tool"):
        raise ValueError(
            "register_tools(server) expects an MCP Server-like object that exposes a .tool() decorator."
        )

    @server.tool(name="dm_ping", description="Check that a metadata server location is configured.")
    async def mcp_ping() -> Dict[str, Any]:
        return await ping()

    @server.tool(
        name="dm_find_connections",
        description="Find connections whose properties match a regular expression.",
    )
    async def mcp_find_connections(
        search_string: str,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_connections(search_string, start_from=start_from, page_size=page_size)

    @server.tool(
        name="dm_get_connection",
        description="Retrieve a connection with its connector type, endpoint and embedded connections.",
    )
    async def mcp_get_connection(connection_guid: str) -> Dict[str, Any]:
        return await get_connection(connection_guid)

    @server.tool(name="dm_find_endpoints", description="Find endpoints (network addresses) by regular expression.")
    async def mcp_find_endpoints(
        search_string: str,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_endpoints(search_string, start_from=start_from, page_size=page_size)

    @server.tool(name="dm_find_connector_types", description="Find connector types by regular expression.")
    async def mcp_find_connector_types(
        search_string: str,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_connector_types(search_string, start_from=start_from, page_size=page_size)

    @server.tool(name="dm_find_databases", description="Find catalogued databases by regular expression.")
    async def mcp_find_databases(
        search_string: str,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_databases(search_string, start_from=start_from, page_size=page_size)

    @server.tool(
        name="dm_find_schema_types",
        description="Find schema types by regular expression, optionally limited to one schema type name.",
    )
    async def mcp_find_schema_types(
        search_string: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_schema_types(
            search_string, type_name=type_name, start_from=start_from, page_size=page_size
        )

    @server.tool(
        name="dm_find_external_references",
        description="Find external references (links to outside resources) by regular expression.",
    )
    async def mcp_find_external_references(
        search_string: str,
        start_from: int = 0,
        page_size: int = DEFAULT_TOOL_PAGE_SIZE,
    ) -> Dict[str, Any]:
        return await find_external_references(search_string, start_from=start_from, page_size=page_size)

    @server.tool(
        name="dm_get_server_info",
        description="Show the (redacted) metadata server configuration used by these tools.",
    )
    async def mcp_get_server_info() -> Dict[str, Any]:
        return await get_server_info()

    @server.tool(
        name="dm_diagnostics",
        description="Check configuration and run a one-element search against the metadata server.",
    )
    async def mcp_diagnostics() -> Dict[str, Any]:
        return await diagnostics()
