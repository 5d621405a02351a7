# Data Manager Client
# File: clients/base.py
# Version: v1

"""Shared plumbing for the data-manager facade clients."""

from __future__ import annotations

from typing import Optional

import httpx

from ..config import DataManagerConfig
from ..models import ElementProperties
from ..rest.requests import RelationshipRequestBody
from ..rest_client import DataManagerRESTClient
from ..validation import InvalidParameterHandler

SERVICE_PATH = "/servers/{0}/open-metadata/access-services/data-manager/users/{1}"

DEFAULT_SEARCH_STRING_PARAMETER = "searchString"
DEFAULT_NAME_PARAMETER = "name"
QUALIFIED_NAME_PARAMETER = "qualifiedName"


class DataManagerBaseClient:
    """Validates the platform location and owns the validator and invoker.

    Every facade method runs the same pipeline: validate parameters,
    compose a request body, fill in the URL template, call the invoker and
    unwrap the result.  Instances hold only immutable configuration and can
    be shared between threads.
    """

    def __init__(
        self,
        config: DataManagerConfig,
        rest_client: Optional[DataManagerRESTClient] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        self.invalid_parameter_handler = InvalidParameterHandler(
            max_page_size=config.max_page_size,
            clamp_page_size=config.clamp_page_size,
        )
        self.invalid_parameter_handler.validate_platform_url(
            config.platform_url_root, config.server_name, "Client Constructor"
        )

        self.server_name = str(config.server_name)
        self.platform_url_root = str(config.platform_url_root)
        self.rest_client = rest_client or DataManagerRESTClient.from_config(config, transport=transport)

    def _validate_qualified_name(self, properties: Optional[ElementProperties], method_name: str) -> None:
        self.invalid_parameter_handler.validate_name(
            getattr(properties, "qualified_name", None), QUALIFIED_NAME_PARAMETER, method_name
        )

    def _link(
        self,
        method_name: str,
        user_id: str,
        url_template: str,
        first_guid: str,
        first_parameter: str,
        second_guid: str,
        second_parameter: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
        relationship_properties: Optional[ElementProperties] = None,
    ) -> None:
        """Create or remove the relationship between two elements named in the URL."""
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(first_guid, first_parameter, method_name)
        handler.validate_guid(second_guid, second_parameter, method_name)

        self.rest_client.call_void_post(
            method_name,
            url_template,
            RelationshipRequestBody(
                properties=relationship_properties,
                external_source_guid=external_source_guid,
                external_source_name=external_source_name,
            ),
            self.server_name,
            user_id,
            first_guid,
            second_guid,
        )
