# Data Manager Client
# File: rest_client.py
# Version: v1

"""Synchronous REST invoker shared by every data-manager facade client.

Implements:

- URL templating with positional ``{0}``, ``{1}``, ... placeholders
- GET / POST calls returning the decoded JSON envelope
- typed unwrapping of GUID, void, element and element-list envelopes
- mapping of transport failures, HTTP statuses and server exception
  envelopes onto the client's error hierarchy
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import quote

import httpx

from .auth import PlatformCredentials
from .config import DataManagerConfig
from .errors import (
    CommonErrorCode,
    DataManagerError,
    InvalidParameterError,
    PropertyServerError,
    UserNotAuthorizedError,
)
from .models import ElementStub, MetadataElement
from .rest.responses import (
    ElementResponse,
    ElementsResponse,
    ElementStubResponse,
    GUIDResponse,
    VoidResponse,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=MetadataElement)


def _encode_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="")


def _request_payload(body: Any) -> Optional[Dict[str, Any]]:
    if body is None:
        return None
    if isinstance(body, dict):
        return body
    return body.to_dict()


class RESTExceptionHandler:
    """Turns an unsuccessful response into the matching client exception."""

    def detect_and_raise(
        self,
        method_name: str,
        status_code: int,
        envelope: Dict[str, Any],
        body_preview: str = "",
    ) -> None:
        class_name = str(envelope.get("exceptionClassName") or "")
        try:
            related = int(envelope.get("relatedHTTPCode") or status_code)
        except (TypeError, ValueError):
            related = status_code

        http_code = status_code if status_code >= 400 else related
        if not class_name and http_code < 400:
            return

        error_cls = self._classify(class_name, http_code)
        message = envelope.get("exceptionErrorMessage")
        if not message:
            if error_cls is UserNotAuthorizedError:
                message = CommonErrorCode.NOT_AUTHORIZED.format(
                    envelope.get("userId", "<unknown>"), method_name
                )
            else:
                message = CommonErrorCode.UNEXPECTED_HTTP_STATUS.format(
                    method_name, http_code, body_preview[:500]
                )

        related_properties = envelope.get("exceptionProperties")
        if not isinstance(related_properties, dict):
            related_properties = {}

        kwargs: Dict[str, Any] = {
            "report_error_code": envelope.get("exceptionErrorMessageId"),
            "http_code": http_code,
            "reporting_method": method_name,
            "system_action": envelope.get("exceptionSystemAction"),
            "user_action": envelope.get("exceptionUserAction"),
            "related_properties": related_properties,
        }
        if error_cls is InvalidParameterError:
            kwargs["parameter_name"] = related_properties.get("parameterName")
        if error_cls is UserNotAuthorizedError:
            kwargs["user_id"] = related_properties.get("userId")

        logger.warning(
            "%s failed with HTTP %s (%s): %s", method_name, http_code, error_cls.__name__, message
        )
        raise error_cls(str(message), **kwargs)

    @staticmethod
    def _classify(class_name: str, http_code: int) -> Type[DataManagerError]:
        if "InvalidParameter" in class_name:
            return InvalidParameterError
        if "UserNotAuthorized" in class_name:
            return UserNotAuthorizedError
        if "PropertyServer" in class_name:
            return PropertyServerError
        if http_code == 400:
            return InvalidParameterError
        if http_code in (401, 403):
            return UserNotAuthorizedError
        return PropertyServerError


class DataManagerRESTClient:
    """Issues one HTTP request per call; holds only immutable settings.

    ``transport`` is handed to ``httpx.Client`` so tests can script the
    server with ``httpx.MockTransport``.
    """

    def __init__(
        self,
        server_name: str,
        platform_url_root: str,
        credentials: Optional[PlatformCredentials] = None,
        timeout_seconds: float = 30.0,
        verify_tls: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.server_name = server_name
        self.platform_url_root = platform_url_root.rstrip("/")
        self._credentials = credentials
        self._timeout = float(timeout_seconds)
        self._verify_tls = verify_tls
        self._transport = transport
        self._exception_handler = RESTExceptionHandler()

    @classmethod
    def from_config(
        cls,
        config: DataManagerConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "DataManagerRESTClient":
        return cls(
            server_name=str(config.server_name),
            platform_url_root=str(config.platform_url_root),
            credentials=PlatformCredentials.from_config(config),
            timeout_seconds=config.timeout_seconds,
            verify_tls=config.verify_tls,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Low-level calls
    # ------------------------------------------------------------------

    def build_url(self, url_template: str, *params: Any) -> str:
        """Substitute encoded parameters into a template and prefix the platform root."""
        return self.platform_url_root + url_template.format(*(_encode_param(p) for p in params))

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._credentials is not None:
            headers.update(self._credentials.auth_headers())
        return headers

    def _send(self, method_name: str, verb: str, url: str, body: Any = None) -> Dict[str, Any]:
        logger.debug("%s: %s %s", method_name, verb, url)

        try:
            with httpx.Client(
                timeout=self._timeout,
                verify=self._verify_tls,
                transport=self._transport,
            ) as http_client:
                if verb == "GET":
                    response = http_client.get(url, headers=self._headers())
                else:
                    response = http_client.post(
                        url, json=_request_payload(body), headers=self._headers()
                    )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("%s: request to %s failed: %s", method_name, url, exc)
            raise PropertyServerError.from_code(
                CommonErrorCode.CLIENT_SIDE_REST_API_ERROR,
                method_name,
                method_name,
                url,
                exc,
            ) from exc

        envelope: Any = {}
        if response.content:
            try:
                envelope = response.json()
            except ValueError:
                envelope = None

        if not isinstance(envelope, dict):
            if response.status_code >= 400:
                envelope = {}
            else:
                # 2xx with a body that is not a JSON object.
                raise PropertyServerError.from_code(
                    CommonErrorCode.UNEXPECTED_HTTP_STATUS,
                    method_name,
                    method_name,
                    response.status_code,
                    response.text[:500],
                )

        self._exception_handler.detect_and_raise(
            method_name, response.status_code, envelope, response.text
        )
        return envelope

    def call_get(self, method_name: str, url_template: str, *params: Any) -> Dict[str, Any]:
        return self._send(method_name, "GET", self.build_url(url_template, *params))

    def call_post(
        self,
        method_name: str,
        url_template: str,
        request_body: Any,
        *params: Any,
    ) -> Dict[str, Any]:
        return self._send(method_name, "POST", self.build_url(url_template, *params), request_body)

    # ------------------------------------------------------------------
    # Typed envelopes
    # ------------------------------------------------------------------

    def call_guid_get(self, method_name: str, url_template: str, *params: Any) -> GUIDResponse:
        return GUIDResponse.from_dict(self.call_get(method_name, url_template, *params))

    def call_guid_post(
        self,
        method_name: str,
        url_template: str,
        request_body: Any,
        *params: Any,
    ) -> GUIDResponse:
        return GUIDResponse.from_dict(
            self.call_post(method_name, url_template, request_body, *params)
        )

    def call_void_post(
        self,
        method_name: str,
        url_template: str,
        request_body: Any,
        *params: Any,
    ) -> VoidResponse:
        return VoidResponse.from_dict(
            self.call_post(method_name, url_template, request_body, *params)
        )

    def call_element_get(
        self,
        method_name: str,
        element_class: Type[E],
        url_template: str,
        *params: Any,
    ) -> Optional[E]:
        envelope = self.call_get(method_name, url_template, *params)
        return ElementResponse.parse(envelope, element_class).element

    def call_element_post(
        self,
        method_name: str,
        element_class: Type[E],
        url_template: str,
        request_body: Any,
        *params: Any,
    ) -> Optional[E]:
        envelope = self.call_post(method_name, url_template, request_body, *params)
        return ElementResponse.parse(envelope, element_class).element

    def call_elements_get(
        self,
        method_name: str,
        element_class: Type[E],
        url_template: str,
        *params: Any,
    ) -> List[E]:
        envelope = self.call_get(method_name, url_template, *params)
        return ElementsResponse.parse(envelope, element_class).elements

    def call_elements_post(
        self,
        method_name: str,
        element_class: Type[E],
        url_template: str,
        request_body: Any,
        *params: Any,
    ) -> List[E]:
        envelope = self.call_post(method_name, url_template, request_body, *params)
        return ElementsResponse.parse(envelope, element_class).elements

    def call_element_stub_get(
        self,
        method_name: str,
        url_template: str,
        *params: Any,
    ) -> Optional[ElementStub]:
        return ElementStubResponse.from_dict(self.call_get(method_name, url_template, *params)).element
