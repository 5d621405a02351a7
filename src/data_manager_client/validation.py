# Data Manager Client
# File: validation.py
# Version: v1

"""Local parameter checks run before any request leaves the client."""

from __future__ import annotations

import re
from typing import Any, Optional

from .errors import CommonErrorCode, InvalidParameterError


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class InvalidParameterHandler:
    """Validates facade parameters and raises ``InvalidParameterError``.

    The handler is stateless apart from the paging limits it was built with,
    so one instance is shared by every call a client makes.
    """

    def __init__(self, max_page_size: int = 0, clamp_page_size: bool = False) -> None:
        self._max_page_size = max(int(max_page_size), 0)
        self._clamp_page_size = bool(clamp_page_size)

    @property
    def max_page_size(self) -> int:
        return self._max_page_size

    # ------------------------------------------------------------------
    # Identifiers and names
    # ------------------------------------------------------------------

    def validate_user_id(self, user_id: Optional[str], method_name: str) -> None:
        if _is_blank(user_id):
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_USER_ID,
                method_name,
                method_name,
                parameter_name="userId",
            )

    def validate_guid(self, guid: Optional[str], parameter_name: str, method_name: str) -> None:
        if _is_blank(guid):
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_GUID,
                method_name,
                parameter_name,
                method_name,
                parameter_name=parameter_name,
            )

    def validate_name(self, name: Optional[str], parameter_name: str, method_name: str) -> None:
        if _is_blank(name):
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_NAME,
                method_name,
                parameter_name,
                method_name,
                parameter_name=parameter_name,
            )

    def validate_search_string(
        self,
        search_string: Optional[str],
        parameter_name: str,
        method_name: str,
    ) -> None:
        """Reject empty search strings and ones that are not valid regexes."""
        if _is_blank(search_string):
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_SEARCH_STRING,
                method_name,
                parameter_name,
                method_name,
                parameter_name=parameter_name,
            )
        try:
            re.compile(str(search_string))
        except re.error as exc:
            raise InvalidParameterError.from_code(
                CommonErrorCode.INVALID_SEARCH_STRING,
                method_name,
                search_string,
                parameter_name,
                method_name,
                exc,
                parameter_name=parameter_name,
            ) from exc

    def validate_object(self, obj: Any, parameter_name: str, method_name: str) -> None:
        if obj is None:
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_OBJECT,
                method_name,
                parameter_name,
                method_name,
                parameter_name=parameter_name,
            )

    def validate_platform_url(
        self,
        platform_url_root: Optional[str],
        server_name: Optional[str],
        method_name: str,
    ) -> None:
        if _is_blank(platform_url_root) or _is_blank(server_name):
            raise InvalidParameterError.from_code(
                CommonErrorCode.NULL_PLATFORM_LOCATION,
                method_name,
                method_name,
                platform_url_root,
                server_name,
                parameter_name="platformURLRoot" if _is_blank(platform_url_root) else "serverName",
            )

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------

    def validate_paging(self, start_from: int, page_size: int, method_name: str) -> int:
        """Check a paging window and return the page size to send.

        A page size of 0 means "server default" unless a maximum is
        configured, in which case the maximum is used.
        """
        if start_from < 0:
            raise InvalidParameterError.from_code(
                CommonErrorCode.NEGATIVE_START_FROM,
                method_name,
                start_from,
                "startFrom",
                method_name,
                parameter_name="startFrom",
            )
        if page_size < 0:
            raise InvalidParameterError.from_code(
                CommonErrorCode.NEGATIVE_PAGE_SIZE,
                method_name,
                page_size,
                "pageSize",
                method_name,
                parameter_name="pageSize",
            )

        if self._max_page_size > 0:
            if page_size == 0:
                return self._max_page_size
            if page_size > self._max_page_size:
                if self._clamp_page_size:
                    return self._max_page_size
                raise InvalidParameterError.from_code(
                    CommonErrorCode.MAX_PAGE_SIZE,
                    method_name,
                    page_size,
                    "pageSize",
                    method_name,
                    self._max_page_size,
                    parameter_name="pageSize",
                )

        return page_size
