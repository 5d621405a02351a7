# Data Manager Client
# File: errors.py
# Version: v1

"""Exception hierarchy and message catalogue for the data-manager client.

Three failure kinds reach callers:

- ``InvalidParameterError``: a request was rejected before (or by) the server
  because a parameter was missing or malformed.
- ``UserNotAuthorizedError``: the calling user may not perform the request.
- ``PropertyServerError``: the server or the network failed.

None of them are retried by the client.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class CommonErrorCode(Enum):
    """Messages for errors the client detects locally."""

    NULL_USER_ID = (
        "OMAG-COMMON-400-001",
        400,
        "The user identifier (user id) passed on the {0} operation is null",
        "The system is unable to format the request because the user id is missing.",
        "Supply the identifier of the calling user.",
    )
    NULL_GUID = (
        "OMAG-COMMON-400-002",
        400,
        "The unique identifier (guid) passed on the {0} parameter of the {1} operation is null",
        "The system is unable to perform the request because the unique identifier is missing.",
        "Supply the unique identifier of the element to work with.",
    )
    NULL_PLATFORM_LOCATION = (
        "OMAG-COMMON-400-003",
        400,
        "The {0} operation was given an empty platform URL root ({1}) or server name ({2})",
        "The client cannot be created without the location of the metadata server.",
        "Supply both the platform URL root and the server name.",
    )
    NULL_NAME = (
        "OMAG-COMMON-400-004",
        400,
        "The name passed on the {0} parameter of the {1} operation is null",
        "The system is unable to perform the request because the name is missing.",
        "Supply a name for the element.",
    )
    NULL_SEARCH_STRING = (
        "OMAG-COMMON-400-005",
        400,
        "The search string passed on the {0} parameter of the {1} operation is null",
        "The system is unable to perform the search without a search string.",
        "Supply a search string, or a regular expression such as '.*' to match everything.",
    )
    INVALID_SEARCH_STRING = (
        "OMAG-COMMON-400-006",
        400,
        "The search string {0} passed on the {1} parameter of the {2} operation is not a valid regular expression: {3}",
        "The system is unable to compile the search string.",
        "Correct the regular expression syntax of the search string.",
    )
    NULL_OBJECT = (
        "OMAG-COMMON-400-007",
        400,
        "The object passed on the {0} parameter of the {1} operation is null",
        "The system is unable to perform the request because the object is missing.",
        "Supply the object the operation needs.",
    )
    NEGATIVE_PAGE_SIZE = (
        "OMAG-COMMON-400-011",
        400,
        "The page size {0} passed on the {1} parameter of the {2} operation is negative",
        "The system is unable to return a negative number of results.",
        "Supply zero (for the default page size) or a positive page size.",
    )
    MAX_PAGE_SIZE = (
        "OMAG-COMMON-400-012",
        400,
        "The page size {0} passed on the {1} parameter of the {2} operation exceeds the maximum of {3}",
        "The request asks for more results than the client permits in one page.",
        "Request a smaller page and use startFrom to page through the results.",
    )
    NEGATIVE_START_FROM = (
        "OMAG-COMMON-400-013",
        400,
        "The starting point {0} passed on the {1} parameter of the {2} operation is negative",
        "The system is unable to return results from before the first element.",
        "Supply zero or a positive starting point.",
    )
    NOT_AUTHORIZED = (
        "OMAG-COMMON-403-001",
        403,
        "User {0} is not authorized to issue the {1} request",
        "The server rejected the request for the calling user.",
        "Check the user's access rights with the server administrator.",
    )
    UNEXPECTED_HTTP_STATUS = (
        "OMAG-COMMON-500-001",
        500,
        "The {0} request returned unexpected HTTP status {1}: {2}",
        "The server failed to process the request.",
        "Check the server's audit log for related errors.",
    )
    CLIENT_SIDE_REST_API_ERROR = (
        "OMAG-COMMON-503-001",
        503,
        "A client-side exception was received from the {0} request to {1}: {2}",
        "The client could not reach the server or read its response.",
        "Check that the platform URL root is correct and the server is running.",
    )

    def __init__(
        self,
        code: str,
        http_code: int,
        template: str,
        system_action: str,
        user_action: str,
    ) -> None:
        self.code = code
        self.http_code = http_code
        self.template = template
        self.system_action = system_action
        self.user_action = user_action

    def format(self, *params: Any) -> str:
        return self.template.format(*params)


class DataManagerError(Exception):
    """Base class for every error raised by the client."""

    def __init__(
        self,
        error_message: str,
        *,
        report_error_code: Optional[str] = None,
        http_code: int = 500,
        reporting_method: Optional[str] = None,
        system_action: Optional[str] = None,
        user_action: Optional[str] = None,
        parameter_name: Optional[str] = None,
        related_properties: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(error_message)
        self.error_message = error_message
        self.report_error_code = report_error_code
        self.http_code = http_code
        self.reporting_method = reporting_method
        self.system_action = system_action
        self.user_action = user_action
        self.parameter_name = parameter_name
        self.related_properties = dict(related_properties or {})

    @classmethod
    def from_code(
        cls,
        error_code: CommonErrorCode,
        reporting_method: str,
        *params: Any,
        parameter_name: Optional[str] = None,
    ) -> "DataManagerError":
        return cls(
            error_code.format(*params),
            report_error_code=error_code.code,
            http_code=error_code.http_code,
            reporting_method=reporting_method,
            system_action=error_code.system_action,
            user_action=error_code.user_action,
            parameter_name=parameter_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view used by the MCP tool layer."""
        out: Dict[str, Any] = {
            "kind": type(self).__name__,
            "code": self.report_error_code,
            "http_code": self.http_code,
            "message": self.error_message,
            "reporting_method": self.reporting_method,
        }
        if self.parameter_name:
            out["parameter_name"] = self.parameter_name
        if self.user_action:
            out["user_action"] = self.user_action
        return out

    def __str__(self) -> str:
        if self.report_error_code:
            return f"{self.report_error_code} {self.error_message}"
        return self.error_message


class InvalidParameterError(DataManagerError):
    """A parameter is null, blank or out of range."""

    def __init__(self, error_message: str, **kwargs: Any) -> None:
        kwargs.setdefault("http_code", 400)
        super().__init__(error_message, **kwargs)


class UserNotAuthorizedError(DataManagerError):
    """The calling user is not allowed to perform the request."""

    def __init__(self, error_message: str, *, user_id: Optional[str] = None, **kwargs: Any) -> None:
        kwargs.setdefault("http_code", 403)
        super().__init__(error_message, **kwargs)
        self.user_id = user_id


class PropertyServerError(DataManagerError):
    """The metadata server (or the route to it) failed."""
