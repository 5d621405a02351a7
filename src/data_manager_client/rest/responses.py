# Data Manager Client
# File: rest/responses.py
# Version: v1

"""Response envelopes returned by the data-manager REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from ..models import ElementStub, MetadataElement

E = TypeVar("E", bound=MetadataElement)


@dataclass
class FFDCResponse:
    """Fields every envelope carries to report a server-side exception."""

    related_http_code: int = 200
    exception_class_name: Optional[str] = None
    exception_error_message: Optional[str] = None
    exception_error_message_id: Optional[str] = None
    exception_system_action: Optional[str] = None
    exception_user_action: Optional[str] = None
    action_description: Optional[str] = None
    exception_properties: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _ffdc_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            related = int(data.get("relatedHTTPCode") or 200)
        except (TypeError, ValueError):
            related = 200
        props = data.get("exceptionProperties")
        return {
            "related_http_code": related,
            "exception_class_name": data.get("exceptionClassName"),
            "exception_error_message": data.get("exceptionErrorMessage"),
            "exception_error_message_id": data.get("exceptionErrorMessageId"),
            "exception_system_action": data.get("exceptionSystemAction"),
            "exception_user_action": data.get("exceptionUserAction"),
            "action_description": data.get("actionDescription"),
            "exception_properties": props if isinstance(props, dict) else {},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FFDCResponse":
        return cls(**cls._ffdc_kwargs(data))

    @property
    def has_exception(self) -> bool:
        return bool(self.exception_class_name) or self.related_http_code >= 400


@dataclass
class VoidResponse(FFDCResponse):
    pass


@dataclass
class GUIDResponse(FFDCResponse):
    guid: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GUIDResponse":
        return cls(guid=data.get("guid"), **cls._ffdc_kwargs(data))


@dataclass
class ElementStubResponse(FFDCResponse):
    element: Optional[ElementStub] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ElementStubResponse":
        return cls(element=ElementStub.from_dict(data.get("element")), **cls._ffdc_kwargs(data))


@dataclass
class ElementResponse(FFDCResponse, Generic[E]):
    element: Optional[E] = None

    @classmethod
    def parse(cls, data: Dict[str, Any], element_class: Type[E]) -> "ElementResponse[E]":
        return cls(element=element_class.from_dict(data.get("element")), **cls._ffdc_kwargs(data))


@dataclass
class ElementsResponse(FFDCResponse, Generic[E]):
    elements: List[E] = field(default_factory=list)

    @classmethod
    def parse(cls, data: Dict[str, Any], element_class: Type[E]) -> "ElementsResponse[E]":
        raw = data.get("elements")
        if raw is None:
            raw = data.get("elementList")

        elements: List[E] = []
        for item in raw or []:
            element = element_class.from_dict(item)
            if element is not None:
                elements.append(element)
        return cls(elements=elements, **cls._ffdc_kwargs(data))
