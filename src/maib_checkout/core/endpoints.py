"""
Endpoint templates for the checkout API.

Templates such as ``checkouts/:checkoutId/cancel`` are split once into literal
segments and named placeholders, so resolving one is a lookup per placeholder
rather than a textual search and replace.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from .errors import MaibCheckoutValidationError
from .validation import validate_id_param

__all__ = [
    "API_ENDPOINTS",
    "EndpointTemplate",
    "Placeholder",
]


@dataclass(frozen=True)
class Placeholder:
    name: str

    def __str__(self) -> str:
        return f":{self.name}"


Segment = Union[str, Placeholder]


@dataclass(frozen=True)
class EndpointTemplate:
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, template: str) -> "EndpointTemplate":
        segments = []
        for part in template.split("/"):
            if part.startswith(":") and len(part) > 1:
                segments.append(Placeholder(part[1:]))
            else:
                segments.append(part)
        return cls(segments=tuple(segments))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.segments if isinstance(s, Placeholder))

    def resolve(self, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Substitute every placeholder with its value from ``params``.

        Values are inserted verbatim; callers are expected to pass URL-safe ids.
        """
        params = dict(params or {})
        unknown = sorted(set(params) - set(self.placeholders))
        if unknown:
            raise MaibCheckoutValidationError(
                f"Unknown path parameters for {self}: {', '.join(unknown)}"
            )

        parts = []
        for segment in self.segments:
            if isinstance(segment, Placeholder):
                value = params.get(segment.name)
                validate_id_param(value)
                parts.append(str(value))
            else:
                parts.append(segment)
        return "/".join(parts)

    def __str__(self) -> str:
        return "/".join(str(segment) for segment in self.segments)


# https://docs.maibmerchants.md/checkout/api-reference/endpoints
API_ENDPOINTS: Mapping[str, EndpointTemplate] = MappingProxyType({
    "AUTH_TOKEN": EndpointTemplate.parse("auth/token"),
    "CHECKOUTS": EndpointTemplate.parse("checkouts"),
    "CHECKOUTS_CANCEL": EndpointTemplate.parse("checkouts/:checkoutId/cancel"),
    "CHECKOUTS_DETAILS": EndpointTemplate.parse("checkouts/:checkoutId"),
    "PAYMENTS": EndpointTemplate.parse("payments"),
    "PAYMENTS_ID": EndpointTemplate.parse("payments/:payId"),
    "PAYMENTS_REFUND": EndpointTemplate.parse("payments/:payId/refund"),
    "MIA_TEST_PAY": EndpointTemplate.parse("mia/test-pay"),
})
