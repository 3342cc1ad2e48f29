"""
Normalisation of a logical API operation into a single outbound request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .endpoints import EndpointTemplate
from .validation import validate_access_token, validate_params

__all__ = [
    "OperationRequest",
    "build_operation",
]


@dataclass(frozen=True)
class OperationRequest:
    method: str
    endpoint: str
    data: Optional[Mapping[str, Any]] = None
    params: Optional[Mapping[str, Any]] = None
    token: Optional[str] = None

    @property
    def headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def build_operation(
    method: str,
    endpoint: Union[str, EndpointTemplate],
    *,
    token: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
    required_params: Optional[Sequence[str]] = None,
    params: Optional[Mapping[str, Any]] = None,
    path_params: Optional[Mapping[str, Any]] = None,
    authenticated: bool = True,
) -> OperationRequest:
    """
    Validate the inputs of an operation and return the request to dispatch.

    Path parameters are checked first, then the access token (unless the
    operation is ``authenticated=False``), then the required body fields.
    Query ``params`` are passed through untouched.
    """
    template = endpoint if isinstance(endpoint, EndpointTemplate) else EndpointTemplate.parse(endpoint)
    resolved = template.resolve(path_params)

    if authenticated:
        validate_access_token(token)
    validate_params(data, required_params)

    return OperationRequest(
        method=method.upper(),
        endpoint=resolved,
        data=data,
        params=params,
        token=token if authenticated else None,
    )
