from typing import Any, Dict, Optional, Union

from ..client import RequestSpec, ValidatableResponse
from ..models import PlaceholderModel


class WebEndpoint:
    """Shared HTTP helpers for resource endpoints built on a RequestSpec."""

    def __init__(self, spec: RequestSpec):
        self.spec = spec

    @staticmethod
    def _payload(body: Any) -> Any:
        if isinstance(body, PlaceholderModel):
            return body.to_payload()
        return body

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None, **path_params: Union[int, str]) -> ValidatableResponse:
        return self.spec.send("GET", path, params=params, **path_params)

    def _post(self, path: str, body: Any, **path_params: Union[int, str]) -> ValidatableResponse:
        return self.spec.send("POST", path, json=self._payload(body), **path_params)

    def _put(self, path: str, body: Any, **path_params: Union[int, str]) -> ValidatableResponse:
        return self.spec.send("PUT", path, json=self._payload(body), **path_params)

    def _delete(self, path: str, **path_params: Union[int, str]) -> ValidatableResponse:
        return self.spec.send("DELETE", path, **path_params)
