import logging
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

import requests
from pydantic import BaseModel, TypeAdapter

from .config import ApiSettings, load_settings
from .errors import RequestSpecError, ResponseBodyError, UnexpectedStatusError

logger = logging.getLogger("placeholder-taf.client")

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidatableResponse:
    """
    Wraps a requests.Response for chained status checks and body extraction.

        dto = spec.send("GET", "/users/{user_id}", user_id=1).status_code(200).extract_as(UserDto)
    """

    def __init__(self, response: requests.Response):
        self.response = response

    @property
    def status(self) -> int:
        return self.response.status_code

    @property
    def headers(self):
        return self.response.headers

    def status_code(self, expected: int) -> "ValidatableResponse":
        """Assert the response status; raises UnexpectedStatusError on mismatch."""
        expected = int(expected)
        if self.response.status_code != expected:
            request = self.response.request
            raise UnexpectedStatusError(
                expected=expected,
                actual=self.response.status_code,
                method=request.method if request is not None else "?",
                url=self.response.url,
                body=self.response.text,
            )
        return self

    def json(self) -> Any:
        try:
            return self.response.json()
        except ValueError as e:
            raise ResponseBodyError(
                f"Response from {self.response.url} is not valid JSON: {self.response.text[:100]}"
            ) from e

    def extract_as(self, model: Type[ModelT]) -> ModelT:
        return model.model_validate(self.json())

    def extract_as_list(self, model: Type[ModelT]) -> List[ModelT]:
        data = self.json()
        if not isinstance(data, list):
            raise ResponseBodyError(
                f"Expected a JSON array from {self.response.url}, got {type(data).__name__}"
            )
        return TypeAdapter(List[model]).validate_python(data)


class RequestSpec:
    """
    Base request specification shared by every endpoint.
    Holds:
    - Base URL
    - Default JSON headers
    - Timeout
    - A requests.Session
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if headers:
            self.headers.update(headers)
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Optional[ApiSettings] = None, session: Optional[requests.Session] = None):
        settings = settings or load_settings()
        return cls(
            base_url=settings.base_url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.timeout_seconds,
            session=session,
        )

    def url(self, path: str, **path_params: Union[int, str]) -> str:
        """Resolve a path template like /comments/{comment_id} against the base URL."""
        quoted = {k: quote(str(v), safe="") for k, v in path_params.items()}
        try:
            resolved = path.format(**quoted)
        except (KeyError, IndexError, ValueError) as e:
            raise RequestSpecError(f"Cannot resolve path template {path}: {e}") from e
        return f"{self.base_url}/{resolved.lstrip('/')}"

    def send(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        **path_params: Union[int, str],
    ) -> ValidatableResponse:
        url = self.url(path, **path_params)
        logger.debug(f"{method} {url}", extra={"method": method, "url": url})
        response = self.session.request(
            method,
            url,
            json=json,
            params=params,
            headers=self.headers,
            timeout=self.timeout,
        )
        elapsed_ms = round(response.elapsed.total_seconds() * 1000, 1)
        logger.debug(
            f"{method} {url} -> {response.status_code}",
            extra={"method": method, "url": url, "status": response.status_code, "elapsed_ms": elapsed_ms},
        )
        return ValidatableResponse(response)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
