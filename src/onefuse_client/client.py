import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .core.config import Config, load_env_config
from .core.errors import (
    OneFuseClientError,
    OneFuseDecodeError,
    OneFuseServerError,
    OneFuseTransportError,
)
from .core.observability import log_event

T = TypeVar("T", bound=BaseModel)

API_VERSION = "/api/v3/"
API_NAMESPACE = "onefuse"

NAMING_RESOURCE_TYPE = "customNames"
NAMING_POLICY_RESOURCE_TYPE = "namingPolicies"
WORKSPACE_RESOURCE_TYPE = "workspaces"
MICROSOFT_AD_POLICY_RESOURCE_TYPE = "microsoftActiveDirectoryPolicies"
MODULE_ENDPOINT_RESOURCE_TYPE = "endpoints"

SOURCE_HEADER_VALUE = "Terraform"


# --- URL and header construction ------------------------------------------- #


def collection_url(config: Config, resource_type: str) -> str:
    return f"{config.base_url}{API_VERSION}{API_NAMESPACE}/{resource_type}/"


def item_url(config: Config, resource_type: str, id: Union[int, str]) -> str:
    return f"{collection_url(config, resource_type)}{id}/"


def relative_ref(resource_type: str, id: Union[int, str]) -> str:
    """Server-relative reference used inside request bodies."""
    return f"{API_VERSION}{API_NAMESPACE}/{resource_type}/{id}/"


def standard_headers(
    config: Config, *, source: str = SOURCE_HEADER_VALUE
) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "*/*",
        "Cache-Control": "no-cache",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Host": config.host_header,
        "SOURCE": source,
    }


def attach_headers(
    request: httpx.Request, config: Config, *, source: str = SOURCE_HEADER_VALUE
) -> httpx.Request:
    """Set the fixed header set on a built request; credentials go via basic_auth()."""
    request.headers.update(standard_headers(config, source=source))
    return request


def basic_auth(config: Config) -> httpx.BasicAuth:
    return httpx.BasicAuth(config.user, config.password)


# --- Classification and decoding ------------------------------------------- #


def classify_response(response: httpx.Response, *, method: Optional[str] = None) -> None:
    """
    Raise OneFuseServerError for any status >= 500, with the body verbatim.
    Every other status, 4xx included, passes through to the decoder.
    """
    if response.status_code >= 500:
        raise OneFuseServerError(
            status_code=response.status_code,
            method=method or response.request.method,
            url=str(response.request.url),
            response_text=response.text,
        )


def decode_json(response: httpx.Response) -> Dict[str, Any]:
    """Best-effort JSON object; empty, non-JSON and non-object bodies give {}."""
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def parse_record(model: Type[T], payload: Dict[str, Any]) -> T:
    """
    Validate a payload, keeping every top-level field that decodes.

    Keys named in a ValidationError are dropped and the rest revalidated, so
    one mistyped field costs only that field.
    """
    payload = dict(payload)
    while True:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            bad_keys = {err["loc"][0] for err in exc.errors() if err["loc"]}
            bad_keys &= payload.keys()
            if not bad_keys:
                return model()
            for key in bad_keys:
                del payload[key]


def decode_record(
    model: Type[T], response: httpx.Response, *, required: bool = False
) -> T:
    """
    Decode a response body into a record.
    - required=False (reads): fields that do not decode fall back to defaults.
    - required=True (creates): an empty record (nothing identifying survived)
      is a contract violation; raises OneFuseDecodeError with status and body.
    """
    payload = decode_json(response)
    record = parse_record(model, payload)
    if not required:
        return record

    if getattr(record, "is_empty", not payload):
        raise OneFuseDecodeError(
            f"invalid response while creating {model.__name__}",
            status_code=response.status_code,
            response_text=response.text,
        )
    return record


# --- Transport -------------------------------------------------------------- #


class OneFuseClient:
    """
    Shared HTTP client for the OneFuse REST API.
    - Builds URLs and headers from an immutable Config
    - One exchange per call; no retries
    - Raises on transport failures and on >= 500; resource functions decode
    """

    def __init__(
        self,
        config: Config,
        *,
        timeout_seconds: Optional[float] = 10.0,
        source: str = SOURCE_HEADER_VALUE,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        self.config = config
        self.source = source
        self.log = logger or logging.getLogger("onefuse_client.client")

        self._owns_http = http is None
        self.http = http or httpx.Client(
            verify=config.verify_ssl,
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "OneFuseClient":
        return cls(load_env_config(), **kwargs)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "OneFuseClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def collection_url(self, resource_type: str) -> str:
        return collection_url(self.config, resource_type)

    def item_url(self, resource_type: str, id: Union[int, str]) -> str:
        return item_url(self.config, resource_type, id)

    def send(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        resource: Optional[str] = None,
    ) -> httpx.Response:
        """
        Perform one HTTP exchange and classify it.
        - Raises OneFuseTransportError on DNS/connect/TLS/timeout failures
        - Raises OneFuseServerError on status >= 500
        - Returns the response untouched otherwise (4xx included)
        """
        method = method.upper()
        request = attach_headers(
            self.http.build_request(method, url, json=json),
            self.config,
            source=self.source,
        )
        start = time.perf_counter()

        try:
            response = self.http.send(request, auth=basic_auth(self.config))
        except httpx.TransportError as exc:
            self._log_call(request, resource, start, status="exception", exc=exc)
            raise OneFuseTransportError(
                f"Transport error calling {method} {url}: {exc}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log_call(request, resource, start, status="exception", exc=exc)
            raise OneFuseClientError(
                f"HTTPX error calling {method} {url}: {exc}"
            ) from exc

        self._log_call(request, resource, start, status=response.status_code)
        self.log.debug(
            "op.response",
            extra={"resource": resource, "status": response.status_code},
        )
        classify_response(response, method=method)
        return response

    def get(self, url: str, *, resource: Optional[str] = None) -> httpx.Response:
        return self.send("GET", url, resource=resource)

    def post(
        self, url: str, *, json: Dict[str, Any], resource: Optional[str] = None
    ) -> httpx.Response:
        return self.send("POST", url, json=json, resource=resource)

    def delete(self, url: str, *, resource: Optional[str] = None) -> httpx.Response:
        return self.send("DELETE", url, resource=resource)

    def _log_call(
        self,
        request: httpx.Request,
        resource: Optional[str],
        start: float,
        *,
        status: Any,
        exc: Optional[BaseException] = None,
    ) -> None:
        log_event(
            "op_call",
            level=logging.INFO if exc is None else logging.WARNING,
            method=request.method,
            endpoint=request.url.path,
            resource=resource,
            status=status,
            duration_ms=int((time.perf_counter() - start) * 1000),
            error_type=type(exc).__name__ if exc is not None else None,
        )


__all__ = [
    "API_VERSION",
    "API_NAMESPACE",
    "NAMING_RESOURCE_TYPE",
    "NAMING_POLICY_RESOURCE_TYPE",
    "WORKSPACE_RESOURCE_TYPE",
    "MICROSOFT_AD_POLICY_RESOURCE_TYPE",
    "MODULE_ENDPOINT_RESOURCE_TYPE",
    "SOURCE_HEADER_VALUE",
    "OneFuseClient",
    "collection_url",
    "item_url",
    "relative_ref",
    "standard_headers",
    "attach_headers",
    "basic_auth",
    "classify_response",
    "decode_json",
    "parse_record",
    "decode_record",
]
