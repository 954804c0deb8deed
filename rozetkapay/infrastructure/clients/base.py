"""Shared request pipeline for every gateway service"""

import json
import logging
import time
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from rozetkapay.config import RozetkaPayConfiguration
from rozetkapay.domain.exceptions import (
    ApiError,
    AuthorizationError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    ParseError,
    RateLimitError,
    TransportError,
)
from rozetkapay.domain.models.base import Contract
from rozetkapay.infrastructure.observability.logging import log_request
from rozetkapay.infrastructure.observability.metrics import record_request
from rozetkapay.utils.query import build_query

ResponseT = TypeVar("ResponseT", bound=Contract)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


class BaseService:
    """
    Common plumbing for the domain services.

    Holds the configuration and the shared transport read-only. Every call
    issues exactly one HTTP request with per-request headers; the shared
    httpx.AsyncClient is never mutated.
    """

    service_name = "base"

    def __init__(
        self,
        configuration: RozetkaPayConfiguration,
        http_client: httpx.AsyncClient,
        logger: Optional[logging.Logger] = None,
    ):
        if configuration is None:
            raise ConfigurationError("configuration is required")
        if http_client is None:
            raise ConfigurationError("http_client is required")
        self._configuration = configuration
        self._http_client = http_client
        self._logger = logger or logging.getLogger(type(self).__module__)

    @property
    def configuration(self) -> RozetkaPayConfiguration:
        return self._configuration

    async def _get(
        self,
        path: str,
        response_model: Optional[Type[ResponseT]],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[ResponseT]:
        return await self._request("GET", path, response_model, params=params)

    async def _post(
        self,
        path: str,
        response_model: Optional[Type[ResponseT]],
        body: Optional[Contract] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[ResponseT]:
        return await self._request("POST", path, response_model, body=body, params=params)

    async def _patch(
        self,
        path: str,
        response_model: Optional[Type[ResponseT]],
        body: Optional[Contract] = None,
    ) -> Optional[ResponseT]:
        return await self._request("PATCH", path, response_model, body=body)

    async def _delete(
        self,
        path: str,
        response_model: Optional[Type[ResponseT]] = None,
    ) -> Optional[ResponseT]:
        return await self._request("DELETE", path, response_model)

    async def _request(
        self,
        method: str,
        path: str,
        response_model: Optional[Type[ResponseT]],
        body: Optional[Contract] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[ResponseT]:
        """
        Issue one call and parse the answer.

        Args:
            method: HTTP verb
            path: Absolute API path starting with "/", segments already escaped
            response_model: Contract to parse into; None discards the body
            body: Request contract serialized without unset fields
            params: Query values, filtered through build_query

        Raises:
            TransportError: The request never got a response
            ApiError: Non-success status (or one of its subclasses)
            ParseError: Success body is not JSON of the expected shape
        """
        url = f"{self._configuration.base_url}{path}"
        started = time.perf_counter()

        try:
            response = await self._http_client.request(
                method,
                url,
                params=(build_query(params) or None) if params else None,
                json=body.to_payload() if body is not None else None,
                headers=self._configuration.request_headers(),
            )
        except httpx.RequestError as e:
            self._finish(method, path, None, "transport_error", started)
            raise TransportError(f"{method} {path} failed: {type(e).__name__}: {e}") from e

        if not response.is_success:
            self._finish(method, path, response.status_code, "api_error", started)
            raise self._error_for(response)

        try:
            result = self._parse(response, response_model)
        except ParseError:
            self._finish(method, path, response.status_code, "parse_error", started)
            raise

        self._finish(method, path, response.status_code, "success", started)
        return result

    def _finish(self, method: str, path: str, status_code: Optional[int], outcome: str, started: float) -> None:
        elapsed = time.perf_counter() - started
        log_request(self._logger, self.service_name, method, path, status_code, elapsed * 1000)
        record_request(self.service_name, method, outcome, elapsed)

    @staticmethod
    def _parse(response: httpx.Response, response_model: Optional[Type[ResponseT]]) -> Optional[ResponseT]:
        if response_model is None:
            return None

        text = response.text
        if response.status_code == 204 or not text.strip():
            return response_model()

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Response is not valid JSON: {e}", body=text) from e

        # ValidationError subclasses ValueError, so it gets its own block
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"Response does not match {response_model.__name__}: {e.error_count()} error(s)",
                body=text,
            ) from e

    @staticmethod
    def _error_for(response: httpx.Response) -> ApiError:
        """Map a non-success response to the matching ApiError subclass"""
        status = response.status_code
        body = response.text
        detail = _error_message(body)

        if status == 400:
            return BadRequestError(detail or "Bad request", status, body)
        if status == 401:
            return AuthorizationError("Unauthorized: invalid credentials or deactivated account", status, body)
        if status == 403:
            return AuthorizationError("Forbidden: access denied", status, body)
        if status == 404:
            return NotFoundError(detail or "Resource not found", status, body)
        if status == 429:
            return RateLimitError(
                detail or "Rate limit exceeded",
                status,
                body,
                retry_after=_retry_after(response.headers.get("Retry-After")),
            )
        if status == 500:
            return ApiError(detail or "Internal server error", status, body)
        return ApiError(f"API error: {status} - {detail or response.reason_phrase}", status, body)


def _error_message(body: str) -> Optional[str]:
    """Pull a human readable message out of a JSON error body"""
    if not body or not body.strip():
        return None
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    for key in ("message", "error"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, dict):
            nested = value.get("message") or value.get("description")
            if isinstance(nested, str) and nested.strip():
                return nested
    return None


def _retry_after(header: Optional[str]) -> float:
    if not header:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        seconds = float(header)
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS
    return seconds if seconds >= 0 else DEFAULT_RETRY_AFTER_SECONDS
