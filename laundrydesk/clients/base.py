"""
Base API Client - async HTTP access to the LaundryDesk JSON endpoints
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type
import logging

import httpx
from pydantic import BaseModel

from laundrydesk.core import settings
from laundrydesk.core.exceptions import ValidationFailedError
from laundrydesk.schemas.common import validate_payload, dump

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """
    Uniform outcome of a client call

    Every client method resolves to one of these, whether the request
    succeeded, was rejected by the server, or never reached it.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    details: Optional[List[Dict[str, Any]]] = None
    count: Optional[int] = None


class ApiRequestError(Exception):
    """Non-success HTTP status, carrying the server-provided message"""

    def __init__(self, message: str, status_code: int, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ApiClient:
    """
    Thin httpx wrapper around the JSON envelope

    Base URL and timeout come from settings; a transport can be injected
    (e.g. httpx.ASGITransport to talk to an in-process app).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self.transport = transport

    def _build_url(self, endpoint: str) -> str:
        """Build full API URL"""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _log_api_call(self, method: str, endpoint: str, status_code: int):
        logger.debug(f"{method} {endpoint} -> {status_code}")

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """Send one request and normalize the outcome; never raises"""
        url = self._build_url(endpoint)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, json=payload, params=params)
            self._log_api_call(method, endpoint, response.status_code)

            try:
                body = response.json()
            except ValueError:
                raise ApiRequestError(
                    f"Unexpected response from server ({response.status_code})",
                    response.status_code,
                )
            if not isinstance(body, dict):
                raise ApiRequestError("Unexpected response from server", response.status_code)

            if response.is_error or not body.get("success", False):
                raise ApiRequestError(
                    body.get("error") or f"Request failed with status {response.status_code}",
                    response.status_code,
                    body.get("details"),
                )

            return ServiceResult(
                success=True,
                data=body.get("data"),
                message=body.get("message"),
                count=body.get("count"),
            )

        except ApiRequestError as e:
            logger.warning(f"{method} {endpoint} failed ({e.status_code}): {e.message}")
            return ServiceResult(success=False, error=e.message, details=e.details)
        except httpx.RequestError as e:
            logger.error(f"{method} {endpoint} request error: {e}")
            return ServiceResult(success=False, error="Network error: unable to reach the server")


class ResourceClient:
    """CRUD calls for one resource, with client-side schema checks before sending"""
    RESOURCE: str = ""
    SCHEMA: Type[BaseModel] = BaseModel

    def __init__(self, api: Optional[ApiClient] = None):
        self.api = api or ApiClient()

    def _prepare(self, data: Any):
        """Validate against the shared schema; returns (payload, failure result)"""
        try:
            model = validate_payload(self.SCHEMA, data)
        except ValidationFailedError as e:
            return None, ServiceResult(success=False, error=e.message, details=e.details)
        return dump(model), None

    async def get_all(self) -> ServiceResult:
        return await self.api.request("GET", self.RESOURCE)

    async def get_by_id(self, resource_id: int) -> ServiceResult:
        return await self.api.request("GET", f"{self.RESOURCE}/{resource_id}")

    async def create(self, data: Any) -> ServiceResult:
        payload, failure = self._prepare(data)
        if failure:
            return failure
        return await self.api.request("POST", self.RESOURCE, payload=payload)

    async def update(self, resource_id: int, data: Any) -> ServiceResult:
        payload, failure = self._prepare(data)
        if failure:
            return failure
        return await self.api.request("PUT", f"{self.RESOURCE}/{resource_id}", payload=payload)

    async def delete(self, resource_id: int) -> ServiceResult:
        return await self.api.request("DELETE", f"{self.RESOURCE}/{resource_id}")
