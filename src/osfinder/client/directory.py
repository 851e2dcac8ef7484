"""Async HTTP client for the directory API."""

import logging
from typing import Any
from uuid import UUID

import httpx

from osfinder.client.errors import (
    AuthenticationRequiredError,
    DuplicateError,
    NetworkError,
    PaymentRequiredError,
    ValidationError,
    WorkflowError,
)


logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def error_from_response(response: httpx.Response) -> WorkflowError:
    """Map an error response to the matching client exception."""
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    message = body.get("message") or body.get("detail") or response.reason_phrase or "Request failed"
    kwargs = {
        "status_code": response.status_code,
        "error_code": body.get("error_code"),
        "details": body.get("details"),
    }

    status = response.status_code
    if status >= 500:
        return NetworkError(message, **kwargs)
    if status == 401:
        return AuthenticationRequiredError(message, **kwargs)
    if status == 402:
        return PaymentRequiredError(message, **kwargs)
    if status == 409:
        return DuplicateError(message, **kwargs)
    return ValidationError(message, **kwargs)


class DirectoryClient:
    """One coroutine per API operation.

    Keeps the access token from the last successful login and sends it on
    every request. Use as an async context manager, or call aclose().
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 10.0,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)
        self.access_token: str | None = None
        self.refresh_token: str | None = None

    async def __aenter__(self) -> "DirectoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def authenticated(self) -> bool:
        return self.access_token is not None

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        try:
            response = await self._http.request(method, f"{API_PREFIX}{path}", json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {type(e).__name__}")
            raise NetworkError(f"Could not reach the directory: {e}") from e

        if response.status_code >= 400:
            raise error_from_response(response)
        if not response.content:
            return None
        return response.json()

    # Auth

    async def register(self, email: str, password: str, full_name: str) -> dict:
        return await self._request(
            "POST", "/auth/register", {"email": email, "password": password, "full_name": full_name}
        )

    async def login(self, email: str, password: str) -> dict:
        tokens = await self._request("POST", "/auth/login", {"email": email, "password": password})
        self.access_token = tokens["access_token"]
        self.refresh_token = tokens["refresh_token"]
        return tokens

    async def refresh(self) -> dict:
        if not self.refresh_token:
            raise AuthenticationRequiredError("Not signed in")
        tokens = await self._request("POST", "/auth/refresh", {"refresh_token": self.refresh_token})
        self.access_token = tokens["access_token"]
        self.refresh_token = tokens["refresh_token"]
        return tokens

    async def me(self) -> dict:
        return await self._request("GET", "/auth/me")

    def sign_out(self) -> None:
        self.access_token = None
        self.refresh_token = None

    # Labels

    async def list_categories(self) -> list[dict]:
        return await self._request("GET", "/categories")

    async def list_proprietary(self) -> list[dict]:
        return await self._request("GET", "/proprietary")

    async def list_tech_stacks(self) -> list[dict]:
        return await self._request("GET", "/tech-stacks")

    # Submission

    async def check_duplicate(self, name: str, github: str) -> dict:
        return await self._request("POST", "/submit/check-duplicate", {"name": name, "github": github})

    async def load_draft(self) -> dict | None:
        return await self._request("GET", "/submit/draft")

    async def save_draft(self, payload: dict) -> dict:
        return await self._request("POST", "/submit/draft", payload)

    async def delete_draft(self) -> dict:
        return await self._request("DELETE", "/submit/draft")

    async def submit(self, payload: dict) -> dict:
        return await self._request("POST", "/submit", payload)

    async def verify_backlink(self, github_url: str) -> dict:
        return await self._request("POST", "/verify-backlink", {"github_url": github_url})

    async def quote(self, product: str = "sponsor_submission", coupon_code: str | None = None) -> dict:
        return await self._request("POST", "/payments/quote", {"product": product, "coupon_code": coupon_code})

    # Claims

    async def initiate_claim(self, github: str) -> dict:
        return await self._request("POST", "/submit/claim", {"github": github})

    async def verify_claim(self, alternative_id: UUID | str) -> dict:
        return await self._request("PUT", "/submit/claim", {"alternative_id": str(alternative_id)})
