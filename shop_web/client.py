# shop_web/client.py
import logging
from http import HTTPStatus
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class APIError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ShopClient:
    """Talks to the shop API; any non-2xx answer raises APIError."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    async def _request(
        self, method: str, path: str, action: str, noun: str, json: Any = None
    ):
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            try:
                response = await client.request(method, path, json=json)
            except httpx.RequestError as exc:
                logger.warning('%s %s failed: %s', method, path, exc)
                raise APIError(f'Failed to {action} {noun}: {exc}') from exc

        if not response.is_success:
            logger.warning('%s %s returned %s', method, path, response.status_code)
            raise APIError(
                f'Failed to {action} {noun}: {response.status_code}',
                response.status_code,
            )
        if response.status_code == HTTPStatus.NO_CONTENT:
            return None
        return response.json()

    async def fetch_all(self, resource: str, noun: str) -> list[dict]:
        return await self._request('GET', f'/{resource}', 'fetch', noun)

    async def fetch_one(self, resource: str, id: str, noun: str) -> dict:
        return await self._request('GET', f'/{resource}/{id}', 'fetch', noun)

    async def create(self, resource: str, body: dict, noun: str) -> dict:
        return await self._request('POST', f'/{resource}', 'create', noun, json=body)

    async def update(self, resource: str, id: str, body: dict, noun: str) -> dict:
        return await self._request(
            'PUT', f'/{resource}/{id}', 'update', noun, json=body
        )

    async def delete(self, resource: str, id: str, noun: str) -> None:
        await self._request('DELETE', f'/{resource}/{id}', 'delete', noun)
