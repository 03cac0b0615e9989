"""RestClient — thin aiohttp wrapper that turns transport failures into RemoteRequestError."""
import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from vision_lab.constants import MSG_REMOTE_ERROR, OCTET_STREAM
from vision_lab.errors import RemoteRequestError

logger = logging.getLogger(__name__)


def _service_message(body: str) -> Optional[str]:
    """Pull the human-readable message out of an Azure error body, if any."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return None
    match data:
        case {"error": {"message": str() as message}}:
            return message
        case {"message": str() as message}:
            return message
        case _:
            return None


class RestClient:
    """One aiohttp session bound to a service endpoint and its key header.

    Use as an async context manager; the session lives for one operation.
    """

    def __init__(self, endpoint: str, key_header: str, key: str, timeout: float) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._headers = {key_header: key}
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "RestClient":
        self._session = aiohttp.ClientSession(headers=self._headers, timeout=self._timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False

    async def close(self) -> None:
        match self._session:
            case None:
                pass
            case session:
                await session.close()
                self._session = None

    def url(self, path: str) -> str:
        return self._endpoint + path

    async def get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post_json(
        self,
        path: str,
        data: Optional[bytes] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Any:
        headers = {"Content-Type": OCTET_STREAM} if data is not None else None
        return await self._request("POST", path, params=params, data=data, headers=headers)

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        if self._session is None:
            raise RuntimeError("RestClient not initialized. Use 'async with' context manager.")

        url = self.url(path)
        try:
            async with self._session.request(method, url, **kwargs) as response:
                text = (await response.read()).decode("utf-8", errors="replace")
                if response.status >= 400:
                    detail = _service_message(text) or response.reason or "error"
                    logger.debug("%s %s -> %s %s", method, url, response.status, text[:500])
                    raise RemoteRequestError(
                        f"{method} {url} returned {response.status}: {detail}",
                        status=response.status,
                        body=text,
                    )
        except asyncio.TimeoutError:
            logger.error(MSG_REMOTE_ERROR, f"timeout on {method} {url}")
            raise RemoteRequestError(f"{method} {url} timed out") from None
        except aiohttp.ClientError as exc:
            logger.error(MSG_REMOTE_ERROR, exc)
            raise RemoteRequestError(f"{method} {url} failed: {exc}") from exc

        try:
            return json.loads(text) if text else {}
        except json.JSONDecodeError:
            raise RemoteRequestError(
                f"{method} {url} returned a non-JSON body",
                status=response.status,
                body=text[:500],
            ) from None
