import logging
from typing import Optional, Union

import httpx

from .config import settings
from .errors import DesignClientError
from .schemas import DesignOut, SaveDesignOut

logger = logging.getLogger(settings.SERVICE_NAME + ".client")


class DesignClient:
    """Async HTTP client for the /api/design endpoints."""

    def __init__(
        self,
        base_url: str = f"http://localhost:{settings.API_PORT}",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 5.0,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "DesignClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def health(self) -> bool:
        resp = await self._client.get("/api/health")
        if not resp.is_success:
            return False
        try:
            body = resp.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("ok") is True

    async def fetch_design(self) -> DesignOut:
        """
        Fetch the current design from the server.

        Raises:
            DesignClientError: if the server answers with a failure status.
        """
        resp = await self._client.get("/api/design")
        if not resp.is_success:
            raise DesignClientError("Failed to fetch design", status_code=resp.status_code)
        return DesignOut.model_validate(resp.json())

    async def save_design(self, design: Union[DesignOut, dict]) -> SaveDesignOut:
        """
        Save the given design to the server.

        The server's error message is surfaced when the body carries one.

        Raises:
            DesignClientError: if the server answers with a failure status.
        """
        if isinstance(design, DesignOut):
            payload = design.model_dump(mode="json")
        else:
            payload = design
        resp = await self._client.post("/api/design", json=payload)

        if not resp.is_success:
            try:
                body = resp.json()
            except ValueError:
                body = {"error": "Unknown error"}
            message = body.get("error") if isinstance(body, dict) else None
            logger.warning(f"Saving design failed with status {resp.status_code}: {message}")
            raise DesignClientError(message or "Failed to save design", status_code=resp.status_code)

        return SaveDesignOut.model_validate(resp.json())
