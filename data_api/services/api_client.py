"""API client service for interacting with the Data API."""

from typing import Any
from urllib.parse import quote

import httpx

from data_api.core.config import settings


def _record_path(record_id: str) -> str:
    """Encode a record ID as a single URL path segment."""
    return quote(record_id, safe="")


class ApiClientService:
    """Service for Data API client operations."""

    @staticmethod
    def get_client(base_url: str | None = None) -> httpx.Client:
        """Get configured HTTP client.

        Args:
            base_url: API base URL (defaults to settings.api_url)

        Returns:
            Configured httpx.Client with base_url and timeout
        """
        if base_url is None:
            base_url = settings.api_url

        return httpx.Client(base_url=base_url, timeout=30.0)

    @staticmethod
    def _send(
        method: str,
        url: str,
        client: httpx.Client | None = None,
        **kwargs: Any,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            httpx.HTTPStatusError: If API request fails
        """
        should_close = client is None
        if client is None:
            client = ApiClientService.get_client()

        try:
            response = client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        finally:
            if should_close:
                client.close()

    @staticmethod
    def list_records(client: httpx.Client | None = None) -> list[dict[str, str]]:
        """List every stored record."""
        return ApiClientService._send("GET", "/data", client=client)

    @staticmethod
    def get_record(record_id: str, client: httpx.Client | None = None) -> dict[str, str]:
        """Get record by ID.

        Raises:
            httpx.HTTPStatusError: If API request fails (e.g., 404 for not found)
        """
        return ApiClientService._send(
            "GET", f"/data/{_record_path(record_id)}", client=client
        )

    @staticmethod
    def create_record(
        record_id: str, message: str, client: httpx.Client | None = None
    ) -> dict[str, str]:
        """Create a new record.

        Raises:
            httpx.HTTPStatusError: If API request fails (e.g., 409 for duplicates)
        """
        return ApiClientService._send(
            "POST", "/data", client=client, json={"ID": record_id, "Message": message}
        )

    @staticmethod
    def update_record(
        record_id: str, message: str, client: httpx.Client | None = None
    ) -> dict[str, str]:
        """Update a record's message.

        Returns:
            The record as it was before the update
        """
        return ApiClientService._send(
            "PATCH",
            f"/data/{_record_path(record_id)}",
            client=client,
            json={"ID": record_id, "Message": message},
        )

    @staticmethod
    def delete_record(record_id: str, client: httpx.Client | None = None) -> dict[str, Any]:
        """Delete a record."""
        return ApiClientService._send(
            "DELETE", f"/data/{_record_path(record_id)}", client=client
        )
