"""HTTP client for the hosted backend (REST tables and serverless functions)."""

from typing import Any

import httpx
from loguru import logger

from festival.config import FestivalSettings


class BackendError(Exception):
    """Error talking to the backend.

    Attributes:
        status_code: HTTP status code, or None if no response was received
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _format_filter_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from a backend error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


class BackendClient:
    """Thin client over the backend's REST table API and function endpoints.

    Tables are served under ``/rest/v1/<table>`` with PostgREST-style query
    parameters (``select``, ``order``, ``limit``, ``<column>=eq.<value>``).
    Serverless functions are served under ``/functions/v1/<name>``.

    Use as a context manager, or call close() when done.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: FestivalSettings, **kwargs) -> "BackendClient":
        if not settings.backend_url or not settings.backend_key:
            raise BackendError(
                "Set FESTIVAL_BACKEND_URL and FESTIVAL_BACKEND_KEY to use the backend."
            )
        return cls(
            settings.backend_url,
            settings.backend_key,
            timeout=settings.request_timeout,
            **kwargs,
        )

    def __enter__(self) -> "BackendClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {path} {kwargs.get('params') or ''}")
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Backend returned HTTP {status} for {method} {path}")
            raise BackendError(
                f"Backend error {status}: {_error_detail(e.response)}",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Could not reach backend for {method} {path}: {e}")
            raise BackendError(f"Error contacting backend: {e}") from e
        return response

    # --- tables ---

    def select(
        self,
        table: str,
        *,
        columns: str = "*",
        filters: dict[str, Any] | None = None,
        order: list[str] | tuple[str, ...] = (),
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch rows from a table.

        Args:
            table: Table or view name
            columns: PostgREST select expression, may embed related tables
            filters: Equality filters, column -> value
            order: Sort terms such as ``"date.asc"`` or ``"created_at.desc"``
            limit: Maximum number of rows

        Returns:
            List of row dicts (possibly empty)
        """
        params = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{_format_filter_value(value)}"
        if order:
            params["order"] = ",".join(order)
        if limit is not None:
            params["limit"] = str(limit)
        return self._request("GET", f"/rest/v1/{table}", params=params).json()

    def select_one(self, table: str, row_id: str, *, columns: str = "*") -> dict[str, Any] | None:
        """Fetch a single row by id, or None if there is no such row."""
        rows = self.select(table, columns=columns, filters={"id": row_id}, limit=1)
        return rows[0] if rows else None

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert a row and return it as stored."""
        response = self._request(
            "POST",
            f"/rest/v1/{table}",
            json=row,
            headers={"Prefer": "return=representation"},
        )
        return response.json()[0]

    def update(self, table: str, row_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Apply changes to a row and return it as stored.

        Raises:
            BackendError: With status 404 if no row has that id
        """
        response = self._request(
            "PATCH",
            f"/rest/v1/{table}",
            params={"id": f"eq.{row_id}"},
            json=changes,
            headers={"Prefer": "return=representation"},
        )
        rows = response.json()
        if not rows:
            raise BackendError(f"No {table} row with id {row_id}", status_code=404)
        return rows[0]

    def delete(self, table: str, row_id: str) -> None:
        self._request("DELETE", f"/rest/v1/{table}", params={"id": f"eq.{row_id}"})

    def count(self, table: str) -> int:
        """Count the rows in a table without fetching them."""
        response = self._request(
            "HEAD",
            f"/rest/v1/{table}",
            params={"select": "*"},
            headers={"Prefer": "count=exact"},
        )
        # Content-Range looks like "0-24/3573", or "*/0" for an empty table
        content_range = response.headers.get("content-range", "")
        _, _, total = content_range.partition("/")
        if not total.isdigit():
            raise BackendError(f"Backend did not report a count for {table}")
        return int(total)

    # --- functions ---

    def invoke_function(self, name: str, payload: dict[str, Any]) -> Any:
        """Call a serverless function with a JSON body and return its JSON reply."""
        return self._request("POST", f"/functions/v1/{name}", json=payload).json()
