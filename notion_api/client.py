"""
notion_api/client.py — klient REST API Notion (requests).

Obsługiwane endpointy (jedna partia wyników, bez paginacji):
  retrieve_page(page_id)               GET    /v1/pages/{id}
  append_children(block_id, children)  PATCH  /v1/blocks/{id}/children
  delete_block(block_id)               DELETE /v1/blocks/{id}
  retrieve_block(block_id)             GET    /v1/blocks/{id}
  update_block(block_id, payload)      PATCH  /v1/blocks/{id}
  list_children(block_id)              GET    /v1/blocks/{id}/children

Każdy błąd (HTTP != 2xx lub błąd sieci) kończy się NotionAPIError.
Zapytania nie są ponawiane.
"""

from __future__ import annotations

from typing import Any

import requests

from data_model.config import DEFAULT_API_VERSION

API_BASE_URL    = "https://api.notion.com/v1"
DEFAULT_TIMEOUT = 30
PAGE_SIZE       = 100   # maksimum API dla list_children


class NotionAPIError(Exception):
    """
    Błąd wywołania API Notion.

    - status:  kod HTTP (None dla błędów sieci)
    - code:    kod błędu Notion, np. "object_not_found", "unauthorized"
    - message: komunikat z odpowiedzi lub opis błędu sieci
    """

    def __init__(self, message: str, status: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status  = status
        self.code    = code

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        label = f"{self.status} {self.code}" if self.code else str(self.status)
        return f"[{label}] {self.message}"


class NotionClient:
    """Cienka warstwa nad REST API Notion; zwraca surowe słowniki JSON."""

    def __init__(
        self,
        token: str,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization":  f"Bearer {token}",
            "Notion-Version": api_version,
            "Content-Type":   "application/json",
        })

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{API_BASE_URL}/{path}"
        try:
            resp = self.session.request(
                method, url, json=json, params=params, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise NotionAPIError(f"{method} {url}: {exc}") from exc

        if not resp.ok:
            raise _error_from_response(resp)
        try:
            return resp.json()
        except ValueError as exc:
            raise NotionAPIError(
                f"{method} {url}: odpowiedź nie jest poprawnym JSON", status=resp.status_code
            ) from exc

    # ------------------------------------------------------------------
    # Strony
    # ------------------------------------------------------------------

    def retrieve_page(self, page_id: str) -> dict[str, Any]:
        return self._request("GET", f"pages/{page_id}")

    # ------------------------------------------------------------------
    # Bloki
    # ------------------------------------------------------------------

    def append_children(self, block_id: str, children: list[dict[str, Any]]) -> dict[str, Any]:
        """Dopisuje bloki na końcu listy dzieci; zwraca {"results": [...]}."""
        return self._request("PATCH", f"blocks/{block_id}/children", json={"children": children})

    def delete_block(self, block_id: str) -> dict[str, Any]:
        """Archiwizuje blok (Notion nie usuwa go fizycznie)."""
        return self._request("DELETE", f"blocks/{block_id}")

    def retrieve_block(self, block_id: str) -> dict[str, Any]:
        return self._request("GET", f"blocks/{block_id}")

    def update_block(self, block_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("PATCH", f"blocks/{block_id}", json=payload)

    def list_children(self, block_id: str) -> dict[str, Any]:
        """Bezpośrednie dzieci bloku (lub strony); tylko pierwsza partia wyników."""
        return self._request(
            "GET", f"blocks/{block_id}/children", params={"page_size": PAGE_SIZE}
        )


def _error_from_response(resp: requests.Response) -> NotionAPIError:
    """Buduje NotionAPIError z odpowiedzi błędu ({"object": "error", ...})."""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = str(body.get("message") or resp.reason or "")
        code = body.get("code")
    else:
        message = resp.text or str(resp.reason or "")
        code = None
    return NotionAPIError(message, status=resp.status_code, code=code)
