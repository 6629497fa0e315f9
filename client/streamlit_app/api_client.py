"""HTTP client for the TweetForge FastAPI backend."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from config import BACKEND_BASE_URL


class APIClient:
    def __init__(self, base_url: str = BACKEND_BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    # -------------------- Tweets --------------------
    def generate(self, message: str, style: str | None = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"message": message}
        if style:
            payload["style"] = style
        return self._post("/api/generate", json=payload)

    def list_tweets(self, limit: int | None = None) -> Dict[str, Any]:
        params = {"limit": limit} if limit else None
        return self._get("/api/tweets", params=params)

    def delete_tweet(self, tweet_id: str) -> Dict[str, Any]:
        return self._delete(f"/api/tweets/{tweet_id}")

    # -------------------- Internal helpers --------------------
    def _headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json"}

    def _check(self, res: requests.Response, method: str, path: str) -> Dict[str, Any]:
        try:
            res.raise_for_status()
        except requests.HTTPError as exc:
            detail = f"{method} {path} -> {res.status_code} {res.reason}; body={res.text}"
            raise requests.HTTPError(detail, response=res) from exc
        return res.json() if res.text else {}

    def _post(self, path: str, json: Dict[str, Any] | None = None, timeout: int = 120) -> Dict[str, Any]:
        res = requests.post(f"{self.base_url}{path}", json=json or {}, headers=self._headers(), timeout=timeout)
        return self._check(res, "POST", path)

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        res = requests.get(f"{self.base_url}{path}", params=params or {}, headers=self._headers(), timeout=30)
        return self._check(res, "GET", path)

    def _delete(self, path: str) -> Dict[str, Any]:
        res = requests.delete(f"{self.base_url}{path}", headers=self._headers(), timeout=30)
        return self._check(res, "DELETE", path)


def error_message(exc: Exception, fallback: str) -> str:
    """Pick the backend envelope's ``error`` text for display; anything else maps to ``fallback``."""
    response = getattr(exc, "response", None)
    if response is None:
        return fallback
    try:
        error = response.json().get("error")
    except (ValueError, AttributeError):
        return fallback
    return error if isinstance(error, str) and error else fallback


def get_client(base_url: str | None = None) -> APIClient:
    return APIClient(base_url=base_url or BACKEND_BASE_URL)
