"""Lightweight HTTP client for the puzzle image save endpoint."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..core.exceptions import UploadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

SERVER_URL_ENV = "CROSSWORD_SERVER_URL"


@dataclass
class UploadResult:
    url: str
    public_id: Optional[str] = None


class PuzzleUploadClient:
    """Posts rendered puzzle images to ``<base_url>/save-crossword``."""

    SAVE_PATH = "/save-crossword"

    def __init__(
        self,
        base_url: Optional[str] = None,
        server_url_env: str = SERVER_URL_ENV,
        timeout_seconds: float = 60.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        resolved = base_url or os.environ.get(server_url_env)
        if not resolved:
            raise UploadError(
                f"Missing upload server URL; pass base_url or set {server_url_env}"
            )
        self.base_url = resolved.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._session = session

    def save_crossword(self, image: str) -> UploadResult:
        """Upload a ``data:image/...`` URI and return the hosted image URL."""

        if not image or not image.startswith("data:image/"):
            raise UploadError("Invalid or missing image")

        url = f"{self.base_url}{self.SAVE_PATH}"
        post = self._session.post if self._session is not None else requests.post
        try:
            response = post(url, json={"image": image}, timeout=self.timeout_seconds)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise UploadError(f"Failed to save crossword: {exc}") from exc
        except ValueError as exc:
            raise UploadError("Save endpoint returned a non-JSON response") from exc

        return self._parse_result(data)

    @staticmethod
    def _parse_result(payload: Dict[str, Any]) -> UploadResult:
        if not payload.get("success"):
            LOGGER.warning("Save endpoint rejected image: %s", payload)
            raise UploadError(payload.get("error") or "Failed to save image")
        image_url = payload.get("url")
        if not image_url:
            raise UploadError("Save endpoint response missing image URL")
        LOGGER.info("Crossword image saved: %s", image_url)
        return UploadResult(url=image_url, public_id=payload.get("public_id"))
