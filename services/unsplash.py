# services/unsplash.py

import logging
from typing import List

import requests

from core.config import Settings
from core.errors import ImageLookupFailure

logger = logging.getLogger(__name__)

_BASE_URL = "https://api.unsplash.com/search/photos"
PER_PAGE = 6

PLACEHOLDER_IMAGES: List[str] = [
    "https://images.unsplash.com/photo-1488646953014-85cb44e25828?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop&w=1000&q=80",
    "https://images.unsplash.com/photo-1469474968028-56623f02e42e?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D&auto=format&fit=crop&w=1000&q=80",
]


class UnsplashClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    def search_photos(self, city: str) -> List[str]:
        """Landscape photos of the city, at most PER_PAGE of them."""
        params = {
            "query": f"{city} travel landscape",
            "per_page": PER_PAGE,
            "orientation": "landscape",
            "client_id": self.settings.unsplash_api_key,
        }
        try:
            r = requests.get(_BASE_URL, params=params, timeout=self.settings.unsplash_timeout)
        except requests.RequestException as e:
            raise ImageLookupFailure(f"Unsplash request failed: {e}") from e

        if r.status_code >= 400:
            try:
                errors = r.json().get("errors") or [r.text]
                msg = "; ".join(str(m) for m in errors)
            except (ValueError, AttributeError):
                msg = r.text
            raise ImageLookupFailure(f"Unsplash {r.status_code}: {msg}", status_code=r.status_code)

        try:
            results = r.json()["results"]
            return [item["urls"]["regular"] for item in results][:PER_PAGE]
        except (ValueError, KeyError, TypeError) as e:
            raise ImageLookupFailure(f"Unexpected Unsplash payload: {e}") from e

    def city_images(self, city: str) -> List[str]:
        try:
            return self.search_photos(city)
        except ImageLookupFailure as e:
            logger.warning("Unsplash API error: %s", e)
            return list(PLACEHOLDER_IMAGES)
