import logging
from typing import Any, Dict, List
import requests

logger = logging.getLogger(__name__)

class EventAPIClient:
    """Client for the sports events REST API."""

    def __init__(self, base_url: str, timeout: int = 30, session: requests.Session = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, *parts: str) -> str:
        return '/'.join([f"{self.base_url}/api/events", *parts]).rstrip('/')

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise

    def get_events(self) -> List[Dict[str, Any]]:
        """
        Fetch all events, ordered by date and start time.

        Returns:
            List of response-shaped events

        Raises:
            requests.RequestException: If the API request fails
            ValueError: If the API response is not a list
        """
        events = self._request('GET', self._url())
        if not isinstance(events, list):
            raise ValueError("API response must be a list of events")
        return events

    def get_event(self, event_id: str) -> Dict[str, Any]:
        """Fetch one event. Raises requests.HTTPError (404) if it does not exist."""
        return self._request('GET', self._url(event_id))

    def create_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create an event.

        Args:
            event: Every event field except eventId

        Returns:
            The stored document, including the assigned eventId
        """
        created = self._request('POST', self._url(), json=event)
        logger.info(f"Created event {created.get('eventId')}")
        return created

    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update. Returns ``{"eventId", "changes"}``."""
        return self._request('PUT', self._url(event_id), json=changes)

    def delete_event(self, event_id: str) -> Dict[str, Any]:
        """Delete an event. Returns the removed document."""
        return self._request('DELETE', self._url(event_id))
