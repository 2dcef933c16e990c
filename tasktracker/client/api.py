"""HTTP client for the task API."""
from typing import Any, Dict, List, Optional

import httpx

from ..config import API_URL


class TaskClientError(Exception):
    """A request to the task API failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TaskClient:
    def __init__(
        self,
        base_url: str = API_URL,
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TaskClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TaskClientError(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            try:
                message = response.json().get("message", response.reason_phrase)
            except (ValueError, AttributeError):
                message = response.reason_phrase
            raise TaskClientError(message, status_code=response.status_code)
        return response

    def _json(self, method: str, path: str, **kwargs) -> Any:
        response = self._request(method, path, **kwargs)
        try:
            return response.json()
        except ValueError as exc:
            raise TaskClientError(
                f"{method} {path} returned a non-JSON body", status_code=response.status_code
            ) from exc

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._json("GET", "/api/tasks")

    def create_task(self, title: str) -> Dict[str, Any]:
        return self._json("POST", "/api/tasks", json={"title": title})

    def update_task(self, task_id: str, completed: bool) -> Dict[str, Any]:
        return self._json("PUT", f"/api/tasks/{task_id}", json={"completed": completed})

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/api/tasks/{task_id}")
