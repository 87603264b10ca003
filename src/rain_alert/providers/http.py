from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional, Dict, Any

import requests
from requests.exceptions import ReadTimeout, ConnectionError


@dataclass
class HTTPClient:
    base_url: str
    user_agent: str = "rain-alert/0.1"
    timeout_s: int = 10
    tries: int = 3
    backoff_s: float = 0.8

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")
        self.s = requests.Session()
        self.s.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, timeout_s: Optional[int] = None) -> Any:
        timeout = timeout_s if timeout_s is not None else self.timeout_s
        last_err: Optional[Exception] = None
        for attempt in range(self.tries):
            try:
                r = self.s.get(self._url(path), timeout=timeout)
                r.raise_for_status()
                return r.json()
            except (ReadTimeout, ConnectionError) as e:
                last_err = e
                time.sleep(self.backoff_s * (2**attempt))
        raise last_err if last_err else RuntimeError("HTTP get_json failed")

    def post_json(self, path: str, body: Dict[str, Any], timeout_s: Optional[int] = None) -> Any:
        # Not retried: a timed-out POST may already have created the row
        timeout = timeout_s if timeout_s is not None else self.timeout_s
        r = self.s.post(self._url(path), json=body, timeout=timeout)
        r.raise_for_status()
        return r.json()
