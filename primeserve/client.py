# primeserve/client.py
# Thin requests-based client for the primeserve HTTP API.

from __future__ import annotations
import logging
import random
import time
from typing import Any, Dict, List, Optional

import requests

from . import __version__
from .dispatch import MAX_SAFE_INTEGER
from .prime_utils import PrimeFactor
from .settings import Settings

log = logging.getLogger(__name__)

class PrimeClientError(RuntimeError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

class PrimeClient:
    """
    Calls the tool endpoints with retries.

    Connection errors, timeouts and 5xx answers are retried with capped
    exponential backoff; 4xx answers raise PrimeClientError straight away.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 max_tries: Optional[int] = None, session: Optional[requests.Session] = None):
        if base_url is None or timeout is None or max_tries is None:
            settings = Settings.from_env()
            base_url = base_url or settings.url
            timeout = settings.timeout if timeout is None else timeout
            max_tries = settings.max_tries if max_tries is None else max_tries
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_tries = max(1, max_tries)
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": f"primeserve-client/{__version__}"})

    def _decode(self, r: requests.Response) -> Dict[str, Any]:
        try:
            return r.json()
        except ValueError:
            raise PrimeClientError(f"non-JSON answer (HTTP {r.status_code})", status=r.status_code) from None

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        last = "no attempt made"
        for attempt in range(1, self.max_tries + 1):
            try:
                r = self.session.request(method, url, json=payload, timeout=self.timeout)
            except requests.RequestException as e:
                last = f"{e.__class__.__name__}: {e}"
            else:
                if r.status_code < 500:
                    body = self._decode(r)
                    if not r.ok:
                        raise PrimeClientError(body.get("error") or f"HTTP {r.status_code}", status=r.status_code)
                    return body
                last = f"HTTP {r.status_code}"
            log.warning("%s %s failed (try %d/%d): %s", method, url, attempt, self.max_tries, last)
            if attempt < self.max_tries:
                time.sleep(min(15.0, (2 ** attempt) + random.uniform(0, 1)))
        raise PrimeClientError(f"gave up after {self.max_tries} tries: {last}")

    # ---- raw endpoints ----

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/api/health")

    def list_tools(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/tools")["tools"]

    def call(self, name: str, **arguments: Any) -> Dict[str, Any]:
        return self._request("POST", f"/api/tools/{name}", arguments)

    # ---- typed helpers ----

    def is_prime(self, n: int) -> bool:
        # JSON numbers past 2^53 lose precision in most clients; send them as text
        number: Any = str(n) if abs(n) > MAX_SAFE_INTEGER else n
        return self.call("is_prime", number=number)["isPrime"]

    def next_prime(self, n: int) -> int:
        return self.call("next_prime", number=n)["nextPrime"]

    def previous_prime(self, n: int) -> Optional[int]:
        return self.call("previous_prime", number=n)["previousPrime"]

    def primes_in_range(self, start: int, end: int) -> List[int]:
        return self.call("primes_in_range", start=start, end=end)["primes"]

    def prime_factorization(self, n: int) -> List[PrimeFactor]:
        data = self.call("prime_factorization", number=n)
        return [PrimeFactor(f["prime"], f["exponent"]) for f in data["factors"]]
