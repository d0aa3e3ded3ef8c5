# primeserve/settings.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None

@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8082
    max_range_span: int = 1_000_000
    max_bits: int = 512
    log_level: str = "INFO"
    url: str = "http://127.0.0.1:8082"
    timeout: float = 30.0
    max_tries: int = 4

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        d = cls()
        return cls(
            host=env.get("PRIMESERVE_HOST") or d.host,
            port=_env_int(env, "PRIMESERVE_PORT", d.port),
            max_range_span=_env_int(env, "PRIMESERVE_MAX_RANGE_SPAN", d.max_range_span),
            max_bits=_env_int(env, "PRIMESERVE_MAX_BITS", d.max_bits),
            log_level=(env.get("PRIMESERVE_LOG_LEVEL") or d.log_level).upper(),
            url=(env.get("PRIMESERVE_URL") or d.url).rstrip("/"),
            timeout=_env_float(env, "PRIMESERVE_TIMEOUT", d.timeout),
            max_tries=max(1, _env_int(env, "PRIMESERVE_MAX_TRIES", d.max_tries)),
        )
