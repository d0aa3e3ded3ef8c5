# primeserve/tools.py
# Named tools over the prime engine: argument validation, dispatch, JSON-ready payloads.
#
# Payload keys mirror the tool protocol the service has always spoken
# (camelCase), so existing clients keep working.

from __future__ import annotations
import re
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from .dispatch import MAX_SAFE_INTEGER, IntegerValue, is_prime
from .prime_utils import (
    format_prime_factorization,
    next_prime,
    previous_prime,
    prime_factorization,
    primes_in_range,
)
from .settings import Settings

_INTEGER_TEXT = re.compile(r"^\s*-?[0-9]+\s*$")

class ToolError(ValueError):
    pass

class ToolArgumentError(ToolError):
    pass

class UnknownToolError(ToolError):
    pass

# ---------- Argument coercion ----------

def _integer(value: Any, message: str) -> int:
    # bool is an int subclass; JSON true/false is never a number here
    if isinstance(value, bool) or value is None:
        raise ToolArgumentError(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ToolArgumentError(message)

def _bounded(n, settings: Settings):
    # every search step is a Miller–Rabin run, so cost grows with the bit length
    if abs(n).bit_length() > settings.max_bits:
        raise ToolArgumentError(f"Number must not exceed {settings.max_bits} bits")
    return n

def _primality_input(value: Any, settings: Settings) -> IntegerValue:
    if isinstance(value, str):
        if not _INTEGER_TEXT.match(value):
            raise ToolArgumentError("Number must be an integer")
        prepared = IntegerValue.of(value)
    else:
        prepared = IntegerValue.of(_integer(value, "Number must be an integer"))
    _bounded(prepared.value, settings)
    return prepared

# ---------- Handlers ----------

def _is_prime(args: Mapping[str, Any], settings: Settings) -> Dict[str, Any]:
    number = args.get("number")
    return {"number": number, "isPrime": is_prime(_primality_input(number, settings))}

def _next_prime(args: Mapping[str, Any], settings: Settings) -> Dict[str, Any]:
    n = _bounded(_integer(args.get("number"), "Number must be an integer"), settings)
    return {"originalNumber": n, "nextPrime": next_prime(n, is_prime)}

def _previous_prime(args: Mapping[str, Any], settings: Settings) -> Dict[str, Any]:
    n = _bounded(_integer(args.get("number"), "Number must be an integer"), settings)
    return {"originalNumber": n, "previousPrime": previous_prime(n, is_prime)}

def _primes_in_range(args: Mapping[str, Any], settings: Settings) -> Dict[str, Any]:
    message = "Start and end must be integers"
    start = _bounded(_integer(args.get("start"), message), settings)
    end = _bounded(_integer(args.get("end"), message), settings)
    if start > end:
        raise ToolArgumentError("Start must be less than or equal to end")
    if end - max(2, start) > settings.max_range_span:
        raise ToolArgumentError(f"Range must not span more than {settings.max_range_span} numbers")
    primes = primes_in_range(start, end, is_prime)
    return {"range": {"start": start, "end": end}, "primes": primes, "count": len(primes)}

def _prime_factorization(args: Mapping[str, Any], settings: Settings) -> Dict[str, Any]:
    n = _integer(args.get("number"), "Number must be an integer")
    if n < 1:
        raise ToolArgumentError("Number must be positive")
    if n > MAX_SAFE_INTEGER:
        raise ToolArgumentError(f"Number must not exceed {MAX_SAFE_INTEGER}")
    factors = prime_factorization(n)
    return {
        "number": n,
        "factors": [asdict(f) for f in factors],
        "formatted": format_prime_factorization(factors),
    }

# ---------- Registry ----------

@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Callable[[Mapping[str, Any], Settings], Dict[str, Any]]

    def describe(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}

def _schema(**properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "object", "properties": properties, "required": list(properties)}

TOOLS: Dict[str, Tool] = {t.name: t for t in (
    Tool(
        "is_prime",
        "Check if a given number is prime",
        _schema(number={
            "type": ["integer", "string"],
            "description": "The number to check for primality (decimal string for large values)",
        }),
        _is_prime,
    ),
    Tool(
        "next_prime",
        "Find the next prime number after a given number",
        _schema(number={"type": "integer", "description": "The number to find the next prime after"}),
        _next_prime,
    ),
    Tool(
        "previous_prime",
        "Find the previous prime number before a given number",
        _schema(number={"type": "integer", "description": "The number to find the previous prime before"}),
        _previous_prime,
    ),
    Tool(
        "primes_in_range",
        "Find all prime numbers in a given range",
        _schema(
            start={"type": "integer", "description": "The start of the range (inclusive)"},
            end={"type": "integer", "description": "The end of the range (inclusive)"},
        ),
        _primes_in_range,
    ),
    Tool(
        "prime_factorization",
        "Perform prime factorization of a given number",
        _schema(number={
            "type": "integer",
            "minimum": 1,
            "maximum": MAX_SAFE_INTEGER,
            "description": "The number to factorize into prime factors",
        }),
        _prime_factorization,
    ),
)}

def list_tools() -> List[Dict[str, Any]]:
    return [t.describe() for t in TOOLS.values()]

def call_tool(name: str, arguments: Optional[Mapping[str, Any]] = None,
              settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Validate arguments and run the named tool. Raises ToolError subclasses."""
    tool = TOOLS.get(name)
    if tool is None:
        raise UnknownToolError(f"Unknown tool: {name}")
    return tool.handler(arguments or {}, settings or Settings())
