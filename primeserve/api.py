# primeserve/api.py
# JSON endpoints for the tool catalogue.

from __future__ import annotations
import time

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException, NotFound

from .tools import TOOLS, ToolArgumentError, UnknownToolError, call_tool, list_tools

prime_bp = Blueprint("prime_bp", __name__)

def _arguments() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        if request.get_data():
            raise BadRequest("Invalid JSON body")
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Arguments must be a JSON object")
    return data

@prime_bp.get("/api/health")
def health():
    return jsonify({"ok": True, "tools": len(TOOLS)})

@prime_bp.get("/api/tools")
def tools_index():
    return jsonify({"tools": list_tools()})

@prime_bp.post("/api/tools/<name>")
def tools_call(name: str):
    t0 = time.perf_counter()
    args = _arguments()
    try:
        result = call_tool(name, args, current_app.config["PRIMESERVE_SETTINGS"])
    except UnknownToolError as e:
        raise NotFound(str(e)) from e
    except ToolArgumentError as e:
        current_app.logger.warning("%s rejected: %s", name, e)
        raise BadRequest(str(e)) from e
    ms = int((time.perf_counter() - t0) * 1000)
    current_app.logger.info("%s answered in %d ms", name, ms)
    d = jsonify(result)
    d.headers["X-Compute-ms"] = str(ms)
    return d

@prime_bp.app_errorhandler(HTTPException)
def http_error(e: HTTPException):
    return jsonify({"ok": False, "error": e.description}), e.code
