"""FastAPI application entrypoints for IndicLang.

This module exposes the HTTP endpoints used by the frontend and tests. It
keeps handlers intentionally small: each `/run` request constructs a fresh
`Interpreter` to avoid cross-request state sharing and calls the translation
pipeline. Server-side caps are enforced so clients cannot raise the loop
limit.
"""

import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from ..indiclang.interpreter import Interpreter
from ..indiclang.pipeline import translate_and_execute

logger = logging.getLogger(__name__)

# Operators may lower the loop cap for the whole server (never raise it).
DEFAULT_MAX_LOOP = Interpreter().max_loop
SERVER_MAX_LOOP = min(int(os.environ.get("INDICLANG_MAX_LOOP") or DEFAULT_MAX_LOOP), DEFAULT_MAX_LOOP)

app = FastAPI(title="IndicLang API", version="0.1")


def _cap_settings(settings: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Enforce server-side safe caps for runtime tunables.

    Clients may include a `settings` object with per-run tunables. The server
    must not trust these entirely; each requested value is coerced and then
    clamped to the server ceiling.

    Returns a dict whose keys match `Interpreter` attributes.
    """
    safe = {"max_loop": SERVER_MAX_LOOP}
    if not settings:
        return safe
    caps = {}
    caps["max_loop"] = max(0, min(int(settings.get("max_loop", safe["max_loop"])), safe["max_loop"]))
    return caps


class RunRequest(BaseModel):
    """Pydantic model for the `/run` request body.

    Fields:
        code: source text to translate and execute.
        settings: optional runtime tunables; will be capped server-side.
    """
    code: str
    settings: Optional[Dict[str, Any]] = None


@app.post("/run")
async def run_code(req: RunRequest):
    """Handle a code execution request.

    Builds a fresh `Interpreter` per request, applies capped settings and runs
    the translate-then-execute pipeline. Any exception is turned into an
    `error` so callers always receive the same JSON shape.
    """
    start = time.time()
    try:
        capped = _cap_settings(req.settings or {})
        it = Interpreter(max_loop=capped["max_loop"])
        result = translate_and_execute(req.code, interpreter=it)
    except Exception as e:
        logger.exception("run request failed")
        return {
            "output": "",
            "error": str(e),
            "code": "",
            "duration_ms": int((time.time() - start) * 1000),
        }
    result["duration_ms"] = int((time.time() - start) * 1000)
    logger.debug("run finished in %d ms", result["duration_ms"])
    return result


@app.get("/health")
async def health():
    return {"status": "ok"}
