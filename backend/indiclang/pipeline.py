"""Translate-then-execute pipeline.

Source text first goes through a translator, the boundary where
natural-language-flavored code becomes the executable subset, and the result
is handed to an `Interpreter`. The translator is any callable `str -> str`;
it signals failure by raising `TranslationError`. The default translator
passes the text through unchanged.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .errors import TranslationError
from .interpreter import Interpreter

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Translator = Callable[[str], str]


def identity_translator(source: str) -> str:
    return source


def translate_and_execute(
    source: str,
    translator: Optional[Translator] = None,
    interpreter: Optional[Interpreter] = None,
) -> Dict[str, Any]:
    """Translate `source` and run the result.

    Returns `{"output", "error", "code"}` where `code` is the executable text
    that was run. When translation fails the error is returned verbatim,
    `output` and `code` are empty and nothing is executed.
    """
    translate = translator or identity_translator
    try:
        code = translate(source)
    except TranslationError as e:
        logger.debug("translation failed: %s", e)
        return {"output": "", "error": str(e), "code": ""}
    if not isinstance(code, str):
        logger.debug("translator returned %s instead of text", type(code).__name__)
        return {"output": "", "error": "Translator did not return executable text", "code": ""}

    it = interpreter or Interpreter()
    result = it.execute(code)
    result["code"] = code
    return result
