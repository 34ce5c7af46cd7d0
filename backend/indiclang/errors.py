"""Exception types shared by the IndicLang runner.

The interpreter itself never raises for in-language problems (unknown
statements, unbound names, division by zero and so on are absorbed as
defaults). These exceptions exist for the boundaries around it.
"""

from typing import Optional


class IndicLangError(Exception):
    """Base class for errors raised by the IndicLang runner."""


class TranslationError(IndicLangError):
    """Raised by a translator when it cannot produce executable text.

    The pipeline surfaces the message verbatim as the run's `error` and never
    attempts execution.

    Attributes:
        source: optional original source text that failed to translate
    """

    def __init__(self, message: str, *, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
