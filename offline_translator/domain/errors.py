# offline_translator/domain/errors.py
from typing import Optional


class TranslateError(Exception):
    """
    Base class for every failure a translation request can end in.
    The message of each subclass is meant to be shown to the user as-is.
    """

    message = "Translation failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    def __str__(self):
        return self.args[0]


class EmptyInputError(TranslateError):
    message = "Input text is empty."


class UnsupportedLanguageError(TranslateError):
    """The given language name or alias is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsupported Language: {name}")


class SameSourceAndTargetError(TranslateError):
    message = "Source and target languages are the same."


class LowConfidenceDetectionError(TranslateError):
    message = "Unable to confidently detect the source language."


class MissingLanguageModelError(TranslateError):
    """
    Raised for any failure of the translation engine itself.

    Argos does not tell us why a translation failed, and by far the most common
    cause is that the package for the pair has not been installed, so that is
    what the message says.
    """

    def __init__(self, source: str, target: str,
                 source_name: Optional[str] = None, target_name: Optional[str] = None):
        self.source = source
        self.target = target
        super().__init__(
            f"This {source_name or source} → {target_name or target} translation is not installed yet.\n\n"
            f"Install it with `offline-translator-models {source} {target}`."
        )


class EmptyResultError(TranslateError):
    message = "Empty translation result."


class PlatformUnavailableError(TranslateError):
    message = ("Offline translation engine is not available. "
               "Install argostranslate and at least one language package.")
