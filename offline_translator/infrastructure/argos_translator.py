# offline_translator/infrastructure/argos_translator.py

import asyncio
import logging
from typing import List

import argostranslate.package
import argostranslate.translate

# Domain layer interface
from offline_translator.domain.interfaces import ITranslationEngine

logger = logging.getLogger(__name__)


class ArgosTranslator(ITranslationEngine):
    """
    Implementation of ITranslationEngine on top of argostranslate.
    Translations run locally with the installed language packages.
    """

    def __init__(self):
        """
        Loads the locally installed language packages.
        The remote package index is not touched here: this engine must work offline.
        """
        logger.info("Infrastructure Layer (ArgosTranslator): Initializing...")
        try:
            # Make get_installed_languages() see packages installed since the last run
            argostranslate.package.load_available_packages()
            logger.info("Infrastructure Layer (ArgosTranslator): Local packages loaded.")
        except Exception as e:
            logger.warning("Infrastructure Layer (ArgosTranslator): Could not load local packages: %s", e)

    def installed_language_codes(self) -> List[str]:
        """
        Codes of the languages that appear in at least one installed package.
        """
        try:
            argos_languages = argostranslate.translate.get_installed_languages()
        except Exception as e:
            logger.warning("Infrastructure Layer (ArgosTranslator): Could not list installed languages: %s", e)
            return []
        return [lang.code for lang in argos_languages]

    def is_available(self) -> bool:
        codes = self.installed_language_codes()
        logger.info("Infrastructure Layer (ArgosTranslator): %d installed languages.", len(codes))
        return len(codes) > 0

    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translates with argostranslate in a worker thread so the event loop is not blocked.
        Errors from argostranslate (e.g. a missing package for the pair) propagate unchanged.
        """
        logger.debug("Infrastructure Layer (ArgosTranslator): translate() %s -> %s, text='%s...'",
                     source_code, target_code, text[:50])
        translated_text = await asyncio.to_thread(
            argostranslate.translate.translate, text, source_code, target_code
        )
        logger.debug("Infrastructure Layer (ArgosTranslator): translated text='%s...'", (translated_text or "")[:50])
        return translated_text
