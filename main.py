# main.py
import logging
import sys

from PySide6.QtCore import QLocale, QTranslator
from PySide6.QtWidgets import QApplication

from offline_translator.application.language_detector import LanguageDetector
from offline_translator.application.translator_service import TranslationOrchestrator
from offline_translator.config import Settings, get_settings
from offline_translator.domain.language_catalog import LanguageCatalog
from offline_translator.infrastructure.argos_translator import ArgosTranslator
from offline_translator.infrastructure.history_store import SQLAlchemyHistoryStore
from offline_translator.infrastructure.langdetect_identifier import LangdetectIdentifier
from offline_translator.logging_config import setup_logging
from offline_translator.ui.main_window import MainWindow

logger = logging.getLogger("main")


def install_translations(app: QApplication, settings: Settings):
    """
    Loads i18n/OfflineTranslator_<lang>.qm for the system language, falling
    back to English. Without any .qm file the UI stays in English.
    """
    translator = QTranslator(app)
    lang_code = QLocale.system().name().split("_")[0]  # "es_ES" -> "es"

    for code in dict.fromkeys((lang_code, "en")):
        qm_file = settings.i18n_dir / f"OfflineTranslator_{code}.qm"
        if qm_file.exists() and translator.load(str(qm_file)):
            app.installTranslator(translator)
            logger.info("main.py: Translation file %s loaded.", qm_file)
            return
    logger.info("main.py: No .qm files found in '%s'; UI will not be translated.", settings.i18n_dir)


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    # --- Composition of the layers (dependency injection) ---

    # 1. The QApplication comes first
    app = QApplication(sys.argv)
    app.setApplicationName(settings.app_name)
    app.setApplicationVersion(settings.app_version)
    install_translations(app, settings)

    # 2. Infrastructure implementations
    engine = ArgosTranslator()
    identifier = LangdetectIdentifier()
    history_store = SQLAlchemyHistoryStore(settings.history_database_url)

    # 3. Application services
    catalog = LanguageCatalog()
    detector = LanguageDetector(identifier, catalog, min_confidence=settings.detection_min_confidence)
    orchestrator = TranslationOrchestrator(
        engine=engine,
        catalog=catalog,
        detector=detector,
        history_store=history_store,
        history_enabled=settings.history_enabled,
    )
    if not orchestrator.platform_available:
        logger.warning("main.py: No Argos language packages installed. Run install_models.py.")

    # 4. Main window
    main_window = MainWindow(orchestrator=orchestrator, settings=settings, history_store=history_store)
    main_window.show()

    # 5. Event loop
    exit_code = app.exec()
    history_store.close()
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
