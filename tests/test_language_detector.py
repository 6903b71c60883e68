import pytest

from offline_translator.application.language_detector import MIN_DETECTION_CONFIDENCE, LanguageDetector
from offline_translator.domain.errors import UnsupportedLanguageError
from offline_translator.domain.models import DetectedLanguage

from conftest import FakeIdentifier


def test_threshold_constant():
    assert MIN_DETECTION_CONFIDENCE == 0.4


def test_confident_detection_returns_language(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("fr", 0.9)), catalog)
    language = detector.detect("Bonjour")
    assert language.code == "fr"
    assert language.name == "French"


def test_confidence_at_threshold_is_accepted(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("de", 0.4)), catalog)
    assert detector.detect("Guten Tag").code == "de"


def test_confidence_below_threshold_returns_none(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("de", 0.39)), catalog)
    assert detector.detect("Guten Tag") is None


def test_custom_threshold(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("ja", 0.6)), catalog, min_confidence=0.8)
    assert detector.detect("こんにちは") is None


def test_no_hypothesis_returns_none(catalog):
    detector = LanguageDetector(FakeIdentifier(None), catalog)
    assert detector.detect("12345") is None


def test_identifier_failure_returns_none(catalog):
    detector = LanguageDetector(FakeIdentifier(error=RuntimeError("boom")), catalog)
    assert detector.detect("text") is None


def test_langdetect_style_codes_are_mapped(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("zh-cn", 0.99)), catalog)
    assert detector.detect("你好").code == "zh"


def test_traditional_chinese_is_mapped(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("zh-tw", 0.57)), catalog)
    language = detector.detect("今天天氣很好，我們一起去公園散步吧。")
    assert language.code == "zh"
    assert language.name == "Chinese"


def test_region_code_falls_back_to_primary_subtag(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("fr-be", 0.9)), catalog)
    assert detector.detect("Bonjour").code == "fr"


def test_unsupported_region_code_raises_with_full_code(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("pt-br", 0.9)), catalog)
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        detector.detect("Bom dia")
    assert exc_info.value.name == "pt-br"


def test_unsupported_detected_language_raises(catalog):
    detector = LanguageDetector(FakeIdentifier(DetectedLanguage("nl", 0.95)), catalog)
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        detector.detect("Goedemorgen")
    assert exc_info.value.name == "nl"


def test_rejects_non_identifier(catalog):
    with pytest.raises(TypeError):
        LanguageDetector(object(), catalog)
