import pyperclip

from offline_translator.infrastructure import system_utils


def test_set_and_get_clipboard(monkeypatch):
    clipboard = {}
    monkeypatch.setattr(pyperclip, "copy", lambda text: clipboard.update(text=text))
    monkeypatch.setattr(pyperclip, "paste", lambda: clipboard.get("text", ""))

    assert system_utils.set_clipboard_text("Halo")
    assert system_utils.get_clipboard_text() == "Halo"


def test_clipboard_errors_are_reported(monkeypatch):
    def broken(*args):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", broken)
    monkeypatch.setattr(pyperclip, "paste", broken)

    assert not system_utils.set_clipboard_text("Halo")
    assert system_utils.get_clipboard_text() == ""
