import importlib


def test_modules_importable(monkeypatch):
    monkeypatch.setenv("CODE_VIEWER_APP_IMPORT_ONLY", "1")
    for mod in [
        "app",
        "state",
        "screens.code_viewer",
        "services.text_loader",
        "services.text_saver",
        "ui.blocks",
        "utils.constants",
        "utils.eventlog",
        "utils.headless",
        "utils.runtime",
        "utils.uilog",
    ]:
        importlib.import_module(mod)
