import importlib.util
import logging
import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def _load_run_server():
    pytest.importorskip("uvicorn")
    spec = importlib.util.spec_from_file_location("run_server", ROOT / "tools" / "run_server.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_run_server_starts_uvicorn(monkeypatch):
    run_server = _load_run_server()
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(run_server.uvicorn, "run", fake_run)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["run_server.py", "--port", "9001"])
    run_server.main()
    assert calls["app"] == "ingredient_dedup.main:app"
    assert calls["port"] == 9001
    assert calls["host"] == "127.0.0.1"
    assert calls["reload"] is False


def test_importing_app_leaves_root_logger_alone():
    code = "import logging, ingredient_dedup.main; print(len(logging.getLogger().handlers))"
    out = subprocess.run([sys.executable, "-c", code], cwd=ROOT, capture_output=True, text=True, check=True)
    assert out.stdout.strip() == "0"
