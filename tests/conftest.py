"""
Shared fixtures: throwaway Expo projects, a fake remote and a fake package manager.
"""

import json
from pathlib import Path

import httpx
import pytest
from rich.console import Console

import albatroz_cli


BASE_URL = "https://components.example.com/ui"


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Uncoloured, wide console so assertions see whole lines."""
    monkeypatch.setattr(
        albatroz_cli,
        "console",
        Console(width=200, force_terminal=False, color_system=None),
    )


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def make_project(tmp_path, monkeypatch):
    """Write a package.json into tmp_path and chdir into it."""

    def _make(dependencies=None, dev_dependencies=None, manifest=None) -> Path:
        if manifest is None:
            manifest = {"name": "host-app"}
            if dependencies is not None:
                manifest["dependencies"] = dependencies
            if dev_dependencies is not None:
                manifest["devDependencies"] = dev_dependencies
        (tmp_path / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        return tmp_path

    return _make


@pytest.fixture
def write_config():
    def _write(project_path: Path, base_url: str = BASE_URL, icons: bool = True) -> Path:
        path = project_path / "albatroz.json"
        path.write_text(
            json.dumps({"baseUrl": base_url, "dependencies": {"expo": True, "lucide-react-native": icons}}),
            encoding="utf-8",
        )
        return path

    return _write


class FakeRemote:
    """Serves canned responses and records every request it sees."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def serve(self, url: str, status: int = 200, body: bytes = b""):
        self.routes[url] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(str(request.url), (404, b"Not Found"))
        return httpx.Response(status, content=body)

    def client(self, skip_tls: bool = False) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def remote(monkeypatch):
    fake = FakeRemote()
    monkeypatch.setattr(albatroz_cli, "_build_client", fake.client)
    return fake


class FakeInstaller:
    """Stands in for PATH lookups and the package manager process."""

    def __init__(self):
        self.available = {"npm", "yarn", "pnpm"}
        self.calls = []
        self.error = None

    def find_tool(self, tool):
        return f"/usr/bin/{tool}" if tool in self.available else None

    def run_command(self, cmd, cwd=None):
        self.calls.append({"cmd": list(cmd), "cwd": cwd})
        if self.error is not None:
            raise self.error
        return ""


@pytest.fixture
def installer(monkeypatch):
    fake = FakeInstaller()
    monkeypatch.setattr(albatroz_cli, "find_tool", fake.find_tool)
    monkeypatch.setattr(albatroz_cli, "run_command", fake.run_command)
    return fake
