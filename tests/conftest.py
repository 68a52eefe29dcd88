from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from command_bridge.app import create_app
from command_bridge.commands.executor.command_executor import CommandExecutor
from command_bridge.commands.interfaces.command_context import CommandContext
from command_bridge.commands.registry.command_registry import CommandRegistry
from command_bridge.config.settings import BridgeSettings


@pytest.fixture
def command_registry() -> CommandRegistry:
    """Registry with unrestricted file access"""
    return CommandRegistry()


@pytest.fixture
def command_executor(command_registry: CommandRegistry) -> CommandExecutor:
    return CommandExecutor(command_registry)


@pytest.fixture
def sandbox_root(tmp_path: Path) -> Path:
    """Directory used as the file command sandbox root"""
    root = tmp_path / "sandbox"
    root.mkdir()
    return root


@pytest.fixture
def sandboxed_executor(sandbox_root: Path) -> CommandExecutor:
    return CommandExecutor(CommandRegistry(fs_root=str(sandbox_root)))


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """Existing UTF-8 file with mixed line endings"""
    path = tmp_path / "notes.txt"
    path.write_bytes("first line\nsecond line\r\nthird line with ünïcode café\n".encode("utf-8"))
    return path


@pytest.fixture
def make_context():
    """Factory for command contexts"""

    def _make(command_name: str, **arguments) -> CommandContext:
        return CommandContext(command_name=command_name, arguments=arguments)

    return _make


@pytest.fixture
def test_settings() -> BridgeSettings:
    return BridgeSettings(log_level="DEBUG")


@pytest.fixture
def client(test_settings: BridgeSettings) -> Iterator[TestClient]:
    """Test client with the lifespan (startup hook and registry) running"""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
