from __future__ import annotations

from typing import Any

import pytest

from ghpm.auth.resolvers.env import EnvTokenResolver
from ghpm.auth.resolvers.gh_cli import GhCliTokenResolver
from ghpm.auth.resolvers.static import StaticTokenResolver
from ghpm.contracts.exceptions import AuthenticationError


class _MockProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_returns_token(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        assert args == ("gh", "auth", "token", "--hostname", "github.com")
        return _MockProcess(returncode=0, stdout=b"tok_123\n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GhCliTokenResolver().resolve() == "tok_123"


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_includes_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=1, stderr=b"not logged in")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match=r"failed for github\.enterprise\.local: not logged in"):
        await GhCliTokenResolver(hostname="github.enterprise.local").resolve()


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_rejects_empty_output(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=0, stdout=b"\n")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="printed nothing"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_gh_cli_token_resolver_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise FileNotFoundError("gh")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(AuthenticationError, match="could not run the gh CLI"):
        await GhCliTokenResolver().resolve()


@pytest.mark.asyncio
async def test_env_token_resolver_prefers_gh_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "gh_tok")
    monkeypatch.setenv("GITHUB_TOKEN", "github_tok")

    assert await EnvTokenResolver().resolve() == "gh_tok"


@pytest.mark.asyncio
async def test_env_token_resolver_falls_back_to_github_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GH_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "github_tok")

    assert await EnvTokenResolver().resolve() == "github_tok"


@pytest.mark.asyncio
async def test_env_token_resolver_raises_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GH_TOKEN", raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "   ")

    with pytest.raises(AuthenticationError):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_token_resolver() -> None:
    assert await StaticTokenResolver(token=" tok ").resolve() == "tok"

    with pytest.raises(AuthenticationError, match="empty"):
        await StaticTokenResolver(token="").resolve()
