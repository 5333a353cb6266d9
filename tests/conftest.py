"""Shared pytest fixtures: isolated environment, throwaway git repositories, fake agents."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from git_diff_analyzer.summarization.repositories.base_langchain_agent import (
    BaseLangChainAgent,
)

ENV_VARS = (
    "LLM_PROVIDER",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "LLM_TEMPERATURE",
    "LLM_MAX_TOKENS",
    "LLM_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test in an empty working directory without LLM settings."""
    saved = dict(os.environ)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep git from discovering a repository above tmp_path
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    yield work_dir
    # load_dotenv writes straight into os.environ
    os.environ.clear()
    os.environ.update(saved)


def run_git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        [
            "git",
            "-c", "user.name=Test User",
            "-c", "user.email=test@example.com",
            "-c", "commit.gpgsign=false",
            "-c", "tag.gpgsign=false",
            *args,
        ],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def make_tagged_repo(repo: Path) -> Path:
    """Create a repository with tags v1 and v2 that differ in app.py and a lock file."""
    repo.mkdir(parents=True)
    run_git(repo, "init", "-q")

    (repo / "app.py").write_text("print('one')\n", encoding="utf-8")
    (repo / "package-lock.json").write_text('{"lockfileVersion": 1}\n', encoding="utf-8")
    run_git(repo, "add", ".")
    run_git(repo, "commit", "-q", "-m", "first release")
    run_git(repo, "tag", "v1")

    (repo / "app.py").write_text("print('two')\n", encoding="utf-8")
    (repo / "package-lock.json").write_text('{"lockfileVersion": 2}\n', encoding="utf-8")
    run_git(repo, "add", ".")
    run_git(repo, "commit", "-q", "-m", "second release")
    run_git(repo, "tag", "v2")
    return repo


@pytest.fixture
def tagged_repo(tmp_path: Path) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    return make_tagged_repo(tmp_path / "repo")


class FakeChatAgent(BaseLangChainAgent):
    """Agent backed by a scripted LangChain chat model."""

    def __init__(self, responses: list[str]) -> None:
        self._llm = FakeListChatModel(responses=responses)
        self.calls = 0
        super().__init__()

    def summarize_diff(self, input_data):
        self.calls += 1
        return super().summarize_diff(input_data)


@pytest.fixture
def fake_agent_factory() -> Callable[[list[str]], FakeChatAgent]:
    return FakeChatAgent


def chat_completion_payload(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
                "logprobs": None,
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16},
    }


class RecordingEndpoint:
    """Simulated chat completions endpoint for an httpx.MockTransport."""

    def __init__(self, status_code: int = 200, content: str = "## Overview\nSmall fix.") -> None:
        self.status_code = status_code
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code >= 400:
            return httpx.Response(
                self.status_code,
                json={"error": {"message": "upstream exploded", "type": "server_error"}},
            )
        return httpx.Response(200, json=chat_completion_payload(self.content))

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def endpoint_factory() -> Callable[..., RecordingEndpoint]:
    return RecordingEndpoint
