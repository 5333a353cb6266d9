from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from conftest import make_tagged_repo

from git_diff_analyzer import cli
from git_diff_analyzer.summarization.repositories.implementations import (
    LangChainOpenAIAgent,
)


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


@pytest.fixture
def api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")


@pytest.fixture
def fake_agent(monkeypatch: pytest.MonkeyPatch, fake_agent_factory):
    agent = fake_agent_factory(["## Overview\nGreeting changed."])
    monkeypatch.setattr(cli, "create_llm_agent", lambda config: agent)
    return agent


def test_writes_diff_and_summary(
    tagged_repo: Path, isolated_env: Path, api_key, fake_agent, capsys
) -> None:
    code = _run(["-p", "proj", "-f", "v1", "-t", "v2", "--path", str(tagged_repo)])

    assert code == 0
    diff_text = (isolated_env / "proj_v1__v2.txt").read_text(encoding="utf-8")
    assert "+print('two')" in diff_text
    summary = (isolated_env / "proj_v1__v2_summary.txt").read_text(encoding="utf-8")
    assert summary == "## Overview\nGreeting changed."
    assert fake_agent.calls == 1
    assert "Analysis complete" in capsys.readouterr().out


@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_default_repository_path(isolated_env: Path, api_key, fake_agent) -> None:
    make_tagged_repo(isolated_env / "repositories" / "proj")

    code = _run(["--project", "proj", "--from-tag", "v1", "--to-tag", "v2"])

    assert code == 0
    assert (isolated_env / "proj_v1__v2_summary.txt").exists()


def test_equal_tags_short_circuit(
    tagged_repo: Path, isolated_env: Path, api_key, fake_agent, capsys
) -> None:
    code = _run(["-p", "proj", "-f", "v2", "-t", "v2", "--path", str(tagged_repo)])

    assert code == 0
    assert fake_agent.calls == 0
    assert list(isolated_env.iterdir()) == []
    assert "No changes between v2 and v2" in capsys.readouterr().out


def test_unknown_tag_exits_non_zero(
    tagged_repo: Path, isolated_env: Path, api_key, fake_agent, capsys
) -> None:
    code = _run(["-p", "proj", "-f", "v1", "-t", "v404", "--path", str(tagged_repo)])

    assert code == 1
    assert fake_agent.calls == 0
    assert "✗" in capsys.readouterr().err
    assert list(isolated_env.iterdir()) == []


def test_missing_api_key_stops_before_git(
    isolated_env: Path, monkeypatch: pytest.MonkeyPatch, capsys
) -> None:
    def fail_if_called(*args, **kwargs):
        raise AssertionError("git must not run without a credential")

    monkeypatch.setattr(cli.GitDiffSource, "get_tag_diff", fail_if_called)

    code = _run(["-p", "proj", "-f", "v1", "-t", "v2"])

    assert code == 1
    assert "OPENAI_API_KEY" in capsys.readouterr().err


def test_http_500_keeps_diff_and_reports_status(
    tagged_repo: Path,
    isolated_env: Path,
    api_key,
    endpoint_factory,
    monkeypatch: pytest.MonkeyPatch,
    capsys,
) -> None:
    endpoint = endpoint_factory(status_code=500)
    monkeypatch.setattr(
        cli,
        "create_llm_agent",
        lambda config: LangChainOpenAIAgent(config.llm, http_client=endpoint.client()),
    )

    code = _run(["-p", "proj", "-f", "v1", "-t", "v2", "--path", str(tagged_repo)])

    assert code == 1
    assert "500" in capsys.readouterr().err
    assert (isolated_env / "proj_v1__v2.txt").exists()
    assert not (isolated_env / "proj_v1__v2_summary.txt").exists()
    assert len(endpoint.requests) == 1


def test_output_dir_option(tagged_repo: Path, tmp_path: Path, api_key, fake_agent) -> None:
    out_dir = tmp_path / "reports"
    out_dir.mkdir()

    code = _run(
        ["-p", "proj", "-f", "v1", "-t", "v2", "--path", str(tagged_repo), "-o", str(out_dir)]
    )

    assert code == 0
    assert (out_dir / "proj_v1__v2.txt").exists()
    assert (out_dir / "proj_v1__v2_summary.txt").exists()


def test_required_arguments() -> None:
    assert _run(["-p", "proj", "-f", "v1"]) == 2
