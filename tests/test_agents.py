"""测试 agent 注册表"""

from pathlib import Path

from fray.agents import agent_base_name, load_agent_bases, load_registry


def _write_agent(agents_dir: Path, dirname: str, content: str) -> None:
    (agents_dir / dirname).mkdir(parents=True)
    (agents_dir / dirname / "agent.yml").write_text(content, encoding="utf-8")


def test_agent_base_name():
    assert agent_base_name("alice") == "alice"
    assert agent_base_name("alice.1") == "alice"
    assert agent_base_name("pm.frontend[xyz9-3]") == "pm"
    assert agent_base_name("dev[abc1-0]") == "dev"


def test_load_registry(tmp_path):
    agents_dir = tmp_path / "agents"
    _write_agent(agents_dir, "alice", "agent_id: alice\n")
    _write_agent(agents_dir, "bob", "name: Bob\nenabled: false\n")
    _write_agent(agents_dir, "_template", "agent_id: template\n")
    _write_agent(agents_dir, "broken", "agent_id: [unclosed\n")
    _write_agent(agents_dir, "anonymous", "description: no id\n")
    _write_agent(agents_dir, "empty", "")
    (agents_dir / "README.md").write_text("not an agent", encoding="utf-8")

    registry = load_registry(agents_dir)
    assert list(registry) == ["alice"]

    registry_all = load_registry(agents_dir, include_disabled=True)
    assert sorted(registry_all) == ["alice", "bob"]


def test_load_agent_bases(tmp_path):
    agents_dir = tmp_path / "agents"
    _write_agent(agents_dir, "alice", "agent_id: alice\n")
    _write_agent(agents_dir, "alice-sub", "agent_id: alice.frontend\n")
    _write_agent(agents_dir, "pm", "agent_id: pm\n")

    assert load_agent_bases(agents_dir) == {"alice", "pm"}


def test_missing_registry_is_unrestricted(tmp_path):
    assert load_agent_bases(tmp_path / "missing") is None
    assert load_agent_bases(None) is None


def test_empty_registry_is_empty_set(tmp_path):
    agents_dir = tmp_path / "agents"
    agents_dir.mkdir()
    assert load_agent_bases(agents_dir) == set()
