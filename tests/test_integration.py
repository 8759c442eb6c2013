"""轻量集成测试 - 验证注册表、解析与寻址策略协作。"""

from fray.agents import load_agent_bases
from fray.mention_policy import is_direct_address, mention_targets
from fray.parser import InterruptInfo, extract_mentions_with_session
from fray.workers import parse_job_worker_name


def test_registry_parse_and_fan_out(tmp_path):
    """从 agents/ 目录加载注册表，解析消息并生成 fan-out 目标"""
    agents_dir = tmp_path / "agents"
    for agent_id in ("alice", "bob.frontend", "dev"):
        (agents_dir / agent_id).mkdir(parents=True)
        (agents_dir / agent_id / "agent.yml").write_text(f"agent_id: {agent_id}\n", encoding="utf-8")

    bases = load_agent_bases(agents_dir)
    assert bases == {"alice", "bob", "dev"}

    body = "@dev[j1-2] !!@bob! kick off, cc @all (mail ops@example.com)"
    result = extract_mentions_with_session(body, bases)

    assert result.mentions == ["dev[j1-2]", "bob", "all"]
    assert result.interrupts == {"bob": InterruptInfo(double=True, no_spawn=True)}
    assert mention_targets(result, bases) == ["dev[j1-2]", "bob", "alice", "dev"]

    worker = parse_job_worker_name(result.mentions[0])
    assert (worker.base_agent, worker.job_suffix, worker.worker_index) == ("dev", "j1", 2)

    assert is_direct_address(body, "dev[j1-2]") is True
    assert is_direct_address(body, "alice") is False


def test_unrestricted_mode_without_registry(tmp_path):
    """无注册表时使用长度启发式"""
    bases = load_agent_bases(tmp_path / "agents")
    assert bases is None

    result = extract_mentions_with_session("@al @alice#s7 @averyveryverylongname", bases)
    assert result.mentions == ["alice"]
    assert result.fork_sessions == {"alice": "s7"}
