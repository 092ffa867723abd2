import pytest

from tourbot.bt_nodes import (
    AlwaysRunning,
    FlipFlopCondition,
    NodeStatus,
    SkillAction,
    SkillCondition,
    SkillStatus,
    provided_ports,
)


def _halt_ok(service):
    return True


def test_provided_ports():
    assert provided_ports() == ("interface", "isMonitored")


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, NodeStatus.SUCCESS),
        (1, NodeStatus.FAILURE),
        (2, NodeStatus.RUNNING),
    ],
)
def test_skill_status_codes_match_skills(code, expected):
    action = SkillAction("Go", {"isMonitored": "false"}, lambda s: code, _halt_ok)
    assert action.tick() is expected


def test_action_service_names_monitored():
    action = SkillAction("Alarm", {"isMonitored": "true"}, lambda s: 0, _halt_ok)
    assert action.tick_service == "AlarmSkill/tick_mon"
    assert action.halt_service == "AlarmSkill/halt_mon"


def test_action_service_names_unmonitored():
    action = SkillAction("Alarm", {"isMonitored": "false"}, lambda s: 0, _halt_ok)
    assert action.tick_service == "AlarmSkill/tick"
    assert action.halt_service == "AlarmSkill/halt"


def test_action_missing_monitor_port():
    with pytest.raises(ValueError):
        SkillAction("Alarm", {}, lambda s: 0, _halt_ok)


@pytest.mark.parametrize(
    "code, expected",
    [
        (SkillStatus.RUNNING.value, NodeStatus.RUNNING),
        (SkillStatus.SUCCESS.value, NodeStatus.SUCCESS),
        (SkillStatus.FAILURE.value, NodeStatus.FAILURE),
        (None, NodeStatus.FAILURE),
        (42, NodeStatus.FAILURE),
    ],
)
def test_action_tick_translation(code, expected):
    action = SkillAction("Go", {"isMonitored": "false"}, lambda s: code, _halt_ok)
    assert action.tick() is expected


def test_action_tick_calls_tick_service():
    calls = []

    def send(service):
        calls.append(service)
        return SkillStatus.SUCCESS.value

    action = SkillAction("Go", {"isMonitored": "true"}, send, _halt_ok)
    assert action.tick() is NodeStatus.SUCCESS
    assert calls == ["GoSkill/tick_mon"]


def test_action_send_tick_failure_when_no_answer():
    action = SkillAction("Go", {"isMonitored": "false"}, lambda s: None, _halt_ok)
    assert action.send_tick_to_skill() == SkillStatus.FAILURE.value


def test_action_halt_retries_until_acknowledged():
    answers = iter([False, False, True])
    calls = []

    def send_halt(service):
        calls.append(service)
        return next(answers)

    action = SkillAction("Go", {"isMonitored": "false"}, lambda s: 0, send_halt)
    assert action.halt() == 3
    assert calls == ["GoSkill/halt"] * 3


@pytest.mark.parametrize(
    "code, expected",
    [
        (SkillStatus.SUCCESS.value, NodeStatus.SUCCESS),
        (SkillStatus.FAILURE.value, NodeStatus.FAILURE),
        (SkillStatus.RUNNING.value, NodeStatus.FAILURE),
        (None, NodeStatus.FAILURE),
    ],
)
def test_condition_tick_translation(code, expected):
    condition = SkillCondition("BatteryLevel", {"isMonitored": "false"}, lambda s: code)
    assert condition.tick() is expected


def test_condition_service_name():
    condition = SkillCondition("BatteryLevel", {"isMonitored": "true"}, lambda s: 0)
    assert condition.tick_service == "BatteryLevelSkill/tick_mon"


def test_condition_missing_monitor_port():
    with pytest.raises(ValueError):
        SkillCondition("BatteryLevel", {"interface": "x"}, lambda s: 0)


def test_flip_flop_cycle():
    node = FlipFlopCondition("ff", period=3)
    results = [node.tick() for _ in range(8)]
    first_cycle = [NodeStatus.SUCCESS] * 3 + [NodeStatus.FAILURE]
    assert results == first_cycle * 2


def test_flip_flop_default_period():
    node = FlipFlopCondition("ff")
    results = [node.tick() for _ in range(31)]
    assert results.count(NodeStatus.SUCCESS) == 30
    assert results[-1] is NodeStatus.FAILURE


def test_always_running():
    node = AlwaysRunning("run")
    assert [node.tick() for _ in range(3)] == [NodeStatus.RUNNING] * 3
    node.halt()
    node.halt()
    assert node.halt_count == 2