# pylint:disable=redefined-outer-name,unused-argument

from pytest import fixture, raises
import structlog
import maglevhash.analysis as ana
import maglevhash.cli as cli
import maglevhash.errors as err


def test_int_key_hash():
    assert ana.int_key_hash(b"42") == 42


def test_calculate_node_loads():
    assert ana.calculate_node_loads({0: 1, 1: 0, 2: 1, 3: 2}) == {0: 1, 1: 2, 2: 1}


def test_calculate_slot_move():
    before = {0: 1, 1: 0, 2: 1}
    after = {0: 1, 1: 1, 2: 0}

    assert ana.calculate_slot_move(before, after) == 2
    assert ana.calculate_slot_move(before, before) == 0


def test_slot_assignment_matches_table():
    experiment = ana.Experiment(node_count=3, slot_count=7)
    assignment = experiment.slot_assignment()

    assert sorted(assignment) == list(range(0, 7))

    for slot, node in assignment.items():
        assert experiment.maglev.nodes[experiment.maglev.table[slot]] == str(node)


def test_remove_node():
    experiment = ana.Experiment(node_count=3, slot_count=7)
    experiment.remove_node("1")

    assert experiment.nodes == ["0", "2"]
    assert experiment.node_count == 2
    assert set(experiment.slot_assignment().values()) == {0, 2}


def test_remove_unknown_node():
    experiment = ana.Experiment(node_count=3, slot_count=7)

    with raises(err.UnknownNode):
        experiment.remove_node("9")


def test_remove_last_node_keeps_state():
    experiment = ana.Experiment(node_count=1, slot_count=7)

    with raises(err.EmptyNodeSet):
        experiment.remove_node("0")

    assert experiment.nodes == ["0"]


def test_run():
    report = ana.run(node_count=10, slot_count=10007)

    assert len(report.loads) == 10
    assert sum(report.loads) == 10007
    assert max(report.loads) - min(report.loads) <= 1
    assert report.minimum_moved == 1000
    assert report.minimum_moved <= report.slots_moved <= 2 * report.minimum_moved


def test_run_invalid():
    with raises(err.InvalidSlotCount):
        ana.run(node_count=3, slot_count=10)


@fixture
def reset_logging():
    yield
    structlog.reset_defaults()


def test_cli(monkeypatch, capsys, reset_logging):
    monkeypatch.setattr("sys.argv", ["maglevhash", "-n", "3", "-m", "7"])
    cli._main()  # pylint: disable=protected-access
    captured = capsys.readouterr()

    assert captured.out.splitlines() == ["[3, 2, 2]", "3", "2"]
    assert "maglev.build" not in captured.err


def test_cli_invalid(monkeypatch, capsys, reset_logging):
    monkeypatch.setattr("sys.argv", ["maglevhash", "-n", "3", "-m", "10"])

    with raises(SystemExit) as exc:
        cli._main()  # pylint: disable=protected-access

    captured = capsys.readouterr()

    assert exc.value.code == 1
    assert captured.out == ""
    assert "cli.invalid" in captured.err
