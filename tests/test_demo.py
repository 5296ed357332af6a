import pytest

from dsakit.demo import list_demo, main, priority_queue_demo, queue_demo


def test_list_demo_front_and_back():
    lines = list_demo()
    assert lines[0] == "0"
    assert lines[2] == "9"


def test_list_demo_sections():
    lines = list_demo()
    body = "\n".join(lines[5:]).split("\n\n")
    sections = [[int(x) for x in part.split("\n")] for part in body]
    assert len(sections) == 3
    trimmed, reversed_section, sorted_section = sections
    assert trimmed == list(range(1, 9))
    assert reversed_section == trimmed[::-1]
    assert sorted_section == trimmed


def test_queue_demo_fifo_order():
    lines = queue_demo()
    assert lines[:2] == ["10", "50"]
    drained = [int(x) for x in lines[4:]]
    assert drained == sorted(drained)
    assert str(drained[0]) == lines[0]


def test_priority_queue_demo_descending():
    values = [int(x) for x in priority_queue_demo()]
    assert values == sorted([10, 20, 50, 30, 40], reverse=True)


def test_main_single_demo(capsys):
    assert main(["priority"]) == 0
    out = capsys.readouterr().out.split()
    assert out == priority_queue_demo()


def test_main_all(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "50" in out and "0" in out


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["stackz"])