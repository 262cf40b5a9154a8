import pytest

from primefact.app import main


def test_main_default_numbers(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Finished"
    assert sorted(lines[:-1]) == sorted(
        ["100 = 2 * 2 * 5 * 5", "-17 = -1 * 17", "25 = 5 * 5"]
    )


def test_main_given_numbers(capsys):
    assert main(["12", "-20", "19"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Finished"
    assert sorted(lines[:-1]) == sorted(
        ["12 = 2 * 2 * 3", "-20 = -1 * 2 * 2 * 5", "19 = 19"]
    )


def test_main_one_line_per_number(capsys):
    numbers = [str(n) for n in range(2, 30)]
    assert main(numbers) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(numbers) + 1
    assert sorted(line.split(" = ")[0] for line in lines[:-1]) == sorted(numbers)


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit) as info:
        main(["abc"])
    assert info.value.code == 2