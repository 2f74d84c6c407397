import pytest

from consoletoys.sorting_hat import (
    QUESTIONS,
    House,
    choose_house,
    main,
    run,
    sort,
    tally,
)


def _session(lines):
    it = iter(lines)
    out = []

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    house = run(read, out.append)
    return house, "".join(out)


def test_tally_counts_one_point_per_answer_and_two_for_second_question():
    scores = tally([1, 1, 1, 1])
    assert sum(scores.values()) == 5
    assert set(scores) == set(House)


def test_tally_ignores_out_of_range_answers():
    scores = tally([0, 7, -1, 5])
    assert all(score == 0 for score in scores.values())


def test_tally_rejects_wrong_number_of_answers():
    with pytest.raises(ValueError):
        tally([1, 2, 3])


def test_sort_slytherin_answers():
    assert sort([2, 2, 1, 2]) is House.SLYTHERIN


def test_sort_ravenclaw_answers():
    assert sort([3, 1, 3, 4]) is House.RAVENCLAW


def test_sort_gryffindor_answers():
    assert sort([4, 1, 4, 3]) is House.GRYFFINDOR


def test_choose_house_tie_goes_to_earlier_house():
    scores = {House.GRYFFINDOR: 2, House.HUFFLEPUFF: 2, House.SLYTHERIN: 2}
    assert choose_house(scores) is House.GRYFFINDOR


def test_choose_house_without_points_is_none():
    assert choose_house(dict.fromkeys(House, 0)) is None
    assert sort([0, 0, 0, 0]) is None


@pytest.mark.parametrize(
    "name", ["Gryffindor", "Hufflepuff", "Ravenclaw", "Slytherin"]
)
def test_choose_house_single_scorer_has_display_name(name):
    scores = {house: (1 if house.value == name else 0) for house in House}
    chosen = choose_house(scores)
    assert chosen is not None
    assert chosen.value == name


def test_run_prints_questions_and_result():
    house, text = _session(["2", "2", "1", "2"])
    assert house is House.SLYTHERIN
    assert text.startswith("===============\nThe Sorting Hat\n===============\n\n")
    assert "Q1) When I'm dead, I want people to remember me as:\n\n  1) The Good\n" in text
    assert "Enter your answer (1-2): " in text
    assert text.count("Enter your answer (1-4): ") == 3
    assert text.endswith("\nCongrats on being sorted into... Slytherin!\n")
    assert "Invalid input" not in text


def test_run_reports_invalid_second_answer_only():
    house, text = _session(["9", "5", "9", "9"])
    assert house is None
    assert text.count("Invalid input\n") == 1
    assert text.endswith("Congrats on being sorted into... !\n")


def test_run_reads_several_answers_from_one_line():
    house, _ = _session(["3 1 3 4"])
    assert house is House.RAVENCLAW


def test_run_non_number_stops_all_later_answers():
    house, text = _session(["1", "abc", "1", "1"])
    assert house is House.HUFFLEPUFF
    assert "Invalid input\n" in text


def test_run_end_of_input_gives_no_house():
    house, text = _session([])
    assert house is None
    assert text.count("Q") >= len(QUESTIONS)


def test_main_uses_console(monkeypatch, capsys):
    answers = iter(["4", "1", "4", "3"])
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))
    assert main() == 0
    assert capsys.readouterr().out.endswith("Gryffindor!\n")