import pytest

from careerguide.careers import (
    Career,
    CareerMatch,
    calculate_match,
    default_careers,
    format_recommendations,
    generate_recommendations,
    insertion_sort,
    selection_sort,
)
from careerguide.profile import Profile


def make_career(name, salary=1000, interests=("A", "B"), skills=("C", "D"), ident=1):
    return Career(ident, name, tuple(interests), tuple(skills), "desc " + name, salary, "Teknologi")


def match(name, score, salary=1000):
    return CareerMatch(make_career(name, salary), score)


def test_default_careers_ids_are_sequential():
    careers = default_careers()
    assert [career.id for career in careers] == list(range(1, len(careers) + 1))
    assert careers[0].name == "Software Engineer"
    assert careers[-1].name == "Graphic Designer"


def test_default_careers_returns_fresh_list():
    first = default_careers()
    first.clear()
    assert default_careers()[1].name == "Data Scientist"


def test_default_careers_data_scientist_salary():
    data_scientist = next(c for c in default_careers() if c.name == "Data Scientist")
    assert data_scientist.salary == 10000000
    assert data_scientist.industry_category == "Teknologi"


def test_match_none_profile_is_zero():
    assert calculate_match(None, make_career("X")) == 0.0


def test_match_career_without_criteria_is_zero():
    career = make_career("X", interests=(), skills=())
    assert calculate_match(Profile(interests=["A"], skills=["C"]), career) == 0.0


def test_full_match_is_hundred():
    profile = Profile(interests=["A", "B"], skills=["C", "D"])
    assert calculate_match(profile, make_career("X")) == pytest.approx(100.0)


def test_half_match_ignores_case():
    profile = Profile(interests=["a"], skills=["d"])
    assert calculate_match(profile, make_career("X")) == pytest.approx(50.0)


def test_items_with_padding_do_not_match():
    profile = Profile(interests=[" A"], skills=[])
    assert calculate_match(profile, make_career("X")) == 0.0


def test_duplicate_profile_entries_count_each_time():
    single = calculate_match(Profile(interests=["A"]), make_career("X"))
    double = calculate_match(Profile(interests=["A", "A"]), make_career("X"))
    assert double == pytest.approx(2 * single)


def test_generate_recommendations_keeps_only_positive_scores_in_order():
    careers = [
        make_career("first", interests=("A",), ident=1),
        make_career("second", interests=("Z",), skills=("Y",), ident=2),
        make_career("third", skills=("C",), ident=3),
    ]
    profile = Profile(interests=["A"], skills=["C"])
    result = generate_recommendations(profile, careers)
    assert [m.career.name for m in result] == ["first", "third"]
    assert all(m.score > 0 for m in result)


def test_generate_recommendations_without_profile_is_empty():
    assert generate_recommendations(None, default_careers()) == []


def test_generate_recommendations_with_default_data():
    profile = Profile(interests=["Teknologi"], skills=["Logika"])
    names = [m.career.name for m in generate_recommendations(profile, default_careers())]
    assert names == ["Software Engineer", "Front-end Engineer", "Mobile App Developer"]


@pytest.mark.parametrize("sorter", [selection_sort, insertion_sort])
@pytest.mark.parametrize("ascending", [True, False])
def test_sort_by_score_is_ordered(sorter, ascending):
    items = [match("a", 30.0), match("b", 10.0), match("c", 50.0), match("d", 20.0)]
    result = sorter(items, False, ascending)
    scores = [m.score for m in result]
    assert scores == sorted(scores, reverse=not ascending)
    assert sorted(m.career.name for m in result) == ["a", "b", "c", "d"]


@pytest.mark.parametrize("sorter", [selection_sort, insertion_sort])
@pytest.mark.parametrize("ascending", [True, False])
def test_sort_by_salary_is_ordered(sorter, ascending):
    items = [match("a", 1.0, 700), match("b", 1.0, 900), match("c", 1.0, 100)]
    result = sorter(items, True, ascending)
    salaries = [m.career.salary for m in result]
    assert salaries == sorted(salaries, reverse=not ascending)


@pytest.mark.parametrize("sorter", [selection_sort, insertion_sort])
def test_sort_does_not_modify_input(sorter):
    items = [match("a", 3.0), match("b", 1.0)]
    sorter(items, False, True)
    assert [m.career.name for m in items] == ["a", "b"]


def test_selection_sort_swaps_equal_elements():
    items = [match("a", 1.0), match("b", 1.0), match("c", 0.0)]
    result = selection_sort(items, False, True)
    assert [m.career.name for m in result] == ["c", "b", "a"]


def test_insertion_sort_is_stable():
    items = [match("a", 1.0), match("b", 1.0), match("c", 0.0)]
    assert [m.career.name for m in insertion_sort(items, False, True)] == ["c", "a", "b"]
    assert [m.career.name for m in insertion_sort(items, False, False)] == ["a", "b", "c"]


@pytest.mark.parametrize("sorter", [selection_sort, insertion_sort])
def test_sort_empty_and_single(sorter):
    assert sorter([], True, True) == []
    only = [match("a", 5.0)]
    assert sorter(only, False, False) == only


def test_format_recommendations():
    text = format_recommendations([CareerMatch(make_career("X", salary=8000000), 50.0)])
    assert text == "Karier: X\nDeskripsi: desc X\nKecocokan: 50.00%\nGaji: 8000000\n\n"


def test_format_recommendations_empty():
    assert format_recommendations([]) == ""


def test_format_recommendations_keeps_order():
    text = format_recommendations([match("first", 1.0), match("second", 2.0)])
    assert text.index("Karier: first") < text.index("Karier: second")
    assert text.count("Kecocokan:") == 2