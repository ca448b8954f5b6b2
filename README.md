# careerguide

An interactive, menu-driven console career guide. You build a small profile
holding your interests and skills, browse a catalogue of twelve built-in
careers, search it by name or industry category, and get career
recommendations ranked by how well they match your profile or by salary.

The prompts and messages are in Indonesian.

## Installation

```
pip install .
```

## Running

```
careerguide
```

The main menu offers:

1. Create a profile (name, comma-separated interests and skills)
2. View the profile
3. Edit the profile (blank answers keep the current values)
4. Delete the profile
5. Add interests and skills
6. Change interests and skills
7. Delete interests and skills
8. List all careers with industry, salary, description, interests and skills
9. Search careers with sequential search, by name or by industry category
10. Search careers with binary search, by name or by industry category
11. Show career recommendations, ordered with selection sort or insertion sort
    by match percentage or by salary, ascending or descending

Choose `0` to quit. After each action the program waits for Enter and shows
the menu again. An unrecognised menu number, or choosing `0` in a search
sub-menu, ends the session.

A match percentage is the number of profile interests and skills that equal
one of the career's interests or skills (ignoring case), divided by the
career's total number of interests and skills. Only careers with a non-zero
match are recommended.

## Using it as a library

```python
from careerguide.careers import default_careers, generate_recommendations, selection_sort
from careerguide.helpers import format_salary
from careerguide.profile import Profile

profile = Profile(name="Ani", interests=["Teknologi"], skills=["Kreatif"])
matches = generate_recommendations(profile, default_careers())
ranked = selection_sort(matches, by_salary=False, ascending=False)
for match in ranked:
    print(match.career.name, f"{match.score:.2f}%", format_salary(match.career.salary))
```

- `careerguide.careers` holds the `Career` and `CareerMatch` records,
  `default_careers()`, `calculate_match()`, `generate_recommendations()`,
  `selection_sort()` and `insertion_sort()` (both return a new list) and
  `format_recommendations()`.
- `careerguide.profile` holds `Profile` with `has_details()`, `add_details()`
  and `replace_details()`, and `split_items()` for comma-separated input.
- `careerguide.search.CareerCatalog` wraps a list of careers and provides
  `sequential_search_by_name()`, `sequential_search_by_industry()`,
  `binary_search_by_name()`, `binary_search_by_name_all()`,
  `binary_search_by_industry()`, `binary_search_by_industry_all()`,
  `sort_by_name()`, `sort_by_industry()` and `industries()`. The binary
  searches sort the catalog in place first.
- `careerguide.helpers.format_salary()` renders an amount such as
  `8000000` as `Rp 8.000.000`.
- `careerguide.cli.App` runs the menu over any text input and output streams;
  `careerguide.cli.main()` runs it on standard input and output.

## What it does not do

The profile lives only in memory for the length of one session; nothing is
saved to disk. The career catalogue is fixed in code and cannot be edited
from the menu.

## Running the tests

```
pip install ".[test]"
pytest
```