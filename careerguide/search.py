"""Searching the career list by name or industry, sequentially or by bisection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from careerguide.careers import Career, default_careers


class CareerCatalog:
    """An ordered, searchable collection of careers.

    The binary searches sort the catalog in place before searching, so the
    order seen when iterating changes after they run.
    """

    def __init__(self, careers: Iterable[Career] | None = None) -> None:
        self._careers: list[Career] = list(
            default_careers() if careers is None else careers
        )

    def __iter__(self) -> Iterator[Career]:
        return iter(self._careers)

    def __len__(self) -> int:
        return len(self._careers)

    def industries(self) -> list[str]:
        """Distinct industry categories, in order of first appearance."""
        return list(dict.fromkeys(career.industry_category for career in self._careers))

    def sort_by_name(self) -> None:
        """Order the catalog by name (stable)."""
        self._careers.sort(key=lambda career: career.name)

    def sort_by_industry(self) -> None:
        """Order the catalog by industry category (stable)."""
        self._careers.sort(key=lambda career: career.industry_category)

    @staticmethod
    def _contains(field: str, query: str) -> bool:
        return field.casefold() == query.casefold() or query.lower() in field.lower()

    def sequential_search_by_name(self, name: str) -> list[Career]:
        """Careers whose name contains the query, ignoring case."""
        query = name.strip()
        return [career for career in self._careers if self._contains(career.name, query)]

    def sequential_search_by_industry(self, category: str) -> list[Career]:
        """Careers whose industry contains the query, ignoring case."""
        query = category.strip()
        return [
            career
            for career in self._careers
            if self._contains(career.industry_category, query)
        ]

    def _bisect(self, query: str, field: Callable[[Career], str]) -> Career | None:
        wanted = query.strip().lower()
        low, high = 0, len(self._careers) - 1
        while low <= high:
            middle = (low + high) // 2
            current = field(self._careers[middle]).lower()
            if current == wanted:
                return self._careers[middle]
            if current < wanted:
                low = middle + 1
            else:
                high = middle - 1
        return None

    def binary_search_by_name(self, name: str) -> Career | None:
        """Sort by name, then find a career whose name equals the query, ignoring case."""
        self.sort_by_name()
        return self._bisect(name, lambda career: career.name)

    def binary_search_by_name_all(self, name: str) -> list[Career]:
        """The exact name match first, if any, then every other career containing the query."""
        exact = self.binary_search_by_name(name)
        query = name.strip().lower()
        results = [exact] if exact is not None else []
        exact_name = exact.name.lower() if exact is not None else None
        results.extend(
            career
            for career in self._careers
            if career.name.lower() != exact_name and query in career.name.lower()
        )
        return results

    def binary_search_by_industry(self, category: str) -> Career | None:
        """Sort by industry, then find a career in exactly that industry, ignoring case."""
        self.sort_by_industry()
        return self._bisect(category, lambda career: career.industry_category)

    def binary_search_by_industry_all(self, category: str) -> list[Career]:
        """All careers in exactly that industry, or, failing that, those whose industry contains it."""
        exact = self.binary_search_by_industry(category)
        query = category.strip().lower()
        if exact is not None:
            return [
                career
                for career in self._careers
                if career.industry_category.lower() == query
            ]
        return [
            career
            for career in self._careers
            if query in career.industry_category.lower()
        ]