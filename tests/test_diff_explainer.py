"""Tests for services/diff_explainer.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from services.diff_explainer import (
    BRUTE_FORCE_NAME,
    FALLBACK_BRUTE_FORCE_POINTS,
    FALLBACK_OPTIMIZED_POINTS,
    OPTIMIZED_NAME,
    DiffExplainer,
    generate_diff_explanation,
)


class TestSignals:
    """Each signal on its own."""

    def test_loop_count_reduction(self) -> None:
        comparison = generate_diff_explanation("for(i=0;...) for(j=0;...)", "while(...)")

        assert comparison.brute_force_points == (
            "Uses nested loops (2 loop(s)) to iterate through data",
            "Checks every element, making it slow for large datasets",
            "Time complexity: O(n) - gets slower as data grows",
        )
        assert comparison.optimized_points == (
            "Optimized iteration (1 loop(s)) with smart algorithm",
            "Uses divide-and-conquer or efficient search algorithms",
            "Time complexity: O(log n) - stays fast even for huge datasets",
        )

    def test_loop_pattern_allows_whitespace(self) -> None:
        assert DiffExplainer.count_loops("for (;;) {} while   (x) {} foreach x") == 2

    def test_equal_loop_counts_do_not_fire(self) -> None:
        comparison = generate_diff_explanation("for (a) {}", "while (b) {}")
        assert comparison.brute_force_points == FALLBACK_BRUTE_FORCE_POINTS

    def test_new_imports(self) -> None:
        comparison = generate_diff_explanation("x = sorted(y)", "import bisect")
        assert comparison.brute_force_points == ("Manual implementation without external utilities",)
        assert comparison.optimized_points == ("Uses optimized utility classes and imports",)

    def test_imports_already_present(self) -> None:
        comparison = generate_diff_explanation("import os", "import sys")
        assert "Uses optimized utility classes and imports" not in comparison.optimized_points

    def test_array_to_binary_search(self) -> None:
        comparison = generate_diff_explanation("new Array(n)", "binarySearch(a)")
        assert comparison.brute_force_points[0] == "Linear search: starts from beginning, checks each item one by one"
        assert comparison.optimized_points[-1] == "Instant results, even for billions of items"
        assert len(comparison.brute_force_points) == 3

    @pytest.mark.parametrize("marker", [">>", "<<", "&"])
    def test_bitwise_operators(self, marker: str) -> None:
        comparison = generate_diff_explanation("x / 2", f"x {marker} 1")
        assert comparison.brute_force_points == ("Uses basic arithmetic operations", "More readable but slower")
        assert comparison.optimized_points == (
            "Uses bit manipulation and bitwise operators",
            "Works instantly at CPU level - maximum speed",
        )

    def test_null_check_introduced(self) -> None:
        comparison = generate_diff_explanation("return a.b", "if (a == null) return")
        assert comparison.brute_force_points == ("No safety checks - can crash with bad input",)

    def test_null_check_already_present(self) -> None:
        comparison = generate_diff_explanation("if (a == null) x", "if (a == null) y")
        assert comparison.brute_force_points == FALLBACK_BRUTE_FORCE_POINTS

    def test_size_shrink(self) -> None:
        comparison = generate_diff_explanation("a\nb\nc\nd\ne", "a\nb\nc")
        assert comparison.brute_force_points == (
            "Repetitive code with duplicate logic",
            "Harder to understand and maintain",
            "More prone to bugs",
        )

    def test_size_shrink_boundary(self) -> None:
        """Exactly 80% of the original line count is not a shrink."""
        comparison = generate_diff_explanation("a\nb\nc\nd\ne", "a\nb\nc\nd")
        assert comparison.brute_force_points == FALLBACK_BRUTE_FORCE_POINTS


class TestAccumulation:
    def test_signals_are_additive_and_ordered(self) -> None:
        original = "const a = new Array(10);\nfor (let i = 0; i < n; i++) {}\nx\ny\nz"
        optimized = "import x from 'y';\nbinary(a, n >> 1) == null"
        comparison = generate_diff_explanation(original, optimized)

        brute = comparison.brute_force_points
        assert len(brute) == 13
        assert len(comparison.optimized_points) == 13
        assert brute[0] == "Manual implementation without external utilities"
        assert brute[1] == "Uses nested loops (1 loop(s)) to iterate through data"
        assert brute[4] == "Linear search: starts from beginning, checks each item one by one"
        assert brute[7] == "Uses basic arithmetic operations"
        assert brute[9] == "No safety checks - can crash with bad input"
        assert brute[10] == "Repetitive code with duplicate logic"

    def test_fallback(self) -> None:
        comparison = generate_diff_explanation("x = 1", "x = 2")
        assert comparison.brute_force_points == FALLBACK_BRUTE_FORCE_POINTS
        assert comparison.optimized_points == FALLBACK_OPTIMIZED_POINTS
        assert len(comparison.brute_force_points) == 5

    @pytest.mark.parametrize(
        ("original", "optimized"),
        [("", ""), ("a", ""), ("", "b"), ("for(;;)", "for(;;)"), ("x & y", "x & y")],
    )
    def test_never_empty(self, original: str, optimized: str) -> None:
        comparison = generate_diff_explanation(original, optimized)
        assert comparison.brute_force_points
        assert comparison.optimized_points

    def test_deterministic(self) -> None:
        explainer = DiffExplainer()
        first = explainer.explain("for(a) for(b)", "import q\nq & 1")
        second = explainer.explain("for(a) for(b)", "import q\nq & 1")
        assert first == second


class TestComparisonModel:
    def test_names(self) -> None:
        comparison = generate_diff_explanation("a", "b")
        assert comparison.brute_force_name == BRUTE_FORCE_NAME == "Brute Force (Original)"
        assert comparison.optimized_name == OPTIMIZED_NAME == "Optimized Solution"

    def test_frozen(self) -> None:
        comparison = generate_diff_explanation("a", "b")
        with pytest.raises(ValidationError):
            comparison.brute_force_name = "other"

    def test_camel_case_dump(self) -> None:
        data = generate_diff_explanation("a", "b").model_dump(by_alias=True)
        assert set(data) == {"bruteForceName", "bruteForcePoints", "optimizedName", "optimizedPoints"}
