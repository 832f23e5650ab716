"""
Diff Explainer Service - Brute force vs optimized narrative for a code pair

Surface pattern matching only. Each signal that fires appends its bullets to
both sides, in a fixed order, so the output is stable for a given input pair.
"""

from __future__ import annotations

import re

from models.diff import DiffComparison

BRUTE_FORCE_NAME = "Brute Force (Original)"
OPTIMIZED_NAME = "Optimized Solution"

_LOOP_PATTERN = re.compile(r"for\s*\(|while\s*\(")
_BITWISE_MARKERS = (">>", "<<", "&")
_NULL_CHECK = "== null"
_SHRINK_RATIO = 0.8

FALLBACK_BRUTE_FORCE_POINTS = (
    "Original approach: straightforward implementation",
    "Processes data step by step sequentially",
    "Works correctly but takes longer for complex tasks",
    "Easy to understand for beginners",
    "Becomes inefficient with large datasets",
)
FALLBACK_OPTIMIZED_POINTS = (
    "Optimized approach: refined algorithm",
    "Uses smart techniques to reduce operations",
    "Significantly faster and more memory-efficient",
    "Professional implementation patterns",
    "Scales well with any dataset size",
)


class DiffExplainer:
    """Build a DiffComparison from surface signals in two listings"""

    def explain(self, original_code: str, optimized_code: str) -> DiffComparison:
        brute: list[str] = []
        optimized: list[str] = []

        # New imports
        if "import" in optimized_code and "import" not in original_code:
            brute.append("Manual implementation without external utilities")
            optimized.append("Uses optimized utility classes and imports")

        # Loop count reduction
        original_loops = self.count_loops(original_code)
        optimized_loops = self.count_loops(optimized_code)
        if original_loops > optimized_loops:
            brute.extend(
                [
                    f"Uses nested loops ({original_loops} loop(s)) to iterate through data",
                    "Checks every element, making it slow for large datasets",
                    "Time complexity: O(n) - gets slower as data grows",
                ]
            )
            optimized.extend(
                [
                    f"Optimized iteration ({optimized_loops} loop(s)) with smart algorithm",
                    "Uses divide-and-conquer or efficient search algorithms",
                    "Time complexity: O(log n) - stays fast even for huge datasets",
                ]
            )

        # Linear scan replaced by binary search
        if "Array" in original_code and "binary" in optimized_code:
            brute.extend(
                [
                    "Linear search: starts from beginning, checks each item one by one",
                    "Example: Looking through entire phonebook for a name",
                    "Takes more steps for bigger numbers",
                ]
            )
            optimized.extend(
                [
                    "Binary search: eliminates half the data with each step",
                    "Example: Opening phonebook in middle, eliminates half with each try",
                    "Instant results, even for billions of items",
                ]
            )

        # Bit manipulation
        if any(marker in optimized_code for marker in _BITWISE_MARKERS):
            brute.extend(["Uses basic arithmetic operations", "More readable but slower"])
            optimized.extend(
                [
                    "Uses bit manipulation and bitwise operators",
                    "Works instantly at CPU level - maximum speed",
                ]
            )

        # Null safety
        if _NULL_CHECK in optimized_code and _NULL_CHECK not in original_code:
            brute.append("No safety checks - can crash with bad input")
            optimized.append("Includes null/boundary checks - handles edge cases safely")

        # Size shrink
        if len(optimized_code.split("\n")) < len(original_code.split("\n")) * _SHRINK_RATIO:
            brute.extend(
                [
                    "Repetitive code with duplicate logic",
                    "Harder to understand and maintain",
                    "More prone to bugs",
                ]
            )
            optimized.extend(
                [
                    "Clean, concise implementation",
                    "Easy to understand and modify",
                    "Professional-grade code quality",
                ]
            )

        if not brute:
            brute.extend(FALLBACK_BRUTE_FORCE_POINTS)
            optimized.extend(FALLBACK_OPTIMIZED_POINTS)

        return DiffComparison(
            brute_force_name=BRUTE_FORCE_NAME,
            brute_force_points=tuple(brute),
            optimized_name=OPTIMIZED_NAME,
            optimized_points=tuple(optimized),
        )

    @staticmethod
    def count_loops(code: str) -> int:
        """Count `for (` / `while (` openings"""
        return len(_LOOP_PATTERN.findall(code))


def generate_diff_explanation(original_code: str, optimized_code: str) -> DiffComparison:
    """Convenience function to explain a code pair with a default DiffExplainer."""
    return DiffExplainer().explain(original_code, optimized_code)
