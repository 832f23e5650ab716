"""
Diff Generator Service - Line-level diffs between original and optimized code
"""

from __future__ import annotations

import re

from models.diff import (
    DiffGroup,
    DiffLine,
    DiffLineType,
    DifferenceSummary,
    DiffStats,
    Language,
)

C_FAMILY_LANGUAGES = frozenset(
    {
        Language.JAVASCRIPT.value,
        Language.TYPESCRIPT.value,
        Language.JAVA.value,
        Language.CPP.value,
        Language.GO.value,
        Language.RUST.value,
    }
)

# An unterminated block comment runs to end of input
_BLOCK_COMMENT = re.compile(r"/\*[\s\S]*?(?:\*/|\Z)")
_LINE_COMMENT = re.compile(r"//.*$", re.MULTILINE)
_HASH_COMMENT = re.compile(r"#.*$", re.MULTILINE)
_DOCSTRINGS = (
    re.compile(r'^[ \t]*"""[\s\S]*?"""[ \t]*$', re.MULTILINE),
    re.compile(r"^[ \t]*'''[\s\S]*?'''[ \t]*$", re.MULTILINE),
)


def split_lines(code: str) -> list[str]:
    """Split a listing on newlines; an empty listing has no lines"""
    return code.split("\n") if code else []


class DiffGenerator:
    """Align original and optimized listings line by line"""

    def remove_comments(self, code: str, language: str) -> str:
        """
        Strip comments for the given language, then drop blank lines.

        Block comments go before line comments, so removing a block can expose
        a new `/*` (e.g. `a//* c */*b */` gives `a/*b */`). A second pass
        strips that too; such inputs are not idempotent.
        """
        language = getattr(language, "value", language)
        result = code

        if language in C_FAMILY_LANGUAGES:
            result = _BLOCK_COMMENT.sub("", result)
            result = _LINE_COMMENT.sub("", result)
        elif language == Language.PYTHON.value:
            result = _HASH_COMMENT.sub("", result)
            for pattern in _DOCSTRINGS:
                result = pattern.sub("", result)

        return "\n".join(line for line in result.split("\n") if line.strip())

    def generate_diff(self, original_code: str, optimized_code: str) -> list[DiffLine]:
        """
        Tag every line as added, removed or unchanged.

        Matching lines are emitted as unchanged. On a mismatch, original lines
        that never occur in the rest of the optimized listing are collected as
        removed, then optimized lines that never occur in the rest of the
        original listing are collected as added. This is a local heuristic,
        not a minimal edit script.
        """
        original_lines = split_lines(original_code)
        optimized_lines = split_lines(optimized_code)
        n_orig, n_opt = len(original_lines), len(optimized_lines)

        result: list[DiffLine] = []
        i = j = 0

        while i < n_orig or j < n_opt:
            if i < n_orig and j < n_opt:
                if original_lines[i] == optimized_lines[j]:
                    result.append(DiffLine(type=DiffLineType.UNCHANGED, content=original_lines[i]))
                    i += 1
                    j += 1
                    continue

                removed = []
                while (
                    i < n_orig
                    and original_lines[i] != optimized_lines[j]
                    and original_lines[i] not in optimized_lines[j:]
                ):
                    removed.append(original_lines[i])
                    i += 1

                added = []
                while (
                    j < n_opt
                    and (i >= n_orig or optimized_lines[j] != original_lines[i])
                    and optimized_lines[j] not in original_lines[i:]
                ):
                    added.append(optimized_lines[j])
                    j += 1

                if not removed and not added:
                    # Crossed lines: each side's head recurs later in the other.
                    removed.append(original_lines[i])
                    i += 1

                result.extend(DiffLine(type=DiffLineType.REMOVED, content=line) for line in removed)
                result.extend(DiffLine(type=DiffLineType.ADDED, content=line) for line in added)
            elif i < n_orig:
                result.append(DiffLine(type=DiffLineType.REMOVED, content=original_lines[i]))
                i += 1
            else:
                result.append(DiffLine(type=DiffLineType.ADDED, content=optimized_lines[j]))
                j += 1

        return result

    def group_lines(self, lines: list[DiffLine]) -> list[DiffGroup]:
        """Group consecutive lines of the same type"""
        groups: list[DiffGroup] = []
        for line in lines:
            if groups and groups[-1].type == line.type:
                groups[-1].lines.append(line)
            else:
                groups.append(DiffGroup(type=line.type, lines=[line]))
        return groups

    def diff_stats(self, lines: list[DiffLine]) -> DiffStats:
        """Count lines per type"""
        counts = {kind: 0 for kind in DiffLineType}
        for line in lines:
            counts[line.type] += 1
        return DiffStats(
            lines_added=counts[DiffLineType.ADDED],
            lines_removed=counts[DiffLineType.REMOVED],
            lines_unchanged=counts[DiffLineType.UNCHANGED],
        )

    def analyze_differences(self, original_code: str, optimized_code: str) -> DifferenceSummary:
        """Summarize added, removed and modified lines ignoring indentation"""
        original_lines = [line for line in original_code.split("\n") if line.strip()]
        optimized_lines = [line for line in optimized_code.split("\n") if line.strip()]

        original_trimmed = {line.strip() for line in original_lines}
        optimized_trimmed = {line.strip() for line in optimized_lines}

        summary = DifferenceSummary()

        for orig_line in original_lines:
            if orig_line.strip() in optimized_trimmed:
                continue
            prefix = orig_line.lower()[:10]
            similar = next((opt for opt in optimized_lines if prefix in opt.lower()), None)
            if similar is not None:
                summary.modified.append(f"{orig_line.strip()} → {similar.strip()}")
            else:
                summary.removed.append(orig_line.strip())

        for opt_line in optimized_lines:
            if opt_line.strip() not in original_trimmed:
                summary.added.append(opt_line.strip())

        return summary


# ═══════════════════════════════════════════════════════════════════════════
# Module-level helper functions
# ═══════════════════════════════════════════════════════════════════════════

_default_generator = DiffGenerator()


def remove_comments(code: str, language: str) -> str:
    """Convenience wrapper around DiffGenerator.remove_comments."""
    return _default_generator.remove_comments(code, language)


def generate_diff(original_code: str, optimized_code: str) -> list[DiffLine]:
    """Convenience wrapper around DiffGenerator.generate_diff."""
    return _default_generator.generate_diff(original_code, optimized_code)


def group_diff_lines(lines: list[DiffLine]) -> list[DiffGroup]:
    """Convenience wrapper around DiffGenerator.group_lines."""
    return _default_generator.group_lines(lines)


def analyze_differences(original_code: str, optimized_code: str) -> DifferenceSummary:
    """Convenience wrapper around DiffGenerator.analyze_differences."""
    return _default_generator.analyze_differences(original_code, optimized_code)
