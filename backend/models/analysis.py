"""Code analysis data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .diff import DiffComparison, DiffGroup, DiffLine, DiffStats


class AnalysisOption(str, Enum):
    """Report sections the user can ask for"""

    FIX_BUGS = "fix_bugs"
    OPTIMIZE = "optimize"
    EXPLAIN_DIFF = "explain_diff"
    SUGGESTIONS = "suggestions"
    TIME_COMPLEXITY = "time_complexity"
    SPACE_COMPLEXITY = "space_complexity"
    SECURITY = "security"
    ALTERNATIVES = "alternatives"
    ELI5 = "eli5"
    ALL = "all"

    @classmethod
    def expand(cls, options: list[AnalysisOption]) -> list[AnalysisOption]:
        """Replace ALL with every concrete option, keeping order and dropping repeats"""
        if cls.ALL in options:
            return [option for option in cls if option is not cls.ALL]
        expanded: list[AnalysisOption] = []
        for option in options:
            if option not in expanded:
                expanded.append(option)
        return expanded


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the dashboard"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisRequest(CamelModel):
    """Request to analyze a code listing"""

    code: str
    language: str = "javascript"
    options: list[AnalysisOption] = []


class SecurityVulnerability(CamelModel):
    severity: str = "low"
    issue: str = ""
    fix: str = ""


class ComplexityInfo(CamelModel):
    original: str = ""
    optimized: str = ""
    explanation: str = ""


class Alternative(CamelModel):
    approach: str = ""
    pros: str = ""
    cons: str = ""


class AnalysisStats(CamelModel):
    """Statistics reported by the model"""

    lines_added: int = 0
    lines_removed: int = 0
    complexity_score: int = 0


class CodeAnalysisResult(CamelModel):
    """Full analysis report with the diff of original vs optimized code"""

    optimized_code: str = ""
    bug_fixes: list[str] = []
    security_vulnerabilities: list[SecurityVulnerability] = []
    suggestions: list[str] = []
    time_complexity: ComplexityInfo = ComplexityInfo()
    space_complexity: ComplexityInfo = ComplexityInfo()
    alternatives: list[Alternative] = []
    eli5: str = ""
    diff_stats: AnalysisStats = AnalysisStats()

    # Computed locally, never taken from the model output
    diff: list[DiffLine] = []
    diff_groups: list[DiffGroup] = []
    line_stats: DiffStats | None = None
    comparison: DiffComparison | None = None


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "content", "result", "done", "error"
    chunk: str | None = None
    result: CodeAnalysisResult | None = None
    done: bool = False
    error: str | None = None
