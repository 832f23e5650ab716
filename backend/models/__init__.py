"""Models module - Pydantic data models"""

from .analysis import (
    Alternative,
    AnalysisOption,
    AnalysisRequest,
    AnalysisStats,
    CodeAnalysisResult,
    ComplexityInfo,
    SecurityVulnerability,
    StreamEvent,
)
from .diff import (
    DiffComparison,
    DiffGroup,
    DiffLine,
    DiffLineType,
    DifferenceSummary,
    DiffStats,
    Language,
)

__all__ = [
    # Analysis models
    "Alternative",
    "AnalysisOption",
    "AnalysisRequest",
    "AnalysisStats",
    "CodeAnalysisResult",
    "ComplexityInfo",
    "SecurityVulnerability",
    "StreamEvent",
    # Diff models
    "DiffComparison",
    "DiffGroup",
    "DiffLine",
    "DiffLineType",
    "DifferenceSummary",
    "DiffStats",
    "Language",
]
