"""Services module - Business logic layer"""

from .code_analyzer import AnalysisError, CodeAnalyzer
from .config_manager import ConfigManager
from .diff_explainer import DiffExplainer, generate_diff_explanation
from .diff_generator import (
    DiffGenerator,
    analyze_differences,
    generate_diff,
    group_diff_lines,
    remove_comments,
)
from .llm_service import LLMService

__all__ = [
    "AnalysisError",
    "CodeAnalyzer",
    "ConfigManager",
    "DiffExplainer",
    "DiffGenerator",
    "LLMService",
    "analyze_differences",
    "generate_diff",
    "generate_diff_explanation",
    "group_diff_lines",
    "remove_comments",
]
