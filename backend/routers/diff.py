"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from models.diff import DiffComparison, DiffGroup, DiffLine, DifferenceSummary, DiffStats
from services.config_manager import ConfigManager
from services.diff_explainer import DiffExplainer
from services.diff_generator import DiffGenerator

router = APIRouter()
diff_generator = DiffGenerator()
diff_explainer = DiffExplainer()


class DiffRequest(BaseModel):
    """Original and optimized listings to compare"""

    original: str
    optimized: str
    language: str = "javascript"
    strip_comments: bool = True


class DiffResponse(BaseModel):
    """Aligned lines with their grouping, narrative and summaries"""

    lines: list[DiffLine]
    groups: list[DiffGroup]
    comparison: DiffComparison
    summary: DifferenceSummary
    stats: DiffStats


class StripRequest(BaseModel):
    code: str
    language: str = "javascript"


class StripResponse(BaseModel):
    code: str


def _check_size(*listings: str):
    max_chars = ConfigManager.get_instance().get("analysis", {}).get("maxCodeChars", 20000)
    if any(len(listing) > max_chars for listing in listings):
        raise HTTPException(status_code=413, detail=f"Code exceeds {max_chars} characters")


def _prepare_optimized(request: DiffRequest) -> str:
    if request.strip_comments:
        return diff_generator.remove_comments(request.optimized, request.language)
    return request.optimized


@router.post("", response_model=DiffResponse)
async def create_diff(request: DiffRequest) -> DiffResponse:
    """Align original against (comment-stripped) optimized code"""
    if not request.original.strip():
        raise HTTPException(status_code=400, detail="Original code is required")
    _check_size(request.original, request.optimized)

    optimized = _prepare_optimized(request)
    lines = diff_generator.generate_diff(request.original, optimized)

    return DiffResponse(
        lines=lines,
        groups=diff_generator.group_lines(lines),
        comparison=diff_explainer.explain(request.original, optimized),
        summary=diff_generator.analyze_differences(request.original, optimized),
        stats=diff_generator.diff_stats(lines),
    )


@router.post("/explain", response_model=DiffComparison)
async def explain_diff(request: DiffRequest) -> DiffComparison:
    """Brute force vs optimized narrative only"""
    if not request.original.strip():
        raise HTTPException(status_code=400, detail="Original code is required")
    _check_size(request.original, request.optimized)

    return diff_explainer.explain(request.original, _prepare_optimized(request))


@router.post("/strip", response_model=StripResponse)
async def strip_comments(request: StripRequest) -> StripResponse:
    """Remove comments and blank lines from a listing"""
    _check_size(request.code)
    return StripResponse(code=diff_generator.remove_comments(request.code, request.language))
