"""Code analysis API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.analysis import AnalysisRequest, CodeAnalysisResult, StreamEvent
from services.code_analyzer import AnalysisError, CodeAnalyzer
from services.config_manager import ConfigManager

router = APIRouter()


def _validate_request(request: AnalysisRequest, config: dict):
    """Reject empty or oversized input before it reaches the model"""
    if not request.code.strip():
        raise HTTPException(status_code=400, detail="Code is required")
    max_chars = config.get("analysis", {}).get("maxCodeChars", 20000)
    if len(request.code) > max_chars:
        raise HTTPException(status_code=413, detail=f"Code exceeds {max_chars} characters")


def _event(event: StreamEvent) -> dict:
    return {"event": "message", "data": event.model_dump_json(by_alias=True, exclude_none=True)}


@router.post("", response_model=CodeAnalysisResult)
async def analyze_code(request: AnalysisRequest) -> CodeAnalysisResult:
    """Analyze code and return the report with its diff"""
    config = ConfigManager.get_instance().get_config()
    _validate_request(request, config)

    analyzer = CodeAnalyzer(config)
    try:
        return await analyzer.analyze(request)
    except AnalysisError as e:
        print(f"[Analysis] Failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/stream")
async def analyze_code_stream(request: AnalysisRequest):
    """Analyze code with a streaming response (SSE)"""
    config = ConfigManager.get_instance().get_config()
    _validate_request(request, config)

    analyzer = CodeAnalyzer(config)

    async def event_generator():
        try:
            async for item in analyzer.analyze_stream(request):
                if isinstance(item, CodeAnalysisResult):
                    yield _event(StreamEvent(type="result", result=item))
                else:
                    yield _event(StreamEvent(type="content", chunk=item))
            yield _event(StreamEvent(type="done", done=True))
        except Exception as e:
            print(f"[Analysis] Stream failed: {e}")
            yield _event(StreamEvent(type="error", error=str(e)))

    return EventSourceResponse(event_generator())
