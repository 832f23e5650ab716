"""
Code Analyzer Service - Ask the model for a report and attach the local diff
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import ValidationError

from models.analysis import AnalysisOption, AnalysisRequest, CodeAnalysisResult
from .diff_explainer import DiffExplainer
from .diff_generator import DiffGenerator
from .llm_service import LLMService

OPTION_INSTRUCTIONS = {
    AnalysisOption.FIX_BUGS: "List every bug in `bugFixes`, one sentence each, and fix them in `optimizedCode`.",
    AnalysisOption.OPTIMIZE: "Rewrite the code for performance in `optimizedCode`.",
    AnalysisOption.EXPLAIN_DIFF: "Keep `optimizedCode` close enough to the input that a line diff is readable.",
    AnalysisOption.SUGGESTIONS: "Give short improvement ideas in `suggestions`.",
    AnalysisOption.TIME_COMPLEXITY: "Fill `timeComplexity` with big-O of the original and optimized code.",
    AnalysisOption.SPACE_COMPLEXITY: "Fill `spaceComplexity` with big-O of the original and optimized code.",
    AnalysisOption.SECURITY: "List vulnerabilities in `securityVulnerabilities` with severity, issue and fix.",
    AnalysisOption.ALTERNATIVES: "Describe other approaches in `alternatives` with pros and cons.",
    AnalysisOption.ELI5: "Explain the code to a five year old in `eli5`.",
}

RESPONSE_SCHEMA = """{
    "optimizedCode": "string",
    "bugFixes": ["string"],
    "securityVulnerabilities": [{"severity": "low|medium|high|critical", "issue": "string", "fix": "string"}],
    "suggestions": ["string"],
    "timeComplexity": {"original": "string", "optimized": "string", "explanation": "string"},
    "spaceComplexity": {"original": "string", "optimized": "string", "explanation": "string"},
    "alternatives": [{"approach": "string", "pros": "string", "cons": "string"}],
    "eli5": "string",
    "diffStats": {"linesAdded": 0, "linesRemoved": 0, "complexityScore": 0}
}"""


class AnalysisError(Exception):
    """Model output could not be turned into an analysis report"""


def build_analysis_prompt(code: str, language: str, options: list[AnalysisOption]) -> str:
    """Build prompt for a JSON analysis report"""
    options = AnalysisOption.expand(options) or [AnalysisOption.OPTIMIZE]
    instructions = "\n".join(f"- {OPTION_INSTRUCTIONS[option]}" for option in options)

    return f"""You are an expert {language} reviewer. Analyze the code below.

CODE ({language}):
```{language}
{code}
```

Tasks:
{instructions}

Always return the complete optimized program in `optimizedCode`.
Respond with a single JSON object matching this structure:
{RESPONSE_SCHEMA}

Return ONLY the JSON, no additional text."""


def parse_json_from_response(response: str) -> dict[str, Any]:
    """Parse JSON from LLM response, handling code blocks"""
    json_match = re.search(r"```(?:json)?\s*([\s\S]*?)```", response)
    json_str = json_match.group(1).strip() if json_match else response.strip()

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        brace_start = json_str.find("{")
        brace_end = json_str.rfind("}") + 1
        if brace_start < 0 or brace_end <= brace_start:
            raise AnalysisError(f"Failed to parse JSON: {e}") from e
        try:
            data = json.loads(json_str[brace_start:brace_end])
        except json.JSONDecodeError as inner:
            raise AnalysisError(f"Failed to parse JSON: {inner}") from inner

    if not isinstance(data, dict):
        raise AnalysisError("Expected a JSON object in model response")
    return data


class CodeAnalyzer:
    """Run an analysis request through the model and diff the result"""

    def __init__(self, config: dict[str, Any], llm_service: LLMService | None = None):
        self.config = config
        self.llm_service = llm_service or LLMService(config)
        self.diff_generator = DiffGenerator()
        self.diff_explainer = DiffExplainer()
        self.strip_comments = config.get("analysis", {}).get("stripComments", True)

    async def analyze(self, request: AnalysisRequest) -> CodeAnalysisResult:
        """Generate a full report for the request"""
        prompt = build_analysis_prompt(request.code, request.language, request.options)
        print(f"[CodeAnalyzer] Analyzing {len(request.code)} chars of {request.language}")
        response = await self.llm_service.generate_response(prompt)
        return self.build_result(request, response)

    async def analyze_stream(self, request: AnalysisRequest):
        """Yield raw model chunks as str, then the final CodeAnalysisResult"""
        prompt = build_analysis_prompt(request.code, request.language, request.options)
        chunks = []
        async for chunk in self.llm_service.generate_response_stream(prompt):
            chunks.append(chunk)
            yield chunk
        yield self.build_result(request, "".join(chunks))

    def build_result(self, request: AnalysisRequest, response: str) -> CodeAnalysisResult:
        """Turn raw model output into a report with the local diff attached"""
        data = parse_json_from_response(response)
        try:
            result = CodeAnalysisResult.model_validate(data)
        except ValidationError as e:
            raise AnalysisError(f"Model response has unexpected shape: {e}") from e

        if not result.optimized_code.strip():
            raise AnalysisError("Model response has no optimized code")

        optimized = result.optimized_code
        if self.strip_comments:
            optimized = self.diff_generator.remove_comments(optimized, request.language)

        lines = self.diff_generator.generate_diff(request.code, optimized)
        result.diff = lines
        result.diff_groups = self.diff_generator.group_lines(lines)
        result.line_stats = self.diff_generator.diff_stats(lines)
        result.comparison = self.diff_explainer.explain(request.code, optimized)

        print(
            f"[CodeAnalyzer] Report ready: {result.line_stats.lines_added} added, "
            f"{result.line_stats.lines_removed} removed"
        )
        return result
