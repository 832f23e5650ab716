"""
LLM Service - Handles interactions with the code analysis model providers
"""

from __future__ import annotations

import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any

import aiohttp

SUPPORTED_PROVIDERS = ("gemini", "openai", "vllm")


class LLMService:
    """Service for interacting with various LLM providers"""

    def __init__(self, config: dict[str, Any]):
        self.config = config
        self.provider = config.get("provider", "gemini")

    # ========== Config Helpers ==========

    def _get_gemini_config(self) -> tuple[str, str, str]:
        """Get Gemini config: (api_key, model, base_url). Raises if api_key missing."""
        cfg = self.config.get("gemini", {})
        api_key = cfg.get("apiKey")
        if not api_key:
            raise ValueError("Gemini API key not configured")
        model = cfg.get("model", "gemini-2.5-flash")
        base_url = f"https://generativelanguage.googleapis.com/v1beta/models/{model}"
        return api_key, model, base_url

    def _get_openai_config(self) -> tuple[str, str, dict[str, str]]:
        """Get OpenAI config: (model, url, headers). Raises if api_key missing."""
        cfg = self.config.get("openai", {})
        api_key = cfg.get("apiKey")
        if not api_key:
            raise ValueError("OpenAI API key not configured")
        model = cfg.get("model", "gpt-4")
        url = "https://api.openai.com/v1/chat/completions"
        headers = {"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"}
        return model, url, headers

    def _get_vllm_config(self) -> tuple[str, str, dict[str, str]]:
        """Get vLLM config: (model, url, headers)."""
        cfg = self.config.get("vllm", {})
        endpoint = cfg.get("endpoint", "http://localhost:8000")
        model = cfg.get("model", "default")
        url = f"{endpoint}/v1/chat/completions"
        headers = {"Content-Type": "application/json"}
        if cfg.get("apiKey"):
            headers["Authorization"] = f"Bearer {cfg['apiKey']}"
        return model, url, headers

    # ========== Message/Payload Builders ==========

    def _build_prompt(self, prompt: str, context: str | None = None) -> str:
        """Build full prompt with optional context"""
        if context:
            return f"Context:\n{context}\n\nUser Request:\n{prompt}"
        return prompt

    def _build_openai_messages(self, prompt: str, context: str | None = None) -> list:
        """Build OpenAI-style messages array"""
        messages = []
        if context:
            messages.append({"role": "system", "content": f"Context:\n{context}"})
        messages.append({"role": "user", "content": prompt})
        return messages

    async def _retry_with_backoff(self, operation, max_retries: int = 3, provider: str = "API"):
        """Execute operation with exponential backoff on timeouts, rate limits and overload"""
        for attempt in range(max_retries):
            last_attempt = attempt == max_retries - 1
            try:
                return await operation()
            except asyncio.TimeoutError:
                if last_attempt:
                    raise Exception(f"{provider} request timeout after {max_retries} retries")
                wait_time = (2**attempt) * 3
                print(
                    f"[LLMService] {provider} request timeout. Retrying in {wait_time}s... "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                await asyncio.sleep(wait_time)
            except Exception as e:
                error_msg = str(e).lower()
                if "rate limit" in error_msg or "(429)" in error_msg:
                    if last_attempt:
                        raise Exception(
                            f"Rate limit exceeded after {max_retries} retries. "
                            "Please wait a minute and try again."
                        )
                    wait_time = 40 + (attempt * 20)
                    print(
                        f"[LLMService] Rate limit hit. Waiting {wait_time}s before retry... "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    await asyncio.sleep(wait_time)
                elif ("overloaded" in error_msg or "(503)" in error_msg) and not last_attempt:
                    wait_time = (2**attempt) * 5
                    print(
                        f"[LLMService] Server overloaded. Retrying in {wait_time}s... "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    await asyncio.sleep(wait_time)
                elif isinstance(e, aiohttp.ClientConnectionError) and not last_attempt:
                    wait_time = (2**attempt) * 2
                    print(
                        f"[LLMService] Network error: {e}. Retrying in {wait_time}s... "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    await asyncio.sleep(wait_time)
                else:
                    raise

    @asynccontextmanager
    async def _request(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout_seconds: int = 60,
        provider: str = "API",
    ):
        """Context manager for HTTP POST requests with automatic session cleanup"""
        timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(url, json=payload, headers=headers) as response:
                if response.status == 429:
                    raise Exception(f"{provider} API rate limit (429): {await response.text()}")
                if response.status == 503:
                    raise Exception(f"{provider} API overloaded (503): {await response.text()}")
                if response.status != 200:
                    error_text = await response.text()
                    print(f"[LLMService] {provider} API Error: {error_text}")
                    raise Exception(f"{provider} API error: {error_text}")
                yield response

    async def _request_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
        timeout_seconds: int = 60,
        provider: str = "API",
    ) -> dict[str, Any]:
        """Make request with retries and return JSON response"""

        async def _execute():
            async with self._request(url, payload, headers, timeout_seconds, provider) as response:
                return await response.json()

        return await self._retry_with_backoff(_execute, provider=provider)

    async def _stream_response(
        self, url: str, payload: dict[str, Any], headers: dict[str, str] | None, provider: str, line_parser
    ):
        """Stream response and yield parsed content"""
        async with self._request(url, payload, headers, timeout_seconds=120, provider=provider) as response:
            async for line in response.content:
                content = line_parser(line.decode("utf-8").strip())
                if content:
                    yield content

    # ========== Response Parsers ==========

    def _parse_openai_response(self, data: dict[str, Any]) -> str:
        """Parse OpenAI-compatible response format"""
        if "choices" in data and len(data["choices"]) > 0:
            choice = data["choices"][0]
            if "message" in choice and "content" in choice["message"]:
                return choice["message"]["content"]
            elif "text" in choice:
                return choice["text"]
        raise Exception("No valid response from API")

    def _extract_gemini_text(self, data: dict[str, Any]) -> str | None:
        """Extract text from Gemini response data"""
        if "candidates" in data and len(data["candidates"]) > 0:
            candidate = data["candidates"][0]
            if "content" in candidate and "parts" in candidate["content"]:
                parts = candidate["content"]["parts"]
                if len(parts) > 0 and "text" in parts[0]:
                    return parts[0]["text"]
        return None

    def _parse_gemini_response(self, data: dict[str, Any]) -> str:
        """Parse Gemini API response format"""
        text = self._extract_gemini_text(data)
        if text is not None:
            return text
        raise Exception("No valid response from Gemini API")

    def _parse_sse_line(self, line_text: str, extractor) -> str | None:
        """Parse SSE line with given extractor function"""
        if not line_text.startswith("data: "):
            return None
        data_str = line_text[6:]
        if data_str == "[DONE]":
            return None
        try:
            data = json.loads(data_str)
        except json.JSONDecodeError:
            return None
        return extractor(data)

    def _extract_openai_delta(self, data: dict[str, Any]) -> str | None:
        """Extract content delta from OpenAI stream data"""
        if "choices" in data and len(data["choices"]) > 0:
            delta = data["choices"][0].get("delta", {})
            return delta.get("content", "") or None
        return None

    def _parse_openai_stream_line(self, line_text: str) -> str | None:
        return self._parse_sse_line(line_text, self._extract_openai_delta)

    def _parse_gemini_stream_line(self, line_text: str) -> str | None:
        return self._parse_sse_line(line_text, self._extract_gemini_text)

    def _build_openai_payload(
        self,
        model: str,
        messages: list,
        max_tokens: int = 4096,
        temperature: float = 0.0,
        stream: bool = False,
    ) -> dict[str, Any]:
        """Build OpenAI-compatible request payload"""
        return {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "stream": stream,
        }

    def _build_gemini_payload(self, prompt: str, max_output_tokens: int = 32768) -> dict[str, Any]:
        """Build Gemini API request payload asking for a JSON answer"""
        cfg = self.config.get("gemini", {})
        model = cfg.get("model", "gemini-2.5-flash")

        payload = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": cfg.get("temperature", 0.0),
                "topK": 1,
                "topP": 0.95,
                "maxOutputTokens": max_output_tokens,
                "responseMimeType": "application/json",
            },
        }

        # Gemini 2.5 models have built-in "thinking"
        if "2.5" in model or "2-5" in model:
            payload["generationConfig"]["thinkingConfig"] = {"thinkingBudget": 8192}

        return payload

    # ========== Public API ==========

    async def generate_response(self, prompt: str, context: str | None = None) -> str:
        """Generate a response from the configured LLM provider"""
        if self.provider == "gemini":
            return await self._call_gemini(prompt, context)
        elif self.provider == "vllm":
            return await self._call_vllm(prompt, context)
        elif self.provider == "openai":
            return await self._call_openai(prompt, context)
        else:
            raise ValueError(f"Unsupported provider: {self.provider}")

    async def generate_response_stream(self, prompt: str, context: str | None = None):
        """Generate a streaming response from the configured LLM provider"""
        if self.provider == "gemini":
            stream = self._call_gemini_stream(prompt, context)
        elif self.provider == "vllm":
            stream = self._call_vllm_stream(prompt, context)
        elif self.provider == "openai":
            stream = self._call_openai_stream(prompt, context)
        else:
            raise ValueError(f"Unsupported provider: {self.provider}")

        async for chunk in stream:
            yield chunk

    async def _call_gemini(self, prompt: str, context: str | None = None) -> str:
        """Call Google Gemini API with retry logic"""
        api_key, model, base_url = self._get_gemini_config()
        print(f"[LLMService] Calling Gemini API with model: {model}")

        url = f"{base_url}:generateContent?key={api_key}"
        payload = self._build_gemini_payload(self._build_prompt(prompt, context))

        data = await self._request_json(url, payload, provider="Gemini")
        response_text = self._parse_gemini_response(data)
        print(f"[LLMService] Received response from {model} (length: {len(response_text)} chars)")
        return response_text

    async def _call_vllm(self, prompt: str, context: str | None = None) -> str:
        """Call vLLM endpoint with OpenAI Compatible API"""
        model, url, headers = self._get_vllm_config()
        messages = [{"role": "user", "content": self._build_prompt(prompt, context)}]
        payload = self._build_openai_payload(model, messages, stream=False)

        data = await self._request_json(url, payload, headers, provider="vLLM")
        return self._parse_openai_response(data)

    async def _call_openai(self, prompt: str, context: str | None = None) -> str:
        """Call OpenAI API"""
        model, url, headers = self._get_openai_config()
        messages = self._build_openai_messages(prompt, context)
        payload = self._build_openai_payload(model, messages, stream=False)

        data = await self._request_json(url, payload, headers, provider="OpenAI")
        return self._parse_openai_response(data)

    async def _call_gemini_stream(self, prompt: str, context: str | None = None):
        api_key, _, base_url = self._get_gemini_config()
        url = f"{base_url}:streamGenerateContent?key={api_key}&alt=sse"
        payload = self._build_gemini_payload(self._build_prompt(prompt, context))

        async for content in self._stream_response(url, payload, None, "Gemini", self._parse_gemini_stream_line):
            yield content

    async def _call_vllm_stream(self, prompt: str, context: str | None = None):
        model, url, headers = self._get_vllm_config()
        messages = [{"role": "user", "content": self._build_prompt(prompt, context)}]
        payload = self._build_openai_payload(model, messages, stream=True)

        async for content in self._stream_response(url, payload, headers, "vLLM", self._parse_openai_stream_line):
            yield content

    async def _call_openai_stream(self, prompt: str, context: str | None = None):
        model, url, headers = self._get_openai_config()
        messages = self._build_openai_messages(prompt, context)
        payload = self._build_openai_payload(model, messages, stream=True)

        async for content in self._stream_response(url, payload, headers, "OpenAI", self._parse_openai_stream_line):
            yield content

