"""Hosted generative model clients."""

from app.infrastructure.ai.gemini_client import GeminiClient

__all__ = ["GeminiClient"]
