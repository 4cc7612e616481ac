"""Selects the analysis backend named by the configuration."""
from xray_assist.analysis.claude import ClaudeAnalysisClient
from xray_assist.analysis.client import AnalysisClient
from xray_assist.analysis.gemini import GeminiAnalysisClient
from xray_assist.analysis.openai import OpenAIAnalysisClient
from xray_assist.config import Config
from xray_assist.constants import (
    MSG_ERR_BAD_PROVIDER,
    PROVIDER_CLAUDE,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
)


def build_analysis_client(config: Config) -> AnalysisClient:
    match config.provider:
        case p if p == PROVIDER_GEMINI:
            cls = GeminiAnalysisClient
        case p if p == PROVIDER_CLAUDE:
            cls = ClaudeAnalysisClient
        case p if p == PROVIDER_OPENAI:
            cls = OpenAIAnalysisClient
        case other:
            raise ValueError(MSG_ERR_BAD_PROVIDER % other)
    return cls(config.api_key, config.model, timeout=config.timeout)
