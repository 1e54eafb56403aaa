"""
Proxy module initialization.
"""
from .tts_models import SynthesisRequest, DashboardSynthesisRequest
from .upstream import SynthesisClient, HttpSynthesisClient
from .handler import TTSProxyHandler, ProxyResponse, CORS_HEADERS
from .voices import VOICES, Voice

__all__ = [
    "SynthesisRequest",
    "DashboardSynthesisRequest",
    "SynthesisClient",
    "HttpSynthesisClient",
    "TTSProxyHandler",
    "ProxyResponse",
    "CORS_HEADERS",
    "VOICES",
    "Voice",
]
