# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import OptionGenerator
from .options import FALLBACK_OPTIONS, normalize_options
from .types import (
    GenerationRequest,
    GenerationResult,
    Message,
    ModelParams,
    OPTION_COUNT,
    Personality,
)
from .clients import EchoDevClient, build_model_client

__all__ = [
    "OptionGenerator",
    "FALLBACK_OPTIONS",
    "normalize_options",
    "GenerationRequest",
    "GenerationResult",
    "Message",
    "ModelParams",
    "OPTION_COUNT",
    "Personality",
    "EchoDevClient",
    "build_model_client",
]
