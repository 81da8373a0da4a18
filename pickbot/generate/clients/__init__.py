# Model client selection.
# auto: Ollama if USE_OLLAMA, OpenAI if a key is set, otherwise Echo.

from pickbot.settings import Settings
from .echo_dev_client import EchoDevClient


def build_model_client(cfg: Settings):
    engine = (cfg.MODEL_ENGINE or "auto").lower()
    if engine == "auto":
        if cfg.USE_OLLAMA:
            engine = "ollama"
        elif cfg.OPENAI_API_KEY:
            engine = "openai"
        else:
            engine = "echo"

    if engine == "ollama":
        from .ollama_client import OllamaClient
        return OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST, timeout=cfg.MODEL_TIMEOUT_S)
    if engine == "openai":
        from .openai_client import OpenAIClient
        return OpenAIClient(model=cfg.OPENAI_MODEL, api_key=cfg.OPENAI_API_KEY, timeout=cfg.MODEL_TIMEOUT_S)
    if engine == "echo":
        return EchoDevClient()
    raise ValueError(f"Unknown MODEL_ENGINE: {cfg.MODEL_ENGINE}")


__all__ = ["build_model_client", "EchoDevClient"]
