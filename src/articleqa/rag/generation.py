import logging
import time
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_ollama import ChatOllama

from articleqa.config import Config
from articleqa.errors import ModelError
from articleqa.utils import log_timing

logger = logging.getLogger(__name__)


def get_llm(config: Config) -> BaseChatModel:
    """Create the chat model used for answer generation.

    Temperature defaults to 0 so answers stay close to the retrieved text.
    """
    return ChatOllama(model=config.ollama_model, base_url=config.ollama_base_url, temperature=config.temperature)


def complete(llm: Any, prompt: Any) -> str:
    """Invoke `llm` with `prompt` and return the reply text.

    Works with chat models (which return a message) and plain LLMs (which
    return a string). Any failure from the model client becomes ModelError.
    """
    start = time.time()
    try:
        response = llm.invoke(prompt)
    except Exception as e:
        raise ModelError(f"language model call failed: {e}") from e

    content = getattr(response, "content", response)
    if not isinstance(content, str):
        # Some chat models return a list of content blocks.
        content = "".join(part if isinstance(part, str) else part.get("text", "") for part in content)
    log_timing(logger, "generate", start, f"Model returned {len(content)} characters")
    return content
