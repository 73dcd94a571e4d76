"""Two-step retrieve-then-generate pipeline."""

import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Tuple

from langchain_core.documents import Document

from articleqa.prompts import format_prompt
from articleqa.rag.generation import complete
from articleqa.utils import log_timing, log_with_prefix, preview
from articleqa.vectorstore.memory_index import MemoryIndex

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_K", "PipelineState", "Stage", "answer_question", "generate", "retrieve"]

DEFAULT_K = 4


class Stage(str, Enum):
    RETRIEVED = "retrieved"
    ANSWERED = "answered"


@dataclass(frozen=True)
class PipelineState:
    """State for a single question as it moves through the pipeline."""

    question: str
    stage: Stage
    context: Tuple[Document, ...] = ()
    answer: str = ""


def retrieve(index: MemoryIndex, question: str, k: int = DEFAULT_K) -> PipelineState:
    """Look up the `k` chunks closest to `question`."""
    start = time.time()
    log_with_prefix(logger, logging.INFO, "retrieve", f"Question: {preview(question, 80)}")

    results = index.search_with_scores(question, k=k)
    for rank, (doc, score) in enumerate(results, 1):
        log_with_prefix(
            logger,
            logging.DEBUG,
            "retrieve",
            f"#{rank} score={score:.4f} len={len(doc.page_content)} source={doc.metadata.get('source', 'N/A')}: "
            f"{preview(doc.page_content, 150)}",
        )

    log_timing(logger, "retrieve", start, f"Retrieved {len(results)} chunks")
    return PipelineState(question=question, stage=Stage.RETRIEVED, context=tuple(doc for doc, _ in results))


def generate(llm: Any, state: PipelineState) -> PipelineState:
    """Answer the question in `state` from its retrieved context.

    Raises:
        ValueError: if `state` has not just been produced by :func:`retrieve`.
        ModelError: if the model call fails.
    """
    if state.stage is not Stage.RETRIEVED:
        raise ValueError(f"generate expects a retrieved state, got {state.stage.value!r}")

    start = time.time()
    context = "\n".join(doc.page_content for doc in state.context)
    log_with_prefix(logger, logging.INFO, "generate", f"Using {len(state.context)} chunks ({len(context)} characters of context)")

    prompt = format_prompt(state.question, context)
    log_with_prefix(logger, logging.DEBUG, "generate", f"Prompt:\n{prompt.to_string()}")

    answer = complete(llm, prompt)
    log_timing(logger, "generate", start, "Answer generated")
    return replace(state, stage=Stage.ANSWERED, answer=answer)


def answer_question(index: MemoryIndex, llm: Any, question: str, k: int = DEFAULT_K) -> PipelineState:
    """Run retrieve then generate for one question. Failures propagate; nothing is retried."""
    return generate(llm, retrieve(index, question, k=k))
