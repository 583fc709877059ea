"""Answer composer: prompt assembly, completion call and response shaping."""

import logging
from typing import Any, Dict, Optional

from rulebook_qa.config.prompts import (
    EMPTY_COMPLETION_MESSAGE,
    get_grounded_prompt,
    not_found_message,
)
from rulebook_qa.config.retrieval import AnswerConfig
from rulebook_qa.core.dataclasses import AnswerResult, RankedContext
from rulebook_qa.core.interfaces import LLMProvider
from rulebook_qa.utils.exceptions import CompletionError
from rulebook_qa.utils.tokens import count_tokens

logger = logging.getLogger(__name__)

GROUNDED = "grounded"
NOT_FOUND = "not_found"


class AnswerComposer:
    """Builds the final answer from ranked rulebook context.

    Strict grounding: when there is no usable context the canned not-found
    message is returned and the completion service is not called.
    """

    def __init__(self, llm: LLMProvider, config: AnswerConfig = None):
        """Initialize composer.

        Args:
            llm: LLMProvider used for grounded answers
            config: AnswerConfig (defaults to AnswerConfig.from_env())
        """
        self.llm = llm
        self.config = config or AnswerConfig.from_env()

    def select_state(self, ranked: RankedContext, search_results_count: int) -> str:
        """Pick grounded or not-found for this request."""
        context_length = len(ranked.context_block.strip())
        if search_results_count > 0 and context_length > self.config.min_content_length:
            return GROUNDED
        return NOT_FOUND

    def compose(
        self,
        question: str,
        ranked: RankedContext,
        sport: Optional[str],
        search_results_count: int,
        trace: Optional[Dict[str, Any]] = None
    ) -> AnswerResult:
        """Compose the answer for a question.

        Args:
            question: User question
            ranked: Output of the relevance ranker
            sport: Detected or declared sport, if any
            search_results_count: Number of candidates retrieved
            trace: Optional diagnostics collected by earlier stages

        Returns:
            AnswerResult

        Raises:
            CompletionError: If the completion service fails
        """
        trace = dict(trace or {})
        state = self.select_state(ranked, search_results_count)
        trace["state"] = state
        trace["context_length"] = len(ranked.context_block)

        if state == NOT_FOUND:
            logger.info("No usable rulebook content, returning not-found answer")
            return AnswerResult(
                answer=not_found_message(sport),
                detected_sport=sport,
                search_results_count=search_results_count,
                grounded=False,
                trace=trace,
            )

        prompt = get_grounded_prompt(question, ranked.context_block, sport)
        if self.config.trace_prompt_tokens:
            try:
                trace["prompt_tokens"] = count_tokens(prompt, self.config.model)
            except Exception as e:
                # Diagnostics only; tiktoken may need to fetch encodings
                logger.warning(f"Could not count prompt tokens: {e}")

        logger.info(f"Sending grounded prompt to {self.config.model}")
        try:
            completion = self.llm.generate(
                prompt,
                model=self.config.model,
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            raise CompletionError(f"Completion request failed: {e}") from e

        answer = completion.strip() if isinstance(completion, str) else ""
        if not answer:
            logger.warning("Completion service returned an empty answer")
            answer = EMPTY_COMPLETION_MESSAGE
            trace["empty_completion"] = True

        return AnswerResult(
            answer=answer,
            detected_sport=sport,
            search_results_count=search_results_count,
            grounded=True,
            trace=trace,
        )
