"""Centralized prompts and canned answers for the rulebook assistant.

This module contains all user-facing text used by the answer composer:
- Grounded-answer prompt built around the ranked rulebook context
- Canned not-found message returned when no usable context was retrieved
- Fallback message substituted for an empty completion
"""

from typing import Optional

# ============================================================================
# Grounded Answer Prompt
# ============================================================================

SPORT_CONTEXT_TEMPLATE = "SPORT CONTEXT: This question appears to be about {sport}."

GROUNDED_ANSWER_PROMPT = """You are a sports rulebook assistant. Answer the question using ONLY the information provided in the rulebook content below.

{sport_context}

CRITICAL INSTRUCTIONS:
- Base your answer ENTIRELY on the rulebook content provided
- If the rulebook content directly addresses the specific question, provide that exact answer
- If the rulebook doesn't specifically address the question but contains related/analogous rules, clearly state: "The rulebook doesn't specifically address [specific scenario], but it does contain related rules that may apply:"
- Then explain the related rules and how they might apply, and separate what is directly covered from what is inferred
- Do not answer from general knowledge; if the content is insufficient, say so
- Include relevant context, examples, and specific rule citations when available
- If multiple sports are represented in the content, acknowledge them but lead with the most probable sport for the question
- When multiple rule sections are relevant, explain how they work together
- Include any important exceptions, conditions, or special cases mentioned in the content

RULEBOOK CONTENT:
{context}

QUESTION: {question}

Based on the rulebook content above, provide a comprehensive answer with full details and context:"""

# ============================================================================
# Canned Answers
# ============================================================================

NOT_FOUND_MESSAGE_TEMPLATE = (
    "I couldn't find information about this topic in the available rulebook content{sport_hint}. "
    "Please try rephrasing your question or ask about specific sports rules and regulations "
    "that might be covered in the database."
)

EMPTY_COMPLETION_MESSAGE = (
    "I couldn't find relevant information in the rulebook to answer your question."
)


def get_grounded_prompt(question: str, context: str, sport: Optional[str] = None) -> str:
    """Build the grounded-answer prompt.

    Args:
        question: User question
        context: Rendered context block from the relevance ranker
        sport: Detected or declared sport, if any

    Returns:
        Complete prompt string
    """
    sport_context = SPORT_CONTEXT_TEMPLATE.format(sport=sport.upper()) if sport else ""
    return GROUNDED_ANSWER_PROMPT.format(
        sport_context=sport_context,
        context=context,
        question=question,
    )


def not_found_message(sport: Optional[str] = None) -> str:
    """Canned answer for questions without usable rulebook context."""
    sport_hint = f" about {sport}" if sport else ""
    return NOT_FOUND_MESSAGE_TEMPLATE.format(sport_hint=sport_hint)
