"""Question-answering pipeline."""

from rulebook_qa.pipelines.retrieval.retrieval import RulebookQA, answer_question, describe_query

__all__ = [
    "RulebookQA",
    "answer_question",
    "describe_query",
]
