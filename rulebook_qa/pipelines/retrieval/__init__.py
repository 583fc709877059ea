"""Retrieval, ranking and answer composition."""

from rulebook_qa.pipelines.retrieval.classifier import classify_sport, resolve_sport
from rulebook_qa.pipelines.retrieval.composer import AnswerComposer
from rulebook_qa.pipelines.retrieval.gateway import RetrievalGateway
from rulebook_qa.pipelines.retrieval.matching import SynonymSubstringMatcher, tokenize_question
from rulebook_qa.pipelines.retrieval.ranker import RelevanceRanker
from rulebook_qa.pipelines.retrieval.retrieval import RulebookQA, answer_question, describe_query

__all__ = [
    "RulebookQA",
    "answer_question",
    "describe_query",
    "classify_sport",
    "resolve_sport",
    "RetrievalGateway",
    "RelevanceRanker",
    "SynonymSubstringMatcher",
    "tokenize_question",
    "AnswerComposer",
]
