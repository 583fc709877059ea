import pytest

from fakes import FakeEmbeddingProvider, FakeLLM, FakeVectorStore, make_candidate
from rulebook_qa.config.prompts import not_found_message
from rulebook_qa.pipelines.retrieval.retrieval import RulebookQA, describe_query
from rulebook_qa.utils.exceptions import EmbeddingError, InvalidQuestionError, RetrievalError

GOLF_QUESTION = "What happens if a golf ball lands in the water hazard?"


def _golf_and_baseball():
    golf = make_candidate("golf-26", 0.5, "Rule 26: a ball in a water hazard may be dropped under a one-stroke penalty.", sport="Golf")
    baseball = make_candidate("baseball-2", 0.5, "The strike zone is the area over home plate.", sport="Baseball")
    return golf, baseball


def _pipeline(retrieval_config, store, llm=None, embedder=None):
    return RulebookQA(
        embedding_provider=embedder or FakeEmbeddingProvider(),
        vector_store=store,
        llm=llm or FakeLLM(),
        cfg=retrieval_config,
    )


def test_golf_water_hazard_end_to_end(retrieval_config):
    golf, baseball = _golf_and_baseball()
    store = FakeVectorStore(corpus=[baseball, golf], by_sport={"Golf": [golf]})
    llm = FakeLLM(reply="Take relief with a one-stroke penalty.")

    result = _pipeline(retrieval_config, store, llm).answer_question(GOLF_QUESTION)

    assert result.detected_sport == "golf"
    assert result.grounded is True
    assert result.answer == "Take relief with a one-stroke penalty."
    # one filtered match is below the fallback threshold
    assert [call["filters"] for call in store.calls] == [{"sport": "Golf"}, None]
    assert result.trace["used_fallback"] is True
    assert result.search_results_count == 2
    assert result.trace["ranked"][0]["chunk_id"] == "golf-26"
    prompt = llm.calls[0]["prompt"]
    assert prompt.index("[GOLF]") < prompt.index("[BASEBALL]")


def test_empty_corpus_returns_not_found(retrieval_config):
    store = FakeVectorStore()
    llm = FakeLLM()

    result = _pipeline(retrieval_config, store, llm).answer_question("What is the rule?")

    assert result.answer == not_found_message(None)
    assert result.search_results_count == 0
    assert result.detected_sport is None
    assert result.grounded is False
    assert llm.calls == []


def test_sport_hint_overrides_classification(retrieval_config):
    golf, baseball = _golf_and_baseball()
    store = FakeVectorStore(corpus=[golf, baseball], by_sport={"Baseball": [baseball, baseball]})

    result = _pipeline(retrieval_config, store).answer_question(GOLF_QUESTION, sport="Baseball")

    assert result.detected_sport == "baseball"
    assert store.calls[0]["filters"] == {"sport": "Baseball"}
    assert len(store.calls) == 1


def test_embedding_receives_stripped_question(retrieval_config):
    embedder = FakeEmbeddingProvider()
    store = FakeVectorStore()

    _pipeline(retrieval_config, store, embedder=embedder).answer_question("  What is icing?  ")

    assert embedder.queries == ["What is icing?"]


@pytest.mark.parametrize("question", ["", "   ", None])
def test_blank_question_is_rejected(retrieval_config, question):
    with pytest.raises(InvalidQuestionError):
        _pipeline(retrieval_config, FakeVectorStore()).answer_question(question)


def test_embedding_failure_propagates(retrieval_config):
    class BrokenEmbedder:
        def embed_query(self, query):
            raise ValueError("bad key")

    with pytest.raises(EmbeddingError):
        _pipeline(retrieval_config, FakeVectorStore(), embedder=BrokenEmbedder()).answer_question(GOLF_QUESTION)


def test_retrieval_failure_propagates(retrieval_config):
    store = FakeVectorStore(error=RuntimeError("503"))

    with pytest.raises(RetrievalError):
        _pipeline(retrieval_config, store).answer_question(GOLF_QUESTION)


def test_to_dict_matches_caller_shape(retrieval_config):
    golf, baseball = _golf_and_baseball()
    store = FakeVectorStore(corpus=[golf, baseball])

    payload = _pipeline(retrieval_config, store).answer_question("What is the strike zone?", sport="").to_dict()

    assert payload == {
        "answer": "Answer from the rulebook.",
        "sport": "baseball",
        "searchResultsCount": 2,
    }


def test_describe_query_reports_diagnostics():
    info = describe_query("  What is a   foul in basketball? ")

    assert info["detected_sport"] == "basketball"
    assert info["processed_text"] == "What is a foul in basketball?"
    assert info["keyword_scores"]["basketball"] >= 1
    assert info["tokens"] == ["foul", "basketball"]


def test_describe_query_reports_embedding_length():
    embedder = FakeEmbeddingProvider(dimension=1536)

    info = describe_query("When is icing called?", embedding_provider=embedder)

    assert info["detected_sport"] == "hockey"
    assert info["embedding_length"] == 1536
    assert embedder.queries == ["When is icing called?"]


def test_describe_query_without_provider_has_no_embedding_length():
    assert describe_query("What is icing?")["embedding_length"] is None
