import pytest
from pydantic import ValidationError

from fakes import make_candidate
from rulebook_qa.config.retrieval import AnswerConfig, EmbeddingConfig, PineconeConfig, RankingConfig
from rulebook_qa.pipelines.retrieval.ranker import RelevanceRanker


def test_ranking_config_reads_env(monkeypatch):
    monkeypatch.setenv("RULEBOOK_SPORT_BOOST", "0.6")
    monkeypatch.setenv("RULEBOOK_TOP_N", "3")
    monkeypatch.setenv("RULEBOOK_CONTEXTUAL_BOOSTS", "false")

    config = RankingConfig.from_env()

    assert config.sport_boost == 0.6
    assert config.top_n == 3
    assert config.contextual_boosts is False


@pytest.mark.parametrize("name,value", [
    ("RULEBOOK_SPORT_BOOST", "lots"),
    ("RULEBOOK_TOP_N", "-2"),
    ("RULEBOOK_TOP_N", "0"),
])
def test_ranking_config_rejects_invalid_env_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        RankingConfig.from_env()


@pytest.mark.parametrize("field", ["sport_boost", "length_boost", "keyword_boost", "partial_keyword_boost"])
@pytest.mark.parametrize("value", [0, -0.2])
def test_boosts_must_be_positive(field, value):
    with pytest.raises(ValidationError):
        RankingConfig(**{field: value})


def test_zero_sport_boost_from_env_is_rejected(monkeypatch):
    monkeypatch.setenv("RULEBOOK_SPORT_BOOST", "0")

    with pytest.raises(ValidationError):
        RankingConfig.from_env()


def test_small_sport_boost_still_breaks_ties(monkeypatch):
    monkeypatch.setenv("RULEBOOK_SPORT_BOOST", "0.001")
    candidates = [
        make_candidate("bb", 0.5, "Strike zone", sport="Baseball"),
        make_candidate("golf", 0.5, "Strike zone", sport="Golf"),
    ]

    ranked = RelevanceRanker(RankingConfig.from_env()).rank(candidates, "golf", "strike")

    assert [s.candidate.chunk_id for s in ranked.scored] == ["golf", "bb"]


def test_ranking_config_overrides_win(monkeypatch):
    monkeypatch.setenv("RULEBOOK_SPORT_BOOST", "0.6")

    assert RankingConfig.from_env(sport_boost=0.1).sport_boost == 0.1


def test_answer_config_reads_env(monkeypatch):
    monkeypatch.setenv("RULEBOOK_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("RULEBOOK_MIN_CONTENT_LENGTH", "100")
    monkeypatch.setenv("LLM_PROVIDER", "azure_openai")
    monkeypatch.setenv("AZURE_OPENAI_DEPLOYMENT_NAME", "rules-gpt4o")

    config = AnswerConfig.from_env()

    assert config.model == "gpt-4o-mini"
    assert config.min_content_length == 100
    assert config.temperature == 0.3
    assert config.trace_prompt_tokens is False
    assert config.provider == "azure_openai"
    assert config.azure_deployment_name == "rules-gpt4o"


def test_answer_config_rejects_unknown_provider():
    with pytest.raises(ValidationError):
        AnswerConfig(provider="anthropic")


def test_pinecone_config_defaults(monkeypatch):
    monkeypatch.setenv("PINECONE_NAMESPACE", "rules-v2")

    config = PineconeConfig.from_env()

    assert config.index_name == "sports-rules"
    assert config.namespace == "rules-v2"
    assert config.top_k == 8
    assert config.min_filtered_results == 2
    assert config.format_sport("golf") == "Golf"


def test_pinecone_config_reads_retrieval_settings(monkeypatch):
    monkeypatch.setenv("RULEBOOK_TOP_K", "12")
    monkeypatch.setenv("PINECONE_INDEX_NAME", "rules-2024")

    config = PineconeConfig.from_env()

    assert config.top_k == 12
    assert config.index_name == "rules-2024"


def test_pinecone_config_rejects_zero_top_k():
    with pytest.raises(ValidationError):
        PineconeConfig(top_k=0)


def test_embedding_config_azure_ad_flag(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_USE_AZURE_AD", "false")

    config = EmbeddingConfig.from_env(provider="azure_openai")

    assert config.use_azure_ad is False
