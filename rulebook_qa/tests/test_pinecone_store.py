from types import SimpleNamespace

from rulebook_qa.storage.vector.pinecone import PineconeVectorStore, build_filter, parse_match_metadata


class FakeIndex:
    def __init__(self, matches):
        self.matches = matches
        self.calls = []

    def query(self, **kwargs):
        self.calls.append(kwargs)
        return SimpleNamespace(matches=self.matches)


def test_parse_match_metadata_accepts_legacy_field_names():
    metadata = parse_match_metadata({"text": "Body", "number": 5, "sport": "Golf", "title": " ", "extra": 1})

    assert metadata.content == "Body"
    assert metadata.rule_number == "5"
    assert metadata.sport == "Golf"
    assert metadata.title is None


def test_parse_match_metadata_handles_missing_metadata():
    metadata = parse_match_metadata(None)

    assert metadata.content == ""
    assert metadata.sport is None


def test_build_filter():
    assert build_filter(None) is None
    assert build_filter({"sport": "Golf"}) == {"sport": {"$eq": "Golf"}}
    assert build_filter({"sport": ["Golf", "Hockey"]}) == {"sport": {"$in": ["Golf", "Hockey"]}}


def test_query_converts_matches_to_candidates(pinecone_config):
    index = FakeIndex([
        SimpleNamespace(id="golf-1", score=0.82, metadata={"content": "Water hazard rule.", "sport": "Golf", "number": "26", "path": "/rules/golfrules/26"}),
        SimpleNamespace(id="blank", score=None, metadata=None),
    ])
    store = PineconeVectorStore(pinecone_config, index=index)

    candidates = store.query([0.1, 0.2], top_k=8, filters={"sport": "Golf"})

    assert index.calls == [{
        "vector": [0.1, 0.2],
        "top_k": 8,
        "include_metadata": True,
        "filter": {"sport": {"$eq": "Golf"}},
    }]
    assert candidates[0].chunk_id == "golf-1"
    assert candidates[0].sport == "Golf"
    assert candidates[0].metadata.rule_number == "26"
    assert candidates[0].metadata.path == "/rules/golfrules/26"
    assert candidates[1].score == 0.0
    assert candidates[1].content == ""


def test_query_passes_namespace(pinecone_config):
    index = FakeIndex([])
    store = PineconeVectorStore(pinecone_config, index=index)

    assert store.query([0.1], top_k=3, namespace="rules") == []
    assert index.calls[0]["namespace"] == "rules"
    assert "filter" not in index.calls[0]
