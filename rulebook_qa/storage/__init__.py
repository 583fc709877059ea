"""Storage backends for rule passages."""

from rulebook_qa.storage.vector import PineconeVectorStore

__all__ = ["PineconeVectorStore"]
