"""Vector store implementations."""

from rulebook_qa.storage.vector.pinecone import PineconeVectorStore

__all__ = ["PineconeVectorStore"]
