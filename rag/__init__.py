"""RAG helpers: embeddings from an OpenAI-compatible endpoint."""
from .embeddings import get_embedding
