"""OpenAI-compatible (Azure deployment) embeddings."""
from typing import Optional

from openai import OpenAI

from config import EmbeddingSettings, load_embedding_settings


def get_embedding(text: str, settings: Optional[EmbeddingSettings] = None) -> list[float]:
    """
    Return the embedding vector for a single text.
    Raises MissingSettingError before any network call if a setting is absent; API errors propagate.
    """
    if not text:
        raise ValueError("text must be a non-empty string")
    if settings is None:
        settings = load_embedding_settings()
    client = OpenAI(
        api_key=settings.api_key,
        base_url=settings.base_url,
        default_query={"api-version": settings.api_version},
    )
    result = client.embeddings.create(model=settings.model, input=text)
    return list(result.data[0].embedding)
