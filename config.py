"""Configuration for MongoDB (index sync) and the OpenAI-compatible embeddings endpoint."""
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from pymongo import MongoClient
from dotenv import load_dotenv

load_dotenv()

# Directory (relative to the working directory) holding the index definition files
INDEX_CONFIG_DIR = os.path.join("config", "indexes")

EMBEDDING_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",  # .../openai/deployments/<deployment>
    "OPENAI_API_VERSION",  # e.g. 2024-10-21
    "OPENAI_EMBEDDING_MODEL",  # deployment name
)


class ConfigError(Exception):
    """Raised when required configuration cannot be resolved."""


class MissingSettingError(ConfigError):
    def __init__(self, name: str):
        super().__init__(f"Missing required setting: {name}")
        self.name = name


@dataclass(frozen=True)
class MongoSettings:
    uri: str
    db_name: str


@dataclass(frozen=True)
class EmbeddingSettings:
    api_key: str
    base_url: str
    api_version: str
    model: str


def _ask(ask: Callable[[str], str], prompt: str) -> str:
    try:
        return ask(prompt)
    except EOFError:
        return ""


def resolve_setting(
    name: str,
    prompt: Optional[str] = None,
    default: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    ask: Callable[[str], str] = input,
) -> str:
    """
    Resolve one setting from, in order: the environment, an interactive prompt, a default.
    Blank values are treated as absent. Raises MissingSettingError if nothing yields a value.
    """
    env = os.environ if environ is None else environ
    value = (env.get(name) or "").strip()
    if value:
        return value
    if prompt is not None:
        value = (_ask(ask, prompt) or "").strip()
        if value:
            return value
    if default:
        return default
    raise MissingSettingError(name)


def load_mongo_settings(
    environ: Optional[Mapping[str, str]] = None,
    ask: Callable[[str], str] = input,
) -> MongoSettings:
    """Return the MongoDB connection settings, prompting for anything unset."""
    uri = resolve_setting("MONGODB_URI", prompt="Enter your MongoDB URI: ", environ=environ, ask=ask)
    db_name = resolve_setting("MONGODB_DB", prompt="Enter database name: ", environ=environ, ask=ask)
    return MongoSettings(uri=uri, db_name=db_name)


def load_embedding_settings(environ: Optional[Mapping[str, str]] = None) -> EmbeddingSettings:
    """Return the embeddings endpoint settings. All four are required; there is no prompt or default."""
    api_key, base_url, api_version, model = (
        resolve_setting(name, environ=environ) for name in EMBEDDING_ENV_VARS
    )
    return EmbeddingSettings(api_key=api_key, base_url=base_url, api_version=api_version, model=model)


def get_mongo_client(uri: str) -> MongoClient:
    """Return a MongoDB client."""
    return MongoClient(uri, serverSelectionTimeoutMS=10000)
