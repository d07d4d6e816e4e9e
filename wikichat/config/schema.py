"""Configuration schema."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wikichat.search.models import Language

DEFAULT_API_URL = "https://{lang}.wikipedia.org/w/api.php"


class Base(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WikipediaConfig(Base):
    """Remote search settings."""

    api_url: str = DEFAULT_API_URL
    search_limit: int = Field(default=10, ge=1, le=50)
    extract_sentences: int = Field(default=5, ge=1, le=10)
    thumbnail_size: int = Field(default=400, ge=1)
    suggestion_limit: int = Field(default=5, ge=1, le=50)
    max_results: int = Field(default=5, ge=1)
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "wikichat/0.1 (https://github.com/wikichat/wikichat)"

    def endpoint(self, lang: Language) -> str:
        return self.api_url.format(lang=lang)


class ChatConfig(Base):
    """Reply formatting settings."""

    language: Language = "en"
    low_confidence_threshold: float = 30.0
    related_topics: int = Field(default=3, ge=0)
    request_timeout: float = Field(default=30.0, gt=0)


class Config(Base):
    """Root configuration."""

    wikipedia: WikipediaConfig = Field(default_factory=WikipediaConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)
