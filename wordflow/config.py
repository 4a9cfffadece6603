import os
from typing import Optional
from pydantic import BaseModel, Field
from wordflow.sources.adapters import DEFAULT_WORD_LIST_URL

class EngineConfig(BaseModel):
    word_list_url: Optional[str] = DEFAULT_WORD_LIST_URL
    word_list_path: Optional[str] = None      # Local file, used instead of the URL
    request_timeout: float = Field(10.0, gt=0)
    max_words: int = Field(12, ge=1)          # Cap on valid words per level
    fallback_length: int = 5                  # Root length tried when the target has no words
    default_root: str = "water"               # Root used when no length has words

    @classmethod
    def from_env(cls, **overrides) -> "EngineConfig":
        """
        Builds a config from WORDFLOW_* environment variables. Explicit
        keyword overrides win over the environment.
        """
        values = {}
        if os.getenv("WORDFLOW_WORD_LIST_URL"):
            values["word_list_url"] = os.getenv("WORDFLOW_WORD_LIST_URL")
        if os.getenv("WORDFLOW_WORD_LIST"):
            values["word_list_path"] = os.getenv("WORDFLOW_WORD_LIST")
        if os.getenv("WORDFLOW_TIMEOUT"):
            values["request_timeout"] = os.getenv("WORDFLOW_TIMEOUT")
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
