from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
	model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, populate_by_name=True, extra="ignore")

	# Comparator tuning
	minimum_word_len: int = Field(
		default=2,
		ge=1,
		alias="THREESET_MINIMUM_WORD_LEN",
		description="Words shorter than this are ignored while scoring.",
	)
	delta_word_len_ignore: int = Field(
		default=3,
		ge=0,
		alias="THREESET_DELTA_WORD_LEN_IGNORE",
		description="Largest length gap for which a substring counts as a full word match.",
	)
	min_word_similarity: float = Field(
		default=0.707,
		ge=0.0,
		le=1.0,
		alias="THREESET_MIN_WORD_SIMILARITY",
		description="A word pair only counts when its character-set score is above this value.",
	)
	max_length: int = Field(
		default=255,
		ge=1,
		alias="THREESET_MAX_LENGTH",
		description="Advisory input length; longer strings are still compared.",
	)
	case_sensitive: bool = Field(default=False, alias="THREESET_CASE_SENSITIVE")

	# Batch defaults
	dedupe_threshold: float = Field(default=0.9, ge=0.0, le=1.0, alias="THREESET_DEDUPE_THRESHOLD")
	top_k: int = Field(default=10, ge=1, alias="THREESET_TOP_K")


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
	return AppSettings()  # type: ignore[arg-type]
