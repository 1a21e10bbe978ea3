"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.

Scoring and matching constants live in nested models so they can be tuned
through the environment, e.g. ``RECOMMENDATION__EXCLUSION_WINDOW_DAYS=3``.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class RecommendationConfig(BaseModel):
    """
    Weights and windows used by the recommendation scorer and engine.

    Defaults reproduce the current scoring variant. ``legacy()`` returns the
    earlier variant (heavier category/rating weights, 3-day exclusion window).
    """

    category_weight: float = Field(default=30.0, ge=0, description="Max points for category affinity")
    rating_weight: float = Field(default=25.0, ge=0, description="Max points for average rating")
    novelty_bonus: float = Field(default=30.0, ge=0, description="Flat bonus for never-eaten menus")
    long_unseen_days: int = Field(default=10, ge=0, description="Days after which the long-unseen bonus applies")
    long_unseen_bonus: float = Field(default=15.0, ge=0, description="Bonus for menus not eaten in a long time")
    unseen_days: int = Field(default=7, ge=0, description="Days after which the unseen bonus applies")
    unseen_bonus: float = Field(default=10.0, ge=0, description="Bonus for menus not eaten recently")
    time_of_day_bonus: float = Field(default=10.0, ge=0, description="Bonus for a calorie/time-of-day fit")
    calorie_threshold: int = Field(default=500, ge=0, description="Light/hearty calorie boundary")
    lunch_start_hour: int = Field(default=11, ge=0, le=24)
    lunch_end_hour: int = Field(default=15, ge=0, le=24)
    dinner_start_hour: int = Field(default=17, ge=0, le=24)
    dinner_end_hour: int = Field(default=21, ge=0, le=24)
    jitter_max: float = Field(default=5.0, ge=0, description="Upper bound (exclusive) of random jitter")
    exclusion_window_days: int = Field(default=5, ge=0, description="Recently eaten menus are skipped")
    fallback_score: float = Field(default=50.0, description="Score assigned to random picks")

    @model_validator(mode="after")
    def validate_hour_ranges(self):
        if self.lunch_start_hour > self.lunch_end_hour:
            raise ValueError("lunch_start_hour must not be after lunch_end_hour")
        if self.dinner_start_hour > self.dinner_end_hour:
            raise ValueError("dinner_start_hour must not be after dinner_end_hour")
        return self

    @classmethod
    def legacy(cls) -> "RecommendationConfig":
        """Earlier scoring variant: 40/30/30 weights and a 3-day window."""
        return cls(
            category_weight=40.0,
            rating_weight=30.0,
            novelty_bonus=30.0,
            exclusion_window_days=3,
        )


class MatchingConfig(BaseModel):
    """Settings for free-text menu matching and meal period fallback."""

    max_edit_distance: int = Field(default=2, ge=0, description="Largest accepted typo distance")
    min_candidate_length: int = Field(default=2, ge=1, description="Shortest extractable menu name")
    lunch_start_hour: int = Field(default=11, ge=0, le=24)
    lunch_end_hour: int = Field(default=15, ge=0, le=24)

    @model_validator(mode="after")
    def validate_lunch_range(self):
        if self.lunch_start_hour > self.lunch_end_hour:
            raise ValueError("lunch_start_hour must not be after lunch_end_hour")
        return self


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="MenuBot", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Catalog seeding
    seed_menus_path: Optional[str] = Field(
        default="data/menus.json", description="JSON file with the initial menu catalog"
    )
    default_category: str = Field(
        default="기타", description="Category given to menus created from chat input"
    )

    # Chat behaviour
    recommendation_count: int = Field(default=3, ge=1, description="Menus per recommendation reply")
    history_days: int = Field(default=7, ge=1, description="Days covered by the history reply")
    history_limit: int = Field(default=10, ge=1, description="Max lines in the history reply")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(default="MenuBot API", description="API documentation title")
    api_description: str = Field(
        default="Meal logging and menu recommendation chat-bot webhook",
        description="API documentation description",
    )

    recommendation: RecommendationConfig = Field(default_factory=RecommendationConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
