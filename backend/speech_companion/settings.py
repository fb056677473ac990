from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	app_title: str = Field(default="Speech Companion API", validation_alias="APP_TITLE")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Auth configuration (JWT carries a session id that must exist server-side)
	jwt_secret_key: str = Field(default="change-me", validation_alias="JWT_SECRET_KEY")
	jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
	access_token_expire_minutes: int = Field(default=60 * 24 * 7, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
	min_password_length: int = Field(default=6, validation_alias="MIN_PASSWORD_LENGTH")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")
	# Echo SQL statements (development only)
	database_echo: bool = Field(default=False, validation_alias="DATABASE_ECHO")

	# Seed catalogue (categories, words, exercises) on startup when the tables are empty
	seed_on_startup: bool = Field(default=True, validation_alias="SEED_ON_STARTUP")
	# Also create a sample parent with children at each level
	seed_sample_data: bool = Field(default=False, validation_alias="SEED_SAMPLE_DATA")

	# Expired auth sessions are purged at startup and then on this interval
	session_cleanup_interval_seconds: int = Field(default=24 * 60 * 60, validation_alias="SESSION_CLEANUP_INTERVAL_SECONDS")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	def resolved_database_url(self) -> str:
		return self.database_url or "sqlite:///./speech_companion.db"

settings = Settings()
