from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "research_portal"
    db_username: str = "research_portal"
    db_password: str = "secret"

    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_allowed_origins: list[str] = ["http://localhost:3000"]
    max_upload_size_bytes: int = 20 * 1024 * 1024

    pdf_engine: str = "pdfplumber"

    analysis_provider: str = "openrouter"
    analysis_models: list[str] = [
        "meta-llama/llama-3.3-70b-instruct:free",
        "google/gemini-2.0-flash-exp:free",
        "nvidia/nemotron-3-nano-30b-a3b:free",
        "google/gemma-3-27b-it:free",
        "qwen/qwen3-235b-a22b-thinking:free",
        "stepfun/step-3.5-flash:free",
        "openrouter/pony-alpha:free",
        "z-ai/glm-4.7",
        "xiaomi/xiaomi-mimo-v2-flash:free",
        "deepseek/deepseek-r1-0528:free",
    ]
    analysis_temperature: float = 0.1
    analysis_max_tokens: int = 8192
    analysis_max_transcript_chars: int = 100_000
    analysis_timeout_seconds: int = 60

    openrouter_api_key: str = ""
    openai_api_key: str = ""
    gemini_api_key: str = ""
    groq_api_key: str = ""
    together_api_key: str = ""
    deepseek_api_key: str = ""
    ollama_api_key: str = "ollama"
    openai_compatible_api_key: str = ""
    openai_compatible_base_url: str = ""

    app_url: str = "http://localhost:3000"
    app_title: str = "Research Portal"

    @property
    def is_development(self) -> bool:
        """True when detailed error messages may be returned to clients."""
        return self.app_env.lower() in ("dev", "development")
