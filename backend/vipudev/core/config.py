"""Application settings loaded from environment variables and `.env`."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/.env, independent of the working directory the server starts from
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Central configuration for the VipuDev.AI backend."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    app_name: str = "VipuDev.AI Backend"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Record store
    database_url: str = "sqlite+aiosqlite:///./data/vipudev.db"

    # Auth
    admin_username: str = "admin"
    admin_password: str = "admin123"
    session_backend: str = "memory"  # memory | database
    session_ttl_seconds: int = 43200  # 0 disables expiry

    # Hosted LLM / image generation. The key never leaves the server.
    openai_api_key: str = ""
    llm_provider: str = "openai"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.1
    llm_max_tokens: int = 4000
    image_model: str = "dall-e-3"
    image_size: str = "1024x1024"

    # Fernet key for the stored config apiKey
    master_encryption_key: str = ""

    # Container sandbox (/api/run-project)
    sandbox_timeout_seconds: float = 20
    sandbox_memory_limit: str = "512m"
    sandbox_cpu_limit: float = 1.0
    sandbox_scratch_root: str | None = None

    # Host runner (/api/run)
    host_run_timeout_seconds: float = 7
    host_run_max_output_bytes: int = 1024 * 1024

    # ZIP analysis sampling
    analyze_max_files: int = 30
    analyze_max_file_bytes: int = 20000

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def llm_configured(self) -> bool:
        return bool(self.openai_api_key)


settings = Settings()
