from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM (OpenAI-compatible endpoint, Mistral by default)
    llm_api_key: str = ""
    llm_base_url: str = "https://api.mistral.ai/v1"
    default_model: str = "mistral-large-latest"
    facts_model: str = ""  # optional override for infobox extraction only
    llm_max_tokens: int = 4096
    llm_temperature: float = 0.3

    # Search provider
    search_provider: str = "exa"  # exa | brave | tavily
    exa_api_key: str = ""
    brave_api_key: str = ""
    tavily_api_key: str = ""
    search_max_results_per_query: int = 10
    search_timeout_seconds: float = 30.0

    # Content
    content_dir: str = "content"
    content_repo_url: str = "https://raw.githubusercontent.com/wikistral/content/main"

    # App
    app_env: str = "development"  # development | production
    app_log_level: str = "INFO"
    noisy_log_level: str = "WARNING"
    log_dir: str = "logs"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def is_production(self) -> bool:
        return self.app_env.lower().strip() == "production"


settings = Settings()
