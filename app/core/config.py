from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Livestock Advisory Service"
    app_env: str = "development"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Optional key for the model-backed diagnosis; without it /diagnosis
    # answers from the rule-based symptom checker
    openai_api_key: str | None = None
    # Any OpenAI-compatible chat-completions API (OpenAI, OpenRouter, ...)
    llm_base_url: str = "https://api.openai.com/v1"
    llm_model: str = "gpt-4o"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_timeout_seconds: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
