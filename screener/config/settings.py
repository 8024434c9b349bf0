from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    max_workers: int = 4
    flag_empty_documents: bool = False

    min_phone_digits: int = 7
    min_job_token_length: int = 4

    highlight_start_tag: str = "<mark>"
    highlight_end_tag: str = "</mark>"

    csv_filename: str = "screening_results.csv"
    text_dump_prefix: str = "resume"
