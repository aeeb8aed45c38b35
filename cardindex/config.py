from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Job settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDINDEX_")

    debug: bool = False

    data_dir: Path = Path("data")

    bulk_data_api: str = "https://api.scryfall.com/bulk-data"
    bulk_data_type: str = "default_cards"
    user_agent: str = "cardindex/1.0"

    raw_cards_filename: str = "default-cards.json"
    secondary_cards_filename: str = "lorcana-stripped.json"
    output_filename: str = "cards-minimized.json"

    request_timeout: float = 30.0
    download_timeout: float = 300.0

    min_distinct_cards: int = 20000
    min_distinct_sets: int = 500


settings = Settings()
