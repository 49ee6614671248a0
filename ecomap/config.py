from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage settings
    ecosystem_store_path: str = "data/ecosystem.json"

    # Layout settings
    large_graph_entity_threshold: int = 50
    large_graph_relationship_threshold: int = 100

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
