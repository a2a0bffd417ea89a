from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class GlobalConfig(BaseSettings):
    """Environment driven settings for the OpenSearch endpoint and bulk loads.

    Values are read from the process environment and from a local ``.env``
    file. Only the CLI reads this object; the loading components receive an
    already-built client and plain arguments.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    open_search_endpoint: str = "https://localhost:9200"
    open_search_master_user_name: str = "admin"
    open_search_master_user_password: str = ""
    open_search_verify_certs: bool = False
    open_search_toggle_refresh: bool = True
    # signs requests with SigV4 instead of basic auth when set
    aws_region: Optional[str] = None

    index_name: str = "documents"
    page_size: int = 500
    document_count: int = 10000
    refresh_interval: str = "1s"
    request_timeout: int = 120

    log_level: str = "INFO"
    log_json: bool = True


global_config = GlobalConfig()
