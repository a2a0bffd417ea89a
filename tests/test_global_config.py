from opensearch_ingest.global_config import GlobalConfig


def test_reads_open_search_environment_variables(monkeypatch):
    monkeypatch.setenv("OPEN_SEARCH_ENDPOINT", "https://search.example.com")
    monkeypatch.setenv("OPEN_SEARCH_MASTER_USER_NAME", "master")
    monkeypatch.setenv("OPEN_SEARCH_MASTER_USER_PASSWORD", "secret")
    monkeypatch.setenv("PAGE_SIZE", "250")

    config = GlobalConfig(_env_file=None)

    assert config.open_search_endpoint == "https://search.example.com"
    assert config.open_search_master_user_name == "master"
    assert config.open_search_master_user_password == "secret"
    assert config.page_size == 250


def test_defaults(monkeypatch):
    for name in ("AWS_REGION", "PAGE_SIZE", "INDEX_NAME", "REFRESH_INTERVAL"):
        monkeypatch.delenv(name, raising=False)

    config = GlobalConfig(_env_file=None)

    assert config.page_size == 500
    assert config.refresh_interval == "1s"
    assert config.open_search_toggle_refresh is True
    assert config.aws_region is None
