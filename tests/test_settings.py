from launchql import Settings


def test_settings_defaults():
    settings = Settings()
    assert settings.default_page_size == 20
    assert settings.launch_api_url == 'https://api.spacexdata.com/v2/'
    assert settings.database_url == 'sqlite+aiosqlite://'

    # Base URL always ends with a slash
    assert Settings(launch_api_url='http://localhost/api').launch_api_url == 'http://localhost/api/'


def test_settings_from_env():
    settings = Settings.from_env({
        'LAUNCHQL_DEFAULT_PAGE_SIZE': '5',
        'LAUNCHQL_HTTP_TIMEOUT': '2.5',
        'LAUNCHQL_DATABASE_URL': 'postgresql+asyncpg://localhost/launches',
        'UNRELATED': 'whatever',
    })
    assert settings == Settings(
        default_page_size=5,
        http_timeout=2.5,
        database_url='postgresql+asyncpg://localhost/launches',
    )


def test_get_page_size():
    settings = Settings(default_page_size=7)
    assert settings.get_page_size(None) == 7
    assert settings.get_page_size(3) == 3
    assert settings.get_page_size(0) == 0
    assert settings.get_page_size(-3) == 0
