from focus_sessions.modules.urls import (
    APP_URL_HOME,
    APP_URL_PREFIX,
    INTERNAL_URLS,
    URL_ABOUT,
    URL_GPL,
    URL_LICENSES,
    URL_RIGHTS,
    is_home_url,
    is_internal_url,
)


def test_app_url_values():
    assert APP_URL_PREFIX == "firefox:"
    assert APP_URL_HOME == "firefox:home"
    assert URL_ABOUT == "firefox:about"
    assert URL_RIGHTS == "firefox:rights"
    assert URL_GPL == "firefox:gpl"
    assert URL_LICENSES == "firefox:licenses"


def test_internal_urls_use_app_prefix():
    for url in INTERNAL_URLS:
        assert url.startswith(APP_URL_PREFIX)


def test_registry_contains_all_pages():
    assert INTERNAL_URLS == {APP_URL_HOME, URL_ABOUT, URL_RIGHTS, URL_GPL, URL_LICENSES}


def test_is_internal_url():
    assert is_internal_url(URL_ABOUT)
    assert is_internal_url("firefox:licenses")
    assert not is_internal_url("https://www.mozilla.org")
    assert not is_internal_url("focus:about")
    # Exact match only, no normalization
    assert not is_internal_url("FIREFOX:about")
    assert not is_internal_url("firefox:about/")


def test_is_home_url():
    assert is_home_url("firefox:home")
    assert not is_home_url(URL_ABOUT)
