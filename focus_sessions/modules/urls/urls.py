from typing import FrozenSet

APP_URL_PREFIX = "firefox:"

# Start page with the URL bar, shown before anything has loaded
APP_URL_HOME = APP_URL_PREFIX + "home"
# Landing page shown when there is no real session to display
URL_ABOUT = APP_URL_PREFIX + "about"
URL_RIGHTS = APP_URL_PREFIX + "rights"
URL_GPL = APP_URL_PREFIX + "gpl"
URL_LICENSES = APP_URL_PREFIX + "licenses"

INTERNAL_URLS: FrozenSet[str] = frozenset(
    {APP_URL_HOME, URL_ABOUT, URL_RIGHTS, URL_GPL, URL_LICENSES}
)


def is_internal_url(url: str) -> bool:
    """
    Check whether a URL points at one of the browser's internal pages.

    Exact string comparison only, no normalization.
    """
    return url in INTERNAL_URLS


def is_home_url(url: str) -> bool:
    return url == APP_URL_HOME
