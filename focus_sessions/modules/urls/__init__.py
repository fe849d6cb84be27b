"""
URLs Module - Black Box Interface

Purpose: Registry of the browser's internal page addresses
Interface: APP_URL_PREFIX, APP_URL_HOME, URL_ABOUT, URL_RIGHTS, URL_GPL,
           URL_LICENSES, is_internal_url(), is_home_url()
Hidden: Nothing, these are constants

Other modules must take internal URLs from here instead of spelling them out.
"""

from .urls import (
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

__all__ = [
    "APP_URL_PREFIX",
    "APP_URL_HOME",
    "URL_ABOUT",
    "URL_RIGHTS",
    "URL_GPL",
    "URL_LICENSES",
    "INTERNAL_URLS",
    "is_internal_url",
    "is_home_url",
]
