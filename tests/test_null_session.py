import logging

import pytest

from focus_sessions.modules.session import NullSession, Session, Source
from focus_sessions.modules.urls import URL_ABOUT


def test_null_session_source_is_none():
    assert NullSession().source == Source.NONE


def test_null_session_url_is_about_page():
    session = NullSession()

    assert session.url == URL_ABOUT
    assert session.url == "firefox:about"


def test_null_session_is_a_session():
    session = NullSession()

    assert isinstance(session, Session)
    assert session.is_null() is True
    assert session.is_custom_tab() is False
    assert session.is_search() is False


@pytest.mark.parametrize("count", [1, 10, 100])
def test_repeated_construction_gives_same_fields(count):
    sessions = [NullSession() for _ in range(count)]

    assert {s.source for s in sessions} == {Source.NONE}
    assert {s.url for s in sessions} == {URL_ABOUT}


def test_two_null_sessions_are_field_wise_equal_but_distinct():
    first = NullSession()
    second = NullSession()

    assert first is not second
    assert (first.source, first.url) == (second.source, second.url)
    assert first.uuid != second.uuid


def test_null_session_defaults_match_plain_session():
    """NullSession only fixes source and URL, everything else is a Session default."""
    null = NullSession().to_dict()
    plain = Session(Source.NONE, URL_ABOUT).to_dict()

    null.pop("uuid")
    plain.pop("uuid")
    assert null == plain


def test_null_session_construction_does_not_log(caplog):
    caplog.set_level(logging.DEBUG)

    NullSession()

    assert caplog.records == []


def test_null_session_takes_no_arguments():
    with pytest.raises(TypeError):
        NullSession(Source.VIEW, "https://example.com")
