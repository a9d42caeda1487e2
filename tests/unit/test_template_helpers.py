"""Unit tests for template helper functions."""

from datetime import date

import pytest
from jinja2 import Environment

from resume_gen.contexts.templating.helpers import (
    CONTACT_ICONS,
    contact_icon,
    format_date,
    install_helpers,
    join,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2020-03-15", "March 2020"),
        ("2020-03", "March 2020"),
        ("2020", "January 2020"),
        ("1843-01-01", "January 1843"),
        ("2019-12-31T23:59:59Z", "December 2019"),
        (date(2021, 7, 4), "July 2021"),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", None])
def test_format_date_empty_is_present(value):
    assert format_date(value) == "Present"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["sometime in spring", "2020-13"])
def test_format_date_unparseable_returned_unchanged(value):
    assert format_date(value) == value


@pytest.mark.unit
def test_join_with_separator():
    assert join(["Go", "Rust"], " | ") == "Go | Rust"


@pytest.mark.unit
def test_join_default_separator():
    assert join(["Python", "SQL", "Bash"]) == "Python, SQL, Bash"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "Go", 42, {"a": 1}, []])
def test_join_non_list_is_empty(value):
    assert join(value) == ""


@pytest.mark.unit
@pytest.mark.parametrize("kind", ["email", "phone", "location", "url", "fax"])
def test_contact_icon_suppressed_in_ats_mode(kind):
    assert contact_icon(kind, True) == ""


@pytest.mark.unit
def test_contact_icon_glyphs():
    assert contact_icon("email") == CONTACT_ICONS["email"]
    assert contact_icon("phone", False) == CONTACT_ICONS["phone"]
    assert contact_icon("fax") == ""


@pytest.mark.unit
def test_install_helpers_is_repeatable():
    env = Environment()
    install_helpers(env)
    install_helpers(env)

    template = env.from_string("{{ format_date(d) }} / {{ join(k, ' | ') }} / [{{ contact_icon('email', true) }}]")
    assert template.render(d="2020-03-15", k=["Go", "Rust"]) == "March 2020 / Go | Rust / []"
