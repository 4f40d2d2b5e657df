from __future__ import annotations

import pytest

from pycontentstorage.keys import extract_base_key, normalize_key, remove_interpolation


def test_colon_notation_becomes_dot_notation() -> None:
    assert normalize_key("common:welcome") == "common.welcome"


def test_only_first_colon_is_rewritten() -> None:
    assert normalize_key("a:b:c") == "a.b:c"


def test_namespace_argument_is_never_prepended() -> None:
    assert normalize_key("welcome", "common") == "welcome"
    assert normalize_key("pages.home.title", "app") == "pages.home.title"


@pytest.mark.parametrize("key", ["welcome", "common:welcome", "common.welcome", "pages.home.title", ""])
def test_normalization_is_idempotent(key: str) -> None:
    once = normalize_key(key)
    assert normalize_key(once) == once


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("items_plural", "items"),
        ("items_one", "items"),
        ("items_other", "items"),
        ("items_zero", "items"),
        ("welcome", "welcome"),
        ("hello_world", "hello_world"),
        ("friend_male", "friend_male"),
    ],
)
def test_extract_base_key(key: str, expected: str) -> None:
    assert extract_base_key(key) == expected


def test_extract_base_key_strips_only_trailing_suffix() -> None:
    assert extract_base_key("one_items") == "one_items"
    assert extract_base_key("cart.items_few") == "cart.items"


def test_remove_interpolation() -> None:
    assert remove_interpolation("Hello {{name}}!") == "Hello !"
    assert remove_interpolation("You have {{count}} items") == "You have  items"
    assert remove_interpolation("{{greeting}} {{name}}, welcome!") == ", welcome!"
    assert remove_interpolation("Hello world") == "Hello world"


def test_renormalizing_rewrites_next_colon() -> None:
    once = normalize_key("a:b:c")

    assert once == "a.b:c"
    assert normalize_key(once) == "a.b.c"
