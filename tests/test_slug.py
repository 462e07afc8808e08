import pytest

from apps.biztime.core.slug import slugify


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Microsoft", "microsoft"),
        ("Apple Inc", "apple-inc"),
        ("Apple Inc.", "apple-inc"),
        ("  IBM  ", "ibm"),
        ("AT&T -- Wireless", "at-t-wireless"),
        ("3M", "3m"),
        ("!!!", ""),
    ],
)
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_slugify_is_deterministic():
    assert slugify("Big Blue Co") == slugify("Big Blue Co")
