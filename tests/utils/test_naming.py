import pytest

from doclifecycle.utils import camel_to_snake, collection_name_for, pluralize


@pytest.mark.parametrize(
    "name, expected",
    [("Book", "book"), ("BlogPost", "blog_post"), ("HTTPRequestLog", "http_request_log")],
)
def test_camel_to_snake(name, expected):
    assert camel_to_snake(name) == expected


@pytest.mark.parametrize(
    "word, expected",
    [("book", "books"), ("box", "boxes"), ("category", "categories"), ("day", "days"), ("", "")],
)
def test_pluralize(word, expected):
    assert pluralize(word) == expected


def test_collection_name_for_model():
    assert collection_name_for("LibraryBranch") == "library_branches"
