import pytest

from api_request_builder import wrap_get
from api_request_builder.errors import InvalidParamKeyError, RequestConfigurationError
from api_request_builder.path_params import (
    extract_placeholders,
    substitute_param,
    substitute_params,
)


@pytest.mark.parametrize(
    "template,params,wanted",
    [
        ("/users/:id", {"id": 1}, "/users/1"),
        ("/users/:id/courses/:course_name", {"id": 1, "course_name": "cs50"}, "/users/1/courses/cs50"),
        ("/users/:id", {"id": 1, "course_name": "cs50"}, "/users/1"),
        ("/users/:id/courses/:course_name", {"id": 1}, "/users/1/courses/:course_name"),
        ("/users/:id/:id_string", {"id": 1, "id_string": "cs50"}, "/users/1/cs50"),
    ],
    ids=["int param", "string param", "more param than template", "less param than template", "similar key name"],
)
def test_with_param(template, params, wanted):
    req = wrap_get(template).with_param(params).unwrap()
    assert req.url.path == wanted


class TestSubstituteParam:
    def test_value_formatting(self):
        """Should render values with their natural string form."""
        assert substitute_param("/items/:v", "v", 12.34) == "/items/12.34"
        assert substitute_param("/items/:v", "v", 2.0) == "/items/2"
        assert substitute_param("/items/:v", "v", -5) == "/items/-5"
        assert substitute_param("/items/:v", "v", True) == "/items/true"

    def test_replaces_every_occurrence(self):
        """Should replace each occurrence of the same placeholder."""
        assert substitute_param("/a/:id/b/:id", "id", 3) == "/a/3/b/3"

    def test_boundary_at_end_and_before_separator(self):
        """Should match at end of string and before non-identifier characters."""
        assert substitute_param("/users/:id", "id", 9) == "/users/9"
        assert substitute_param("/users/:id.json", "id", 9) == "/users/9.json"
        assert substitute_param("/users/:id-x", "id", 9) == "/users/9-x"

    def test_does_not_match_longer_name(self):
        """Should not consume part of a longer placeholder."""
        assert substitute_param("/users/:id_string", "id", 1) == "/users/:id_string"
        assert substitute_param("/users/:ids", "id", 1) == "/users/:ids"

    def test_unrelated_param_is_noop(self):
        """Should leave a path without the placeholder unchanged."""
        path = "/users/:id/courses"
        assert substitute_param(path, "course_name", "cs50") == path
        assert substitute_params(path, {"other": 1, "another": "x"}) == path

    def test_order_independent(self):
        """Should give the same result regardless of parameter order."""
        template = "/users/:id/:id_string/:name"
        forward = substitute_params(template, {"id": 1, "id_string": "a", "name": "b"})
        backward = substitute_params(template, {"name": "b", "id_string": "a", "id": 1})
        assert forward == backward == "/users/1/a/b"

    @pytest.mark.parametrize("key", ["1id", "id-x", "", "a b", "id$", "id\n", 1])
    def test_invalid_key(self, key):
        """Should raise for keys that are not identifiers."""
        with pytest.raises(InvalidParamKeyError):
            substitute_param("/users/:id", key, 1)

    def test_invalid_key_on_wrapper(self):
        with pytest.raises(RequestConfigurationError):
            wrap_get("/users/:id").set_param("not valid", 1)

    def test_trailing_newline_key_rejected(self):
        """Should not accept an identifier followed by a newline."""
        with pytest.raises(InvalidParamKeyError):
            wrap_get("/users/:id").set_param("id\n", 1)
        with pytest.raises(InvalidParamKeyError):
            wrap_get("/users/:id").with_param({"id\n": 1})


def test_set_param_chain():
    req = wrap_get("/users/:id/courses/:course_name").set_param("id", 1).set_param("course_name", "cs50").unwrap()
    assert req.url.path == "/users/1/courses/cs50"


def test_set_param_keeps_query():
    req = wrap_get("/users/:id?type=code").set_param("id", 42).unwrap()
    assert str(req.url) == "/users/42?type=code"


def test_extract_placeholders():
    assert extract_placeholders("/users/:id/courses/:course_name") == ["id", "course_name"]
    assert extract_placeholders("/users/1") == []
    assert extract_placeholders("") == []
