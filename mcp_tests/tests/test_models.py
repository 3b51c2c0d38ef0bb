import pytest

from core.errors import InvalidInputError
from core.models import ModelRequest, ModelRequestWithConfig, input_schema, parse_request


def test_parse_request_content_only():
    req = parse_request(ModelRequest, {"content": "features\n    Root"})
    assert req.content == "features\n    Root"


def test_parse_request_ignores_extra_keys():
    req = parse_request(ModelRequest, {"content": "x", "configFile": "c.csv", "other": 1})
    assert req == ModelRequest(content="x")


def test_parse_request_with_config_uses_alias():
    req = parse_request(ModelRequestWithConfig, {"content": "x", "configFile": "conf.csvconf"})
    assert req.content == "x"
    assert req.config_file == "conf.csvconf"


@pytest.mark.parametrize(
    "arguments",
    [None, {}, {"content": ""}, {"content": 42}, {"configFile": "c"}, ["content"]],
)
def test_parse_request_rejects_bad_content(arguments):
    with pytest.raises(InvalidInputError) as exc:
        parse_request(ModelRequest, arguments)
    assert "content" in str(exc.value) or "dict" in str(exc.value)


def test_parse_request_with_config_requires_config_file():
    with pytest.raises(InvalidInputError) as exc:
        parse_request(ModelRequestWithConfig, {"content": "x"})
    assert "configFile" in str(exc.value)


def test_parse_request_with_config_rejects_non_string_path():
    with pytest.raises(InvalidInputError):
        parse_request(ModelRequestWithConfig, {"content": "x", "configFile": 3})


def test_requests_are_immutable():
    req = ModelRequest(content="x")
    with pytest.raises(Exception):
        req.content = "y"


def test_input_schema_shapes():
    plain = input_schema(ModelRequest)
    with_config = input_schema(ModelRequestWithConfig)

    assert plain["type"] == "object"
    assert plain["required"] == ["content"]
    assert set(plain["properties"]) == {"content"}

    assert sorted(with_config["required"]) == ["configFile", "content"]
    assert set(with_config["properties"]) == {"content", "configFile"}
    assert with_config["properties"]["configFile"]["description"] == "Path to the configuration file"


def test_parse_request_with_config_rejects_python_field_name():
    with pytest.raises(InvalidInputError) as exc:
        parse_request(ModelRequestWithConfig, {"content": "x", "config_file": "conf.csvconf"})
    assert "configFile" in str(exc.value)
