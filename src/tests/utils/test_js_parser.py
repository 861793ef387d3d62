from src.main.utils.js_parser import _get_parser, parse


def test_parse_returns_program():
    root = parse("var a = 1;")
    assert root.type == "program"
    assert not root.has_error


def test_parser_is_cached():
    assert _get_parser() is _get_parser()


def test_parse_keeps_going_on_errors():
    root = parse("function (")
    assert root.type == "program"
    assert root.has_error
