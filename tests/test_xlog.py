from datetime import datetime

from predator.xlog import Value, format_message, info, serialise


def test_serialise_key_value_separated_by_comma():
    assert serialise([Value("abc", 1), Value("def", 2)]) == "abc=1 ,def=2"


def test_serialise_empty():
    assert serialise([]) == ""


def test_serialise_renders_bool_and_none():
    assert serialise([Value("ok", True), Value("x", None)]) == "ok=true ,x=<nil>"


def test_format_message_with_values():
    assert format_message("done", Value("job", "a1")) == "job=a1 ,done"


def test_format_message_without_values():
    assert format_message("done") == " ,done"


def test_info_prints_line(capsys):
    info("hello", Value("abc", 1), Value("def", 2))
    out = capsys.readouterr().out
    prefix, day, clock, rest = out.split(" ", 3)
    assert prefix == "INFO:"
    assert rest == "abc=1 ,def=2 hello\n"
    stamp = datetime.strptime(f"{day} {clock}", "%Y/%m/%d %H:%M:%S")
    assert stamp.year >= 2000