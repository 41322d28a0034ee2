from core2d.log import (
    Core2DError,
    ErrorLog,
    err,
    get_all_errors,
    get_core_error,
    log,
    push_error,
)


def test_log_prints_prefixed_line(capsys):
    log("Loading sound 'a.wav'...")
    assert capsys.readouterr().out == "[LOG] Loading sound 'a.wav'...\n"


def test_err_prints_prefixed_line(capsys):
    err("Could not open file: x")
    assert capsys.readouterr().out == "[ERROR] Could not open file: x\n"


def test_empty_log_latest_is_empty_string():
    assert ErrorLog().latest() == ""


def test_push_and_latest():
    errors = ErrorLog()
    errors.push("first")
    errors.push("second")
    assert errors.latest() == "second"
    assert errors.all() == ["first", "second"]
    assert len(errors) == 2


def test_all_returns_copy():
    errors = ErrorLog()
    errors.push("one")
    snapshot = errors.all()
    snapshot.append("extra")
    assert errors.all() == ["one"]


def test_clear():
    errors = ErrorLog()
    errors.push("one")
    errors.clear()
    assert errors.all() == []
    assert errors.latest() == ""


def test_module_level_error_log():
    before = len(get_all_errors())
    push_error("Font provided was null.")
    assert get_core_error() == "Font provided was null."
    assert len(get_all_errors()) == before + 1


def test_core2d_error_carries_message():
    error = Core2DError("Failed to load font: x.ttf")
    assert str(error) == "Failed to load font: x.ttf"
    assert error.args == ("Failed to load font: x.ttf",)
    assert issubclass(Core2DError, Exception)