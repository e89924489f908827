import pytest

from cmdkit.parsing import (
    PROVIDED_BUT_NOT_DEFINED_ERR_MSG,
    FlagParseError,
    flag_from_error,
    is_splittable,
    parse_iter,
    split_short_options,
)


class _FakeFlagSet:
    def __init__(self, names):
        self.names = set(names)
        self.calls = []
        self.seen = []

    def lookup(self, name):
        return name if name in self.names else None

    def parse(self, args):
        self.calls.append(list(args))
        for arg in args:
            if not arg.startswith("-"):
                return
            name = arg.lstrip("-")
            if name not in self.names:
                raise FlagParseError(PROVIDED_BUT_NOT_DEFINED_ERR_MSG + name)
            self.seen.append(name)


def test_flag_from_error_extracts_name():
    err = FlagParseError(PROVIDED_BUT_NOT_DEFINED_ERR_MSG + "nema")
    assert flag_from_error(err) == "nema"


def test_flag_from_error_rejects_other_errors():
    with pytest.raises(ValueError):
        flag_from_error(FlagParseError("invalid"))


@pytest.mark.parametrize(
    "arg,expected",
    [("-it", True), ("--it", False), ("-i", False), ("it", False), ("-", False)],
)
def test_is_splittable(arg, expected):
    assert is_splittable(arg) is expected


def test_split_short_options_known_flags():
    fs = _FakeFlagSet("it")
    assert split_short_options(fs.lookup, "-it") == ["-i", "-t"]


def test_split_short_options_unknown_letter_kept_whole():
    fs = _FakeFlagSet("i")
    assert split_short_options(fs.lookup, "-ix") == ["-ix"]


def test_split_short_options_long_flag_kept_whole():
    fs = _FakeFlagSet("it")
    assert split_short_options(fs.lookup, "--it") == ["--it"]


def test_parse_iter_success_first_time():
    fs = _FakeFlagSet("v")
    assert parse_iter(fs, ["-v", "x"]) is None
    assert fs.calls == [["-v", "x"]]


def test_parse_iter_splits_combined_short_options():
    fs = _FakeFlagSet("vit")
    parse_iter(fs, ["-v", "-it", "x"], short_option_handling=True)
    assert fs.calls[-1] == ["-i", "-t", "x"]
    assert fs.seen.count("v") == 1
    assert "i" in fs.seen and "t" in fs.seen


def test_parse_iter_without_short_handling_raises():
    fs = _FakeFlagSet("it")
    with pytest.raises(FlagParseError) as info:
        parse_iter(fs, ["-it"])
    assert flag_from_error(info.value) == "it"


def test_parse_iter_shell_complete_suppresses_error():
    fs = _FakeFlagSet("i")
    assert parse_iter(fs, ["--nope"], shell_complete=True) is None
    assert len(fs.calls) == 1


def test_parse_iter_unsplittable_raises():
    fs = _FakeFlagSet("i")
    with pytest.raises(FlagParseError):
        parse_iter(fs, ["-ix"], short_option_handling=True)


def test_parse_iter_unknown_long_flag_raises():
    fs = _FakeFlagSet("it")
    with pytest.raises(FlagParseError):
        parse_iter(fs, ["--nope"], short_option_handling=True)


def test_parse_iter_other_error_raises():
    class _Broken(_FakeFlagSet):
        def parse(self, args):
            raise FlagParseError("invalid value")

    with pytest.raises(FlagParseError, match="invalid value"):
        parse_iter(_Broken("i"), ["-i"], short_option_handling=True)