import pytest

from hakohir.diagnostics import (
    DuplicateMarker,
    ExpectedExprButFoundHako,
    ExpectedExprButFoundMod,
    GlobalIdIsNotFound,
    HirLoweringError,
    IdIsNotFoundInScope,
    JsifyError,
    PathIsNotFoundInScope,
    UnknownSysEmbedName,
    UnnecessaryPath,
)
from hakohir.ids import HakoId, ItemId, ModId

SPAN = (0, 1)


def test_errors_keep_their_fields():
    err = DuplicateMarker(name="spec", span=SPAN)
    assert err.name == "spec"
    assert err.span == SPAN


def test_errors_compare_by_value():
    assert DuplicateMarker("ret", SPAN) == DuplicateMarker("ret", SPAN)
    assert DuplicateMarker("ret", SPAN) != DuplicateMarker("ret", (1, 1))
    assert PathIsNotFoundInScope("a::b", SPAN) != UnnecessaryPath("a::b", SPAN)


@pytest.mark.parametrize(
    "error",
    [
        DuplicateMarker("sysembed", SPAN),
        ExpectedExprButFoundHako(HakoId(0), SPAN),
        ExpectedExprButFoundMod(ModId(0, 0), SPAN),
        GlobalIdIsNotFound(ItemId(0, 0), SPAN),
        IdIsNotFoundInScope("x", SPAN),
        PathIsNotFoundInScope("my_hako::f", SPAN),
        UnnecessaryPath("my_hako", SPAN),
    ],
)
def test_lowering_errors_are_catchable_by_base(error):
    with pytest.raises(HirLoweringError) as info:
        raise error
    assert info.value is error
    assert str(error) == error.message


def test_only_expected_expr_errors_are_syntax_errors():
    assert ExpectedExprButFoundHako(HakoId(0), SPAN).is_syntax_error
    assert ExpectedExprButFoundMod(ModId(0, 0), SPAN).is_syntax_error
    assert not DuplicateMarker("spec", SPAN).is_syntax_error
    assert not UnnecessaryPath("my_hako", SPAN).is_syntax_error


def test_messages_mention_offending_names():
    assert "arg x" in str(DuplicateMarker("arg x", SPAN))
    assert "my_hako::g" in str(PathIsNotFoundInScope("my_hako::g", SPAN))
    assert "local" in str(IdIsNotFoundInScope("local", SPAN))


def test_jsify_error_is_separate_from_lowering_errors():
    err = UnknownSysEmbedName(name="console", span=SPAN)
    assert isinstance(err, JsifyError)
    assert not isinstance(err, HirLoweringError)
    assert "console" in str(err)
    with pytest.raises(JsifyError):
        raise err