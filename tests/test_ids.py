import pytest

from hakohir.ids import (
    BodyId,
    ExprId,
    ExprTypeId,
    FnArg,
    FnRet,
    FormalArgId,
    FormalArgTypeId,
    HakoId,
    ItemId,
    ItemMemberId,
    ModId,
    TopLevelItem,
    TopLevelItemMember,
    TopLevelTypeId,
    VarId,
    VarTypeId,
)


@pytest.mark.parametrize("cls", [HakoId, BodyId, VarId, FormalArgId, ExprId])
def test_single_id_round_trips_through_int(cls):
    assert int(cls(7)) == 7
    assert cls(3) == cls(3)
    assert cls(3) < cls(4)


def test_distinct_id_kinds_are_not_equal():
    assert VarId(0) != ExprId(0)
    assert len({VarId(0), VarId(0), ExprId(0)}) == 2


def test_multi_component_ids_unpack():
    assert tuple(ModId(1, 2)) == (1, 2)
    assert tuple(ItemId(3, 4)) == (3, 4)
    assert tuple(ItemMemberId(5, 6, 7)) == (5, 6, 7)


def test_multi_component_ids_order_lexicographically():
    ids = [ItemId(1, 0), ItemId(0, 5), ItemId(0, 1)]
    assert sorted(ids) == [ItemId(0, 1), ItemId(0, 5), ItemId(1, 0)]


def test_negative_component_is_rejected():
    with pytest.raises(ValueError):
        ModId(0, -1)


def test_non_integer_component_is_rejected():
    with pytest.raises(TypeError):
        ExprId("0")


def test_ids_are_hashable_and_usable_as_keys():
    table = {ItemId(0, 0): "f", ModId(0, 0): "my_hako"}
    assert table[ItemId(0, 0)] == "f"
    assert table[ModId(0, 0)] == "my_hako"


def test_top_level_ids_order_by_variant_then_fields():
    item = ItemId(0, 0)
    values = [
        FnArg(item, FormalArgId(1)),
        FnRet(item),
        TopLevelItemMember(ItemMemberId(0, 0, 0)),
        FnArg(item, FormalArgId(0)),
        TopLevelItem(ItemId(0, 1)),
        TopLevelItem(item),
    ]
    assert sorted(values) == [
        TopLevelItem(item),
        TopLevelItem(ItemId(0, 1)),
        TopLevelItemMember(ItemMemberId(0, 0, 0)),
        FnRet(item),
        FnArg(item, FormalArgId(0)),
        FnArg(item, FormalArgId(1)),
    ]


def test_top_level_variants_with_same_payload_differ():
    item = ItemId(0, 0)
    assert TopLevelItem(item) != FnRet(item)


def test_type_ids_order_by_variant():
    body = BodyId(0)
    values = [
        ExprTypeId(body, ExprId(0)),
        VarTypeId(body, VarId(0)),
        FormalArgTypeId(body, FormalArgId(0)),
        TopLevelTypeId(FnRet(ItemId(0, 0))),
    ]
    assert sorted(values) == list(reversed(values))


def test_type_ids_nest_top_level_ordering():
    first = TopLevelTypeId(TopLevelItem(ItemId(0, 0)))
    second = TopLevelTypeId(FnRet(ItemId(0, 0)))
    assert first < second


def test_comparison_across_families_is_unsupported():
    with pytest.raises(TypeError):
        _ = TopLevelItem(ItemId(0, 0)) < TopLevelTypeId(TopLevelItem(ItemId(0, 0)))


def test_string_forms_follow_variant_names():
    item = ItemId(0, 0)
    assert str(FnRet(item)) == f"FnRet({item!r})"
    assert str(FnArg(item, FormalArgId(1))) == f"FnArg({item!r}, {FormalArgId(1)!r})"
    assert str(TopLevelItem(item)) == repr(item)
    assert str(VarTypeId(BodyId(2), VarId(3))) == f"{BodyId(2)!r} :: {VarId(3)!r}"
    assert str(TopLevelTypeId(FnRet(item))) == str(FnRet(item))