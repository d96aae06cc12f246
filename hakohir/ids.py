"""Identifiers used throughout the high-level intermediate representation."""

from __future__ import annotations

import operator
from dataclasses import dataclass, fields
from typing import Any, Callable, ClassVar, Tuple, Union


def _check_index(*values: int) -> None:
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"identifier components must be integers, got {value!r}")
        if value < 0:
            raise ValueError(f"identifier components must be non-negative, got {value}")


@dataclass(frozen=True, order=True)
class _NumId:
    id: int

    def __post_init__(self) -> None:
        _check_index(self.id)

    def __int__(self) -> int:
        return self.id


class HakoId(_NumId):
    """Identifies a hako (a package of modules)."""


class BodyId(_NumId):
    """Identifies a function body."""


class VarId(_NumId):
    """Identifies a local variable within a body."""


class FormalArgId(_NumId):
    """Identifies a formal argument within a body."""


class ExprId(_NumId):
    """Identifies an expression within a body."""


@dataclass(frozen=True, order=True)
class ModId:
    """Identifies a module inside a hako."""

    hako_id: int
    mod_id: int

    def __post_init__(self) -> None:
        _check_index(self.hako_id, self.mod_id)

    def __iter__(self):
        yield self.hako_id
        yield self.mod_id


@dataclass(frozen=True, order=True)
class ItemId:
    """Identifies an item inside a hako."""

    hako_id: int
    item_id: int

    def __post_init__(self) -> None:
        _check_index(self.hako_id, self.item_id)

    def __iter__(self):
        yield self.hako_id
        yield self.item_id


@dataclass(frozen=True, order=True)
class ItemMemberId:
    """Identifies a member of an item."""

    hako_id: int
    item_id: int
    member_id: int

    def __post_init__(self) -> None:
        _check_index(self.hako_id, self.item_id, self.member_id)

    def __iter__(self):
        yield self.hako_id
        yield self.item_id
        yield self.member_id


class _Variant:
    """Ordering shared by the variants of one identifier family.

    Variants order first by their declaration rank, then by their fields.
    """

    _family: ClassVar[str]
    _rank: ClassVar[int]

    def _sort_key(self) -> Tuple[Any, ...]:
        return (self._rank, *(getattr(self, f.name) for f in fields(self)))

    def _compare(self, other: object, op: Callable[[Any, Any], bool]) -> Any:
        if not isinstance(other, _Variant) or other._family != self._family:
            return NotImplemented
        return op(self._sort_key(), other._sort_key())

    def __lt__(self, other: object) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: object) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: object) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: object) -> Any:
        return self._compare(other, operator.ge)


@dataclass(frozen=True, eq=True)
class TopLevelItem(_Variant):
    """A top-level reference to an item."""

    _family: ClassVar[str] = "top_level"
    _rank: ClassVar[int] = 0

    item_id: ItemId

    def __str__(self) -> str:
        return repr(self.item_id)


@dataclass(frozen=True, eq=True)
class TopLevelItemMember(_Variant):
    """A top-level reference to an item member."""

    _family: ClassVar[str] = "top_level"
    _rank: ClassVar[int] = 1

    item_member_id: ItemMemberId

    def __str__(self) -> str:
        return repr(self.item_member_id)


@dataclass(frozen=True, eq=True)
class FnRet(_Variant):
    """The return value of a function item."""

    _family: ClassVar[str] = "top_level"
    _rank: ClassVar[int] = 2

    item_id: ItemId

    def __str__(self) -> str:
        return f"FnRet({self.item_id!r})"


@dataclass(frozen=True, eq=True)
class FnArg(_Variant):
    """A formal argument of a function item."""

    _family: ClassVar[str] = "top_level"
    _rank: ClassVar[int] = 3

    item_id: ItemId
    formal_arg_id: FormalArgId

    def __str__(self) -> str:
        return f"FnArg({self.item_id!r}, {self.formal_arg_id!r})"


@dataclass(frozen=True, eq=True)
class TopLevelTypeId(_Variant):
    """Type slot of a top-level entity."""

    _family: ClassVar[str] = "type"
    _rank: ClassVar[int] = 0

    top_level_id: "TopLevelId"

    def __str__(self) -> str:
        return str(self.top_level_id)


@dataclass(frozen=True, eq=True)
class FormalArgTypeId(_Variant):
    """Type slot of a formal argument in a body."""

    _family: ClassVar[str] = "type"
    _rank: ClassVar[int] = 1

    body_id: BodyId
    formal_arg_id: FormalArgId

    def __str__(self) -> str:
        return f"{self.body_id!r} :: {self.formal_arg_id!r}"


@dataclass(frozen=True, eq=True)
class VarTypeId(_Variant):
    """Type slot of a local variable in a body."""

    _family: ClassVar[str] = "type"
    _rank: ClassVar[int] = 2

    body_id: BodyId
    var_id: VarId

    def __str__(self) -> str:
        return f"{self.body_id!r} :: {self.var_id!r}"


@dataclass(frozen=True, eq=True)
class ExprTypeId(_Variant):
    """Type slot of an expression in a body."""

    _family: ClassVar[str] = "type"
    _rank: ClassVar[int] = 3

    body_id: BodyId
    expr_id: ExprId

    def __str__(self) -> str:
        return f"{self.body_id!r} :: {self.expr_id!r}"


GlobalId = Union[HakoId, ModId, ItemId, ItemMemberId]
TopLevelId = Union[TopLevelItem, TopLevelItemMember, FnRet, FnArg]
LocalId = Union[FormalArgId, VarId]
TypeId = Union[TopLevelTypeId, FormalArgTypeId, VarTypeId, ExprTypeId]