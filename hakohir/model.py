"""Data structures of the high-level intermediate representation and its input tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from hakohir.ids import (
    BodyId,
    HakoId,
    ItemId,
    LocalId,
    ModId,
    TopLevelId,
    VarId,
)


@dataclass
class MarkerInfo:
    """Information collected from the markers attached to an item."""

    sys_embed: Optional[str] = None
    spec_description: Optional[str] = None
    arg_descriptions: Dict[str, str] = field(default_factory=dict)
    ret_val_description: Optional[str] = None
    todos: List[str] = field(default_factory=list)
    exits: bool = False


@dataclass
class ItemTypeKind:
    """A type that names an item."""

    item_id: ItemId


@dataclass
class PrimTypeKind:
    """A primitive type."""

    prim: Any


TypeKind = Union[ItemTypeKind, PrimTypeKind]


@dataclass
class Type:
    """A type annotation."""

    kind: TypeKind


@dataclass
class Expr:
    """An expression with its body-local identifier."""

    id: Any
    kind: "ExprKind"


@dataclass
class UnaryOperation:
    operator: Any
    term: Expr


@dataclass
class BinaryOperation:
    operator: Any
    left_term: Expr
    right_term: Expr


@dataclass
class Block:
    exprs: List[Expr] = field(default_factory=list)


@dataclass
class LiteralExpr:
    literal: Any


@dataclass
class TopLevelRef:
    """A reference to a top-level entity, with the path used to reach it."""

    top_level_id: TopLevelId
    path: Any


@dataclass
class LocalRef:
    local_id: LocalId


@dataclass
class Ret:
    value: Expr


@dataclass
class ActualArg:
    expr: Expr


@dataclass
class FnCall:
    """A call; ``fn`` is the resolved callee and its path, if any."""

    fn: Optional[Tuple[ItemId, Any]]
    args: List[ActualArg] = field(default_factory=list)


@dataclass
class VarDefRef:
    """An expression that defines the variable with the given identifier."""

    var_id: VarId


@dataclass
class VarBind:
    var_id: VarId
    value: Expr


@dataclass
class Elif:
    cond: Expr
    block: Block


@dataclass
class If:
    cond: Expr
    block: Block
    elifs: List[Elif] = field(default_factory=list)
    else_: Optional[Block] = None


@dataclass
class EndlessFor:
    """A loop without a condition."""


@dataclass
class CondFor:
    cond: Expr


@dataclass
class RangeFor:
    index: Expr
    range: Expr


ForKind = Union[EndlessFor, CondFor, RangeFor]


@dataclass
class For:
    kind: ForKind
    block: Block


@dataclass
class MarkerExpr:
    marker: Any


@dataclass
class UnknownExpr:
    """An expression that could not be resolved."""


ExprKind = Union[
    UnaryOperation,
    BinaryOperation,
    Block,
    LiteralExpr,
    TopLevelRef,
    LocalRef,
    Ret,
    FnCall,
    VarDefRef,
    VarBind,
    If,
    For,
    MarkerExpr,
    UnknownExpr,
]


@dataclass
class FormalArgDef:
    id: Any
    ref_mut: Any
    type: Type


@dataclass
class VarDef:
    id: Any
    ref_mut: Any
    type: Optional[Type] = None
    init: Optional[Expr] = None


LocalDef = Union[FormalArgDef, VarDef]


@dataclass
class Body:
    id: BodyId
    ret_type: Optional[Type] = None
    args: List[FormalArgDef] = field(default_factory=list)
    vars: List[VarDef] = field(default_factory=list)
    exprs: List[Expr] = field(default_factory=list)


@dataclass
class FnDecl:
    body: Body


ItemKind = FnDecl


@dataclass
class Item:
    id: ItemId
    mod_id: ModId
    marker: MarkerInfo
    accessibility: Any
    kind: ItemKind


@dataclass
class Hir:
    """Lowered items keyed by path, plus every todo marker found."""

    items: Dict[Any, Item] = field(default_factory=dict)
    todos: List[Tuple[str, Any]] = field(default_factory=list)


@dataclass
class InputMod:
    id: ModId
    path: Any
    source: str
    submods: List["InputMod"] = field(default_factory=list)


@dataclass
class InputHako:
    id: HakoId
    name: str
    mods: List[InputMod] = field(default_factory=list)


@dataclass
class InputTree:
    hakos: List[InputHako]
    main_hako_name: str