# hakohir

Building blocks for the high-level intermediate representation (HIR) of the
Hako language compiler. The package has four modules:

- `hakohir.ids`
- `hakohir.model`
- `hakohir.scope`
- `hakohir.diagnostics`

## `hakohir.ids`

This module holds the identifiers. All of them are frozen dataclasses, so they
are hashable and can be compared.

- **Single-number ids.** `HakoId`, `BodyId`, `VarId`, `FormalArgId` and
  `ExprId` each hold one `id`. `int()` turns one of them into its number.
- **Multi-part ids.** `ModId(hako_id, mod_id)`, `ItemId(hako_id, item_id)` and
  `ItemMemberId(hako_id, item_id, member_id)` hold several parts. You can
  unpack them into their parts, for example `hako, item = ItemId(0, 3)`.
- **Validation.** Every id part must be a non-negative `int`. A `bool` or
  another type raises `TypeError`. A negative number raises `ValueError`.

### Top-level ids

The top-level ids are `TopLevelItem`, `TopLevelItemMember`, `FnRet` and
`FnArg`. The type ids are `TopLevelTypeId`, `FormalArgTypeId`, `VarTypeId` and
`ExprTypeId`.

Within each of these two families, ids are ordered first by variant, in the
order listed above, and then by their fields. Each of these ids has a short
`str()` form. For example, `str(FnRet(ItemId(0, 0)))` gives
`"FnRet(ItemId(hako_id=0, item_id=0))"`.

### Union aliases

The module also defines these aliases: `GlobalId`, `TopLevelId`, `LocalId`
and `TypeId`.

## `hakohir.model`

This module holds the HIR tree as mutable dataclasses.

- **`Hir`** maps item paths to `Item`s. It also collects `(description, span)`
  todo entries.
- **`Item`** carries its `ItemId`, its `ModId`, a `MarkerInfo`, an
  accessibility and a `FnDecl`. The `FnDecl` wraps a `Body`.
- **`Body`** holds its `BodyId`, an optional return `Type`, its
  `FormalArgDef`s and `VarDef`s, and its `Expr`s.
- **`Expr`** pairs an `ExprId` with one of these kinds:
  - `UnaryOperation`
  - `BinaryOperation`
  - `Block`
  - `LiteralExpr`
  - `TopLevelRef`
  - `LocalRef`
  - `Ret`
  - `FnCall`
  - `VarDefRef`
  - `VarBind`
  - `If`
  - `For`
  - `MarkerExpr`
  - `UnknownExpr`
- **Loops.** `For` takes an `EndlessFor`, a `CondFor` or a `RangeFor`.
- **Types.** `Type` wraps an `ItemTypeKind` or a `PrimTypeKind`.
- **Input tree.** `InputTree`, `InputHako` and `InputMod` describe the hakos
  and modules that are handed to the compiler.

## `hakohir.scope`

This module resolves local names inside function bodies.

### `BodyScopeHierarchy`

A `BodyScopeHierarchy` is a stack of `BodyScope`s.

- **Entering and leaving.** `enter_scope()` opens a new body scope.
  `leave_scope()` closes it and returns its `(args, vars)`.
- **Declaring.** `declare(name, local_def)` accepts a `FormalArgDef` or a
  `VarDef`. It returns a `FormalArgId` or a `VarId`, numbered in declaration
  order.
- **Resolving.** `resolve`, `resolve_arg` and `resolve_var` search from the
  innermost body scope outwards. Within one body scope, formal arguments win
  over variables.
- **Expression ids.** `generate_expr_id()` hands out `ExprId`s in sequence
  for the current body scope.

### `BodyScope` and `LocalScope`

A `BodyScope` keeps a stack of `LocalScope`s for nested blocks. You manage
that stack with its own `enter_scope()` and `leave_scope()`. A newly declared
variable shadows an earlier variable with the same name.

### Errors

The module raises `ScopeError` in two cases:

- when a scope is used or left while none is open;
- when something other than a `FormalArgDef` or `VarDef` is declared, which
  raises `TypeError`.

## `hakohir.diagnostics`

This module holds the diagnostics as exception classes. Each diagnostic has a
`span` and a `message`, and `str()` of a diagnostic gives its `message`.

### Lowering diagnostics

`HirLoweringError` is the base class. Its variants are:

- `DuplicateMarker`
- `ExpectedExprButFoundHako`
- `ExpectedExprButFoundMod`
- `GlobalIdIsNotFound`
- `IdIsNotFoundInScope`
- `PathIsNotFoundInScope`
- `UnnecessaryPath`

The class attribute `is_syntax_error` is `True` only for the two
`ExpectedExprButFound*` variants.

### JavaScript diagnostics

`JsifyError` is the base class for the JavaScript emitter. Its one variant is
`UnknownSysEmbedName`.

## What this package does not do

This package only provides the data structures, scopes and diagnostics used by
a compiler. It has:

- no lexer;
- no parser;
- no pass that lowers syntax trees to the HIR;
- no type resolver;
- no JavaScript emitter;
- no command-line program.

Fields such as spans, paths, literals, operators and accessibility are
accepted as opaque values.

## Example

```python
from hakohir.ids import ExprId, VarId
from hakohir.model import VarDef
from hakohir.scope import BodyScopeHierarchy

scopes = BodyScopeHierarchy()
scopes.enter_scope()
var = scopes.declare("local", VarDef(id="local", ref_mut=None))
assert var == VarId(0)
assert scopes.resolve("local") == VarId(0)
assert scopes.generate_expr_id() == ExprId(0)
args, variables = scopes.leave_scope()
assert args == [] and len(variables) == 1
```

## Installation and tests

```
pip install ".[test]"
pytest
```