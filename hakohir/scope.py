"""Lexical scopes used while lowering function bodies."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from hakohir.ids import ExprId, FormalArgId, LocalId, VarId
from hakohir.model import FormalArgDef, VarDef

LocalDef = Union[FormalArgDef, VarDef]


class ScopeError(RuntimeError):
    """Raised when scopes are entered, left or queried out of order."""


class LocalScope:
    """A block-level scope holding variable names in declaration order."""

    def __init__(self) -> None:
        self._vars: List[Tuple[str, VarId]] = []

    def declare_var(self, name: str, var_id: VarId) -> None:
        self._vars.append((name, var_id))

    def resolve_var(self, name: str) -> Optional[VarId]:
        """Return the most recent variable declared under ``name``."""
        return next((var_id for each, var_id in reversed(self._vars) if each == name), None)


class BodyScope:
    """The scope of one function body: its arguments, variables and expression ids."""

    def __init__(self) -> None:
        self._args: List[FormalArgDef] = []
        self._arg_ids: Dict[str, FormalArgId] = {}
        self._vars: List[VarDef] = []
        self._scopes: List[LocalScope] = [LocalScope()]
        self._next_expr_id = 0

    @property
    def args(self) -> List[FormalArgDef]:
        return self._args

    @property
    def vars(self) -> List[VarDef]:
        return self._vars

    def exit(self) -> Tuple[List[FormalArgDef], List[VarDef]]:
        """Hand over the declared arguments and variables."""
        return self._args, self._vars

    def current_scope(self) -> LocalScope:
        if not self._scopes:
            raise ScopeError("could not get current local scope")
        return self._scopes[-1]

    def enter_scope(self) -> None:
        self._scopes.append(LocalScope())

    def leave_scope(self) -> None:
        if not self._scopes:
            raise ScopeError("could not leave local scope")
        self._scopes.pop()

    def declare(self, name: str, local_def: LocalDef) -> LocalId:
        if isinstance(local_def, FormalArgDef):
            arg_id = FormalArgId(len(self._args))
            self._args.append(local_def)
            self._arg_ids[name] = arg_id
            return arg_id
        if isinstance(local_def, VarDef):
            var_id = VarId(len(self._vars))
            self.current_scope().declare_var(name, var_id)
            self._vars.append(local_def)
            return var_id
        raise TypeError(f"cannot declare {local_def!r}")

    def resolve(self, name: str) -> Optional[LocalId]:
        """Resolve ``name``, preferring formal arguments over variables."""
        arg_id = self.resolve_arg(name)
        if arg_id is not None:
            return arg_id
        return self.resolve_var(name)

    def resolve_arg(self, name: str) -> Optional[FormalArgId]:
        return self._arg_ids.get(name)

    def resolve_var(self, name: str) -> Optional[VarId]:
        for scope in reversed(self._scopes):
            var_id = scope.resolve_var(name)
            if var_id is not None:
                return var_id
        return None

    def generate_expr_id(self) -> ExprId:
        expr_id = ExprId(self._next_expr_id)
        self._next_expr_id += 1
        return expr_id


class BodyScopeHierarchy:
    """A stack of body scopes, innermost last."""

    def __init__(self) -> None:
        self._scopes: List[BodyScope] = []

    def current_scope(self) -> BodyScope:
        if not self._scopes:
            raise ScopeError("could not get current body scope")
        return self._scopes[-1]

    def enter_scope(self) -> None:
        self._scopes.append(BodyScope())

    def leave_scope(self) -> Tuple[List[FormalArgDef], List[VarDef]]:
        if not self._scopes:
            raise ScopeError("could not leave body scope")
        return self._scopes.pop().exit()

    def declare(self, name: str, local_def: LocalDef) -> LocalId:
        return self.current_scope().declare(name, local_def)

    def resolve(self, name: str) -> Optional[LocalId]:
        return self._search(lambda scope: scope.resolve(name))

    def resolve_arg(self, name: str) -> Optional[FormalArgId]:
        return self._search(lambda scope: scope.resolve_arg(name))

    def resolve_var(self, name: str) -> Optional[VarId]:
        return self._search(lambda scope: scope.resolve_var(name))

    def generate_expr_id(self) -> ExprId:
        return self.current_scope().generate_expr_id()

    def _search(self, lookup):
        for scope in reversed(self._scopes):
            found = lookup(scope)
            if found is not None:
                return found
        return None