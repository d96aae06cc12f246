"""Errors reported while lowering to the intermediate representation and emitting JS."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from hakohir.ids import GlobalId, HakoId, ModId


class HirLoweringError(Exception):
    """Base of the errors found while lowering syntax trees.

    ``is_syntax_error`` tells whether the error is reported as a syntax error.
    """

    is_syntax_error: ClassVar[bool] = False
    span: Any

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(eq=True)
class DuplicateMarker(HirLoweringError):
    name: str
    span: Any

    @property
    def message(self) -> str:
        return f"duplicate marker `{self.name}`"


@dataclass(eq=True)
class ExpectedExprButFoundHako(HirLoweringError):
    is_syntax_error: ClassVar[bool] = True

    hako_id: HakoId
    span: Any

    @property
    def message(self) -> str:
        return f"expected expression but found hako {self.hako_id!r}"


@dataclass(eq=True)
class ExpectedExprButFoundMod(HirLoweringError):
    is_syntax_error: ClassVar[bool] = True

    mod_id: ModId
    span: Any

    @property
    def message(self) -> str:
        return f"expected expression but found module {self.mod_id!r}"


@dataclass(eq=True)
class GlobalIdIsNotFound(HirLoweringError):
    global_id: GlobalId
    span: Any

    @property
    def message(self) -> str:
        return f"global id {self.global_id!r} is not found"


@dataclass(eq=True)
class IdIsNotFoundInScope(HirLoweringError):
    id: Any
    span: Any

    @property
    def message(self) -> str:
        return f"id `{self.id}` is not found in scope"


@dataclass(eq=True)
class PathIsNotFoundInScope(HirLoweringError):
    path: Any
    span: Any

    @property
    def message(self) -> str:
        return f"path `{self.path}` is not found in scope"


@dataclass(eq=True)
class UnnecessaryPath(HirLoweringError):
    path: Any
    span: Any

    @property
    def message(self) -> str:
        return f"unnecessary path `{self.path}`"


class JsifyError(Exception):
    """Base of the errors found while emitting JavaScript."""

    span: Any

    @property
    def message(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.message


@dataclass(eq=True)
class UnknownSysEmbedName(JsifyError):
    name: str
    span: Any

    @property
    def message(self) -> str:
        return f"unknown sysembed name `{self.name}`"