# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for sorted help output and optional-value flags."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Final, TypeVar

import typer
from click.core import Context, Parameter
from click.formatting import HelpFormatter
from typer.core import TyperCommand, TyperGroup

ARGUMENT_PARAM_TYPE: Final[str] = "argument"
OPTION_TERMINATOR: Final[str] = "--"
BOOLEAN_TOKENS: Final[frozenset[str]] = frozenset({"true", "false", "yes", "no", "on", "off", "1", "0"})


class SortedTyperCommand(TyperCommand):
    """Typer command that renders options in sorted order within help output."""

    def format_options(
        self,
        ctx: Context,
        formatter: HelpFormatter,
    ) -> None:
        """Render positional arguments and sorted options within CLI help.

        Args:
            ctx: Click context describing the application invocation.
            formatter: Click help formatter used to emit definition lists.
        """

        argument_records: list[tuple[str, str]] = []
        option_entries: list[tuple[tuple[str, int], tuple[str, str]]] = []

        for index, param in enumerate(self.get_params(ctx)):
            record = param.get_help_record(ctx)
            if record is None:
                continue
            if getattr(param, "param_type_name", "") == ARGUMENT_PARAM_TYPE:
                argument_records.append(record)
                continue
            option_entries.append(((_primary_option_name(param), index), record))

        if argument_records:
            with formatter.section("Arguments"):
                formatter.write_dl(argument_records)

        if option_entries:
            sorted_entries = sorted(option_entries, key=lambda item: item[0])
            with formatter.section("Options"):
                formatter.write_dl([entry for _, entry in sorted_entries])


class OptionalValueCommand(SortedTyperCommand):
    """Command whose listed options accept an optional boolean value.

    Click options either always or never take a value. Subclasses list option
    names in :attr:`optional_value_flags`; a bare occurrence is rewritten to
    ``--flag=true`` unless the next token is a boolean literal, so
    ``--git``, ``--git true`` and ``--git=false`` are all accepted.
    """

    optional_value_flags: ClassVar[frozenset[str]] = frozenset()
    implicit_value: ClassVar[str] = "true"

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        """Normalise optional-value flags before Click parses ``args``."""

        return super().parse_args(ctx, self.normalize_args(args))

    @classmethod
    def normalize_args(cls, args: list[str]) -> list[str]:
        """Return ``args`` with bare optional-value flags given an explicit value.

        Args:
            args: Raw command-line tokens.

        Returns:
            list[str]: Tokens safe for Click's parser.
        """

        normalized: list[str] = []
        index = 0
        while index < len(args):
            token = args[index]
            if token == OPTION_TERMINATOR:
                normalized.extend(args[index:])
                break
            if token in cls.optional_value_flags:
                following = args[index + 1] if index + 1 < len(args) else None
                if following is None or following.lower() not in BOOLEAN_TOKENS:
                    token = f"{token}={cls.implicit_value}"
            normalized.append(token)
            index += 1
        return normalized


class GitFlagCommand(OptionalValueCommand):
    """Command accepting ``--git`` with an optional ``true``/``false`` value."""

    optional_value_flags: ClassVar[frozenset[str]] = frozenset({"--git"})


class SortedTyperGroup(TyperGroup):
    """Typer group that defaults to using :class:`SortedTyperCommand`."""

    command_class = SortedTyperCommand


CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


class SortedTyper(typer.Typer):
    """Typer application that emits sorted option listings by default."""

    def __init__(self, *args: Any, cls: type[TyperGroup] | None = None, **kwargs: Any) -> None:
        """Initialise the Typer application with sorted help semantics.

        Args:
            *args: Positional arguments forwarded to :class:`typer.Typer`.
            cls: Optional group class to override the default sorted group.
            **kwargs: Keyword arguments forwarded to :class:`typer.Typer`.
        """

        super().__init__(*args, cls=cls or SortedTyperGroup, **kwargs)

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator that registers commands using sorted help output.

        Args:
            name: Optional explicit command name.
            cls: Command class to instantiate; defaults to
                :class:`SortedTyperCommand` when ``None``.
            **kwargs: Additional keyword arguments forwarded to
                :meth:`typer.Typer.command`.

        Returns:
            Callable[[CommandCallback], CommandCallback]: Registration decorator.
        """

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` configured to emit sorted help listings."""

    return SortedTyper(cls=cls, **kwargs)


def _primary_option_name(param: Parameter) -> str:
    """Return the canonical name used for sorting a Click parameter."""

    option_names: Iterable[str] = tuple(getattr(param, "opts", ())) + tuple(getattr(param, "secondary_opts", ()))
    long_names = [name for name in option_names if name.startswith("--")]
    candidate = long_names[0] if long_names else (next(iter(option_names), "") or param.name or "")
    return candidate.lstrip("-").lower()


__all__ = [
    "BOOLEAN_TOKENS",
    "GitFlagCommand",
    "OptionalValueCommand",
    "SortedTyper",
    "SortedTyperCommand",
    "SortedTyperGroup",
    "create_typer",
]
