# topmark:header:start
#
#   project      : Goldie
#   file         : templating.py
#   file_relpath : src/goldie/templating.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Render golden files as Jinja2 templates.

Templated goldens hold the stable part of an output verbatim and placeholders
(``{{ version }}``, ``{{ tmpdir }}``) for the parts that vary between runs. The
environment is strict: a placeholder missing from the context is an error, not
an empty string.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from goldie.config.logging import GoldieLogger, get_logger

logger: GoldieLogger = get_logger(__name__)


class RenderError(Exception):
    """The template could not be compiled or rendered."""


def _make_environment() -> Environment:
    # Golden files are plain text: no HTML escaping, keep the final newline.
    return Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


_ENV: Environment = _make_environment()


def context_to_mapping(context: object) -> Mapping[str, Any]:
    """Coerce a render context into a mapping of template variables.

    Accepts mappings, dataclass instances, pydantic-style models (``model_dump()``)
    and plain objects with a ``__dict__``.

    Args:
        context (object): The caller-supplied context.

    Returns:
        Mapping[str, Any]: Top-level template variables.

    Raises:
        RenderError: If the context cannot be turned into a mapping.
    """
    if isinstance(context, Mapping):
        return context
    if dataclasses.is_dataclass(context) and not isinstance(context, type):
        # Shallow on purpose: nested objects stay attribute-accessible.
        return {f.name: getattr(context, f.name) for f in dataclasses.fields(context)}
    model_dump = getattr(context, "model_dump", None)
    if callable(model_dump):
        dumped = model_dump()
        if isinstance(dumped, Mapping):
            return dumped
    if hasattr(context, "__dict__") and not isinstance(context, type):
        return vars(context)
    raise RenderError(
        f"render context must be a mapping or an object with attributes, "
        f"got {type(context).__name__}"
    )


def render(template_source: str, context: object) -> str:
    """Render ``template_source`` with the variables in ``context``.

    Args:
        template_source (str): Jinja2 template text.
        context (object): Mapping or attribute-bearing object; see
            [`context_to_mapping`][goldie.templating.context_to_mapping].

    Returns:
        str: The rendered text.

    Raises:
        RenderError: On template syntax errors, undefined variables, or any other
            error raised while building the context or rendering (e.g. a
            ``ZeroDivisionError`` from an expression). The original exception is chained.
    """
    try:
        variables: Mapping[str, Any] = context_to_mapping(context)
        logger.trace("render context: %r", variables)
        template = _ENV.from_string(template_source)
        return template.render(variables)
    except TemplateError as exc:
        location: str = ""
        lineno: int | None = getattr(exc, "lineno", None)
        if lineno is not None:
            location = f" (line {lineno})"
        raise RenderError(f"{type(exc).__name__}{location}: {exc}") from exc
    except RenderError:
        raise
    except Exception as exc:  # errors raised by expressions or by the context itself
        raise RenderError(f"{type(exc).__name__}: {exc}") from exc
