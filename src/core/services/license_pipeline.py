"""License generation orchestration.

The CLI delegates the whole flow here: resolve parameters (flags, git
identity, clock), optionally ask the UI layer for missing values, fetch the
template, render it and write `LICENSE`. Prompting is injected through
`PromptHooks` so this module never imports typer or rich.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Sequence

from pydantic import ValidationError

from adapters import git_identity
from adapters.license_writer import write_license
from core.config import DEFAULT_LICENSE_KEY, FALLBACK_AUTHOR
from core.domain.errors import ConfigError
from core.domain.models import LicenseSummary, LicenseText, RunParameters
from core.interfaces.registry import LicenseRegistry
from core.services.template_renderer import render_template

logger = logging.getLogger(__name__)

IdentityLookup = Callable[[], str | None]


@dataclass
class LicenseRequest:
    """Raw flag values; None (or blank) means "not supplied"."""

    author: str | None = None
    year: str | None = None
    license_key: str | None = None


@dataclass
class PromptHooks:
    """Callbacks the interactive flow uses to ask the user.

    Each hook may raise `InteractionCancelled`.
    """

    select_license: Callable[[Sequence[LicenseSummary]], str]
    ask_author: Callable[[str], str]
    ask_year: Callable[[str], str]


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    parameters: RunParameters
    license: LicenseText
    output_path: Path


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def current_year(today: date | None = None) -> str:
    return str((today or date.today()).year)


def lookup_author(identity_lookup: IdentityLookup | None = None) -> str | None:
    lookup = identity_lookup or git_identity.read_git_user_name
    return _clean(lookup())


def build_parameters(license_key: str | None, author: str | None, year: str | None) -> RunParameters:
    try:
        return RunParameters(license_key=license_key or "", author=author or "", year=year or "")
    except ValidationError as exc:
        missing = ", ".join(str(err["loc"][0]) for err in exc.errors())
        raise ConfigError(f"Missing required value(s): {missing}") from exc


def resolve_direct_parameters(
    request: LicenseRequest,
    *,
    identity_lookup: IdentityLookup | None = None,
    today: date | None = None,
) -> RunParameters:
    """Resolve flags for direct mode.

    License key defaults to "mit", author falls back to the git identity and
    raises `ConfigError` when neither is available, year defaults to the
    current calendar year.
    """

    license_key = _clean(request.license_key) or DEFAULT_LICENSE_KEY
    author = _clean(request.author) or lookup_author(identity_lookup)
    if author is None:
        raise ConfigError("Author name not found. Please provide via --author or configure git.")
    year = _clean(request.year) or current_year(today)
    return build_parameters(license_key, author, year)


async def resolve_interactive_parameters(
    request: LicenseRequest,
    registry: LicenseRegistry,
    hooks: PromptHooks,
    *,
    identity_lookup: IdentityLookup | None = None,
    today: date | None = None,
) -> RunParameters:
    """Fill every value missing from `request` by prompting, in order.

    The license list is only fetched when a selection prompt is needed.
    """

    license_key = _clean(request.license_key)
    if license_key is None:
        licenses = await registry.list_licenses()
        license_key = _clean(hooks.select_license(licenses))

    author = _clean(request.author)
    if author is None:
        default_author = lookup_author(identity_lookup) or FALLBACK_AUTHOR
        author = _clean(hooks.ask_author(default_author))

    year = _clean(request.year)
    if year is None:
        year = _clean(hooks.ask_year(current_year(today)))

    return build_parameters(license_key, author, year)


async def generate_license(
    parameters: RunParameters,
    registry: LicenseRegistry,
    *,
    output_dir: Path | None = None,
) -> PipelineResult:
    """Fetch, render and write; the write is the last step."""

    license_text = await registry.fetch_license(parameters.license_key)
    rendered = render_template(license_text.body, parameters.year, parameters.author)
    output_path = write_license(rendered, output_dir)
    logger.debug("generated %s license at %s", parameters.license_key, output_path)
    return PipelineResult(parameters=parameters, license=license_text, output_path=output_path)


async def run_direct(
    request: LicenseRequest,
    registry: LicenseRegistry,
    *,
    output_dir: Path | None = None,
    identity_lookup: IdentityLookup | None = None,
    today: date | None = None,
) -> PipelineResult:
    parameters = resolve_direct_parameters(request, identity_lookup=identity_lookup, today=today)
    return await generate_license(parameters, registry, output_dir=output_dir)


async def run_interactive(
    request: LicenseRequest,
    registry: LicenseRegistry,
    hooks: PromptHooks,
    *,
    output_dir: Path | None = None,
    identity_lookup: IdentityLookup | None = None,
    today: date | None = None,
) -> PipelineResult:
    parameters = await resolve_interactive_parameters(
        request,
        registry,
        hooks,
        identity_lookup=identity_lookup,
        today=today,
    )
    return await generate_license(parameters, registry, output_dir=output_dir)
