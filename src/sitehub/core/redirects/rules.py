"""Declarative redirect rules for legacy, pre-multi-site URLs.

A rule's source is a path pattern in which ``:name`` stands for exactly one
non-empty path segment. Captured segments are substituted into the
destination wherever the same ``:name`` appears, in the path or the query.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from sitehub.core.utils.urls import get_site_url


_PLACEHOLDER = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

PERMANENT_STATUS = 301
TEMPORARY_STATUS = 302


@dataclass(frozen=True)
class RedirectRule:
    """One ``source -> destination`` entry of the redirect table."""

    source: str
    destination: str
    permanent: bool = True
    _pattern: "re.Pattern[str]" = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.source.startswith("/"):
            raise ValueError(f"Redirect source must start with '/': {self.source!r}")

        names = _PLACEHOLDER.findall(self.source)
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate placeholder in redirect source: {self.source!r}")

        unknown = set(_PLACEHOLDER.findall(self.destination)) - set(names)
        if unknown:
            raise ValueError(
                f"Redirect destination uses unknown placeholder(s) {sorted(unknown)}: "
                f"{self.destination!r}"
            )

        object.__setattr__(self, "_pattern", _compile(self.source))

    @property
    def status_code(self) -> int:
        return PERMANENT_STATUS if self.permanent else TEMPORARY_STATUS

    def match(self, path: str) -> dict[str, str] | None:
        """Return the captured segments if ``path`` matches, else None."""
        found = self._pattern.fullmatch(path)
        return found.groupdict() if found else None

    def build_destination(self, params: dict[str, str]) -> str:
        """Substitute captured segments into the destination."""

        def _replace(placeholder: "re.Match[str]") -> str:
            return quote(params[placeholder.group(1)], safe="")

        return _PLACEHOLDER.sub(_replace, self.destination)


def _compile(source: str) -> "re.Pattern[str]":
    parts: list[str] = []
    position = 0
    for placeholder in _PLACEHOLDER.finditer(source):
        parts.append(re.escape(source[position : placeholder.start()]))
        parts.append(f"(?P<{placeholder.group(1)}>[^/]+)")
        position = placeholder.end()
    parts.append(re.escape(source[position:]))
    return re.compile("".join(parts))


def default_redirect_rules(default_site_slug: str) -> list[RedirectRule]:
    """Build the legacy redirect table pointing at ``default_site_slug``.

    Old article, category and search URLs predate per-site paths and all
    belong to the default site.
    """
    site_root = get_site_url(default_site_slug)
    return [
        # Legacy article URLs
        RedirectRule("/article/:slug", f"{site_root}/:slug", permanent=True),
        RedirectRule("/articles/:slug", f"{site_root}/:slug", permanent=True),
        # Legacy category pages
        RedirectRule("/category/:slug", f"{site_root}?category=:slug", permanent=True),
        # Legacy search
        RedirectRule("/search", get_site_url(default_site_slug, "search"), permanent=True),
    ]


class RedirectRuleConfig(BaseModel):
    """A configured redirect entry, as read from settings.

    ``permanent`` goes through pydantic's bool parsing, so "false" and "0"
    mean a temporary redirect.
    """

    source: str
    destination: str
    permanent: bool = True


def rules_from_config(
    entries: Iterable[RedirectRuleConfig | Mapping[str, Any]],
) -> list[RedirectRule]:
    """Build rules from configured entries.

    Plain mappings are validated as RedirectRuleConfig first.
    """
    configs = [
        entry
        if isinstance(entry, RedirectRuleConfig)
        else RedirectRuleConfig.model_validate(entry)
        for entry in entries
    ]
    return [
        RedirectRule(
            source=config.source,
            destination=config.destination,
            permanent=config.permanent,
        )
        for config in configs
    ]
