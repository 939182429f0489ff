"""First-match-wins evaluation of the legacy redirect table."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sitehub.core.redirects.rules import (
    RedirectRule,
    RedirectRuleConfig,
    default_redirect_rules,
    rules_from_config,
)
from sitehub.core.utils.urls import is_site_scoped_path


@dataclass(frozen=True)
class RedirectMatch:
    """Where to send a request, and with which status."""

    location: str
    status_code: int
    rule: RedirectRule

    @property
    def permanent(self) -> bool:
        return self.rule.permanent


class LegacyRedirector:
    """Rewrites legacy URL shapes onto site-scoped ones.

    Rules are tried in table order and the first match wins. Paths that
    already live under ``/site/`` are never rewritten.
    """

    def __init__(self, rules: Iterable[RedirectRule]) -> None:
        self.rules: tuple[RedirectRule, ...] = tuple(rules)

    def match(self, path: str, query: str = "") -> RedirectMatch | None:
        """Find the redirect for a request path.

        Args:
            path: Request path, e.g. "/article/foo"
            query: Raw query string of the request, carried over to the target

        Returns:
            The first matching redirect, or None
        """
        if is_site_scoped_path(path):
            return None

        normalized = _normalize(path)
        for rule in self.rules:
            params = rule.match(normalized)
            if params is None:
                continue
            location = _merge_query(rule.build_destination(params), query)
            return RedirectMatch(location=location, status_code=rule.status_code, rule=rule)

        return None


def _normalize(path: str) -> str:
    # "/article/foo/" and "/article/foo" are the same legacy URL
    if len(path) > 1 and path.endswith("/"):
        return path.rstrip("/") or "/"
    return path


def _merge_query(location: str, query: str) -> str:
    """Append the request's query parameters to ``location``.

    Parameters already set by the destination win over the request's.
    """
    if not query:
        return location

    parts = urlsplit(location)
    target_params = parse_qsl(parts.query, keep_blank_values=True)
    taken = {key for key, _ in target_params}
    extra = [
        (key, value)
        for key, value in parse_qsl(query, keep_blank_values=True)
        if key not in taken
    ]
    if not extra:
        return location

    return urlunsplit(parts._replace(query=urlencode(target_params + extra)))


def build_redirector(
    default_site_slug: str,
    rules_config: Sequence[RedirectRuleConfig | Mapping[str, Any]] | None = None,
) -> LegacyRedirector:
    """Build the redirector from configuration.

    A non-empty ``rules_config`` replaces the default table entirely.
    """
    if rules_config:
        return LegacyRedirector(rules_from_config(rules_config))
    return LegacyRedirector(default_redirect_rules(default_site_slug))
