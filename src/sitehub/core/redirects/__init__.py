"""Legacy URL redirects onto site-scoped paths."""

from sitehub.core.redirects.middleware import LegacyRedirectMiddleware
from sitehub.core.redirects.redirector import (
    LegacyRedirector,
    RedirectMatch,
    build_redirector,
)
from sitehub.core.redirects.rules import (
    RedirectRule,
    RedirectRuleConfig,
    default_redirect_rules,
    rules_from_config,
)


__all__ = [
    "LegacyRedirectMiddleware",
    "LegacyRedirector",
    "RedirectMatch",
    "RedirectRule",
    "RedirectRuleConfig",
    "build_redirector",
    "default_redirect_rules",
    "rules_from_config",
]
