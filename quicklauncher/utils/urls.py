"""
URL normalization before handing a URL to the OS default handler.
"""

import re

from quicklauncher.utils.classifier import BARE_DOMAIN_RE

# any scheme prefix: http:, https://, mailto:, tel:, myapp://
SCHEME_RE = re.compile(r"[a-z][a-z0-9+.-]*:", re.IGNORECASE)


def has_scheme(raw: str) -> bool:
    # "example.com:8080" is a host and port, not the scheme "example.com"
    return bool(SCHEME_RE.match(raw)) and not BARE_DOMAIN_RE.fullmatch(raw)


def normalize_url(raw: str) -> str:
    """Prepend https:// to bare domains; leave anything with a scheme untouched."""
    if has_scheme(raw):
        return raw
    if BARE_DOMAIN_RE.fullmatch(raw):
        return f"https://{raw}"
    return raw
