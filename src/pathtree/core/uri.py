from __future__ import annotations

"""
URI Formatting Adapters.

Maps filesystem paths under a document root to site-relative or absolute
URIs. All host facts come from an injected HostContext.
"""

from typing import Optional, Union

from pathtree.core.path_string import lslash
from pathtree.domain.constants import HTTPS_OFF_VALUE, HTTPS_PORT
from pathtree.domain.host_context import HostContext


def root(ctx: HostContext, relative: str) -> str:
    """Resolve ``relative`` against the context's document root."""
    return ctx.document_root + lslash(relative)


def is_https(ctx: HostContext) -> bool:
    """
    Decide whether the host serves over TLS.

    True when the HTTPS flag is set to anything but an empty value, "0"
    or "off" (case-insensitive), or when the port is 443. Flags may be
    strings or booleans and ports may be strings or integers.
    """
    flag = ctx.https
    if isinstance(flag, bool):
        flag = "on" if flag else ""
    if flag is not None and str(flag) not in ("", "0") and str(flag).lower() != HTTPS_OFF_VALUE:
        return True
    return _port_number(ctx.server_port) == HTTPS_PORT



def to_uri(ctx: HostContext, path: str = "", scheme: Optional[str] = None) -> str:
    """
    Build a URI for a filesystem path under the document root.

    Without a scheme the result is protocol-relative (``//host/...``).

    Args:
        ctx: Host context.
        path: Filesystem path (or site-relative path).
        scheme: Optional scheme such as "https".

    Returns:
        str: The formatted URI.
    """
    prefix = f"{scheme}://" if scheme else "//"
    relative = path.replace(ctx.document_root, "") if ctx.document_root else path
    return prefix + ctx.server_name + lslash(relative)


def to_url(ctx: HostContext, path: str, scheme: Optional[str] = None) -> str:
    """Like ``to_uri`` but always absolute; the scheme follows ``is_https``."""
    if not isinstance(scheme, str):
        scheme = "https" if is_https(ctx) else "http"
    return to_uri(ctx, path, scheme)


def _port_number(port: Union[int, str, None]) -> Optional[int]:
    try:
        return int(str(port).strip()) if port not in (None, "") else None
    except ValueError:
        return None
