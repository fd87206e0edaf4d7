from __future__ import annotations

"""
Host Context Value Object.

Carries the request/host facts that URI formatting needs (document root,
server name, TLS hints). Instances are passed explicitly to the URI
helpers; nothing is read from process-wide globals.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class HostContext:
    """
    Immutable description of the serving host.

    Attributes:
        document_root: Filesystem directory mapped to the URL root.
        server_name: Host name used in generated URIs.
        https: Raw HTTPS indicator ("on", "off", "1", True, ...), None if absent.
        server_port: Listening port (int or numeric string), None if unknown.
    """
    document_root: str = ""
    server_name: str = ""
    https: Union[str, bool, None] = None
    server_port: Union[int, str, None] = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> "HostContext":
        """
        Build a context from a CGI/WSGI style environment mapping.

        Reads DOCUMENT_ROOT, SERVER_NAME, HTTPS and SERVER_PORT. A port
        that is not numeric is ignored.
        """
        raw_port = environ.get("SERVER_PORT")
        try:
            port = int(raw_port) if raw_port not in (None, "") else None
        except (TypeError, ValueError):
            port = None

        https = environ.get("HTTPS")
        return cls(
            document_root=str(environ.get("DOCUMENT_ROOT", "") or ""),
            server_name=str(environ.get("SERVER_NAME", "") or ""),
            https=str(https) if https is not None else None,
            server_port=port,
        )
