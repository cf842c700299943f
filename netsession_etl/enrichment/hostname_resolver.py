"""Device hostname resolution.

The default resolver only splits what the host identifier already carries;
callers with a DNS or inventory source pass their own callable with the same
signature to :class:`netsession_etl.pipeline.NetworkSessionParser`.
"""

import ipaddress
from typing import Callable, Dict, Optional

HostnameResolver = Callable[[str], Dict[str, Optional[str]]]


def resolve_dvc_fqdn(host: str) -> Dict[str, Optional[str]]:
    """Split a device identifier into hostname, domain and FQDN fields.

    Args:
        host: Host identifier of the raw record (hostname, FQDN or IP).

    Returns:
        Dict with ``DvcHostname``, ``DvcDomain``, ``DvcDomainType`` and
        ``DvcFQDN``.
    """
    host = (host or "").strip()
    resolved = {
        "DvcHostname": host or None,
        "DvcDomain": None,
        "DvcDomainType": None,
        "DvcFQDN": None,
    }
    if not host or _is_ip(host) or "." not in host:
        return resolved

    hostname, domain = host.split(".", 1)
    resolved.update(
        DvcHostname=hostname,
        DvcDomain=domain,
        DvcDomainType="FQDN",
        DvcFQDN=host,
    )
    return resolved


def _is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
