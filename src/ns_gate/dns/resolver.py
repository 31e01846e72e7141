"""DNS resolution utilities."""

import dns.asyncquery
import dns.exception
import dns.message
import dns.rdatatype

from ns_gate.utils.exceptions import DNSLookupError

# Anything that can go wrong between building the query and parsing the reply
LOOKUP_ERRORS = (
    dns.exception.DNSException,
    OSError,
    ValueError,
)


async def query_ns(
    domain: str,
    server: str,
    port: int = 53,
    timeout: float = 2.0,
) -> list[str]:
    """
    Send one NS query for a domain to a single resolver.

    Returns the lowercased NS targets from the answer section. The response
    code is not inspected, so NXDOMAIN yields an empty list.
    Raises DNSLookupError on any transport or protocol failure.
    """
    try:
        query = dns.message.make_query(domain, dns.rdatatype.NS)
        response, _ = await dns.asyncquery.udp_with_fallback(
            query, server, timeout=timeout, port=port
        )
    except LOOKUP_ERRORS as e:
        raise DNSLookupError(f"NS lookup for {domain} via {server} failed: {e}") from e

    targets: list[str] = []

    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.NS:
            continue
        for rdata in rrset:
            targets.append(rdata.target.to_text().lower())

    return targets
