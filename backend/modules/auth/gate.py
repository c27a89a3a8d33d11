"""
Authorization gate.

Turns the credential-bearing header of an inbound request into an
allow/deny decision. The gate has no state and does no I/O, so it is safe
to run on every request.
"""

import logging
from typing import Mapping, Optional

from .models import GateDecision, GateFailure
from .tokens import TokenService

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_HEADER = "Authorization"


def find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup that works for plain dicts too."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


class AuthorizationGate:
    """
    Decides whether a request carries a valid token.

    The header value is expected as `<scheme> <token>`. The scheme label is
    not checked unless `scheme` is given.

    Args:
        tokens: Verifier used for the token segment
        header_name: Header that carries the credential
        scheme: Required scheme label (case-insensitive), or None to accept any
    """

    def __init__(
        self,
        tokens: TokenService,
        header_name: str = DEFAULT_TOKEN_HEADER,
        scheme: Optional[str] = None,
    ) -> None:
        self._tokens = tokens
        self._header_name = header_name or DEFAULT_TOKEN_HEADER
        self._scheme = scheme

    @property
    def header_name(self) -> str:
        return self._header_name

    def inspect(self, headers: Mapping[str, str]) -> GateDecision:
        """Decide on a request, keeping the reason for a denial."""
        value = find_header(headers, self._header_name)
        if value is None:
            return self._deny(GateFailure.MISSING_HEADER)

        parts = value.split()
        if len(parts) < 2:
            return self._deny(GateFailure.MALFORMED_HEADER)

        scheme, token = parts[0], parts[1]
        if self._scheme and scheme.lower() != self._scheme.lower():
            return self._deny(GateFailure.WRONG_SCHEME)

        check = self._tokens.check(token)
        if not check.valid:
            return self._deny(GateFailure.INVALID_TOKEN, check.reason)

        return GateDecision(allowed=True, claims=check.claims)

    def authorize(self, headers: Mapping[str, str]) -> bool:
        """Boolean projection of `inspect`."""
        return self.inspect(headers).allowed

    def _deny(self, reason: GateFailure, token_failure=None) -> GateDecision:
        logger.debug("Request denied: %s", reason.value)
        return GateDecision(allowed=False, reason=reason, token_failure=token_failure)
