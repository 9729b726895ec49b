"""Bearer token authentication middleware.

Establishes the caller's identity for every request and stores it as an
immutable Principal on ``request.state.principal``. The middleware never
rejects a request: a missing, malformed, forged or expired token yields
an anonymous principal, and routes or the authorization middleware
decide whether anonymous access is acceptable.
"""

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from myhome.application.context import Principal
from myhome_auth import InvalidTokenError, JWTCodec

logger = logging.getLogger(__name__)


class RequestAuthenticationMiddleware(BaseHTTPMiddleware):
    """Decode the bearer token and attach the resulting Principal.

    Parameters
    ----------
    app
        The wrapped ASGI application
    jwt_codec
        Codec used to verify the bearer token
    secret
        HMAC signing secret
    header_name
        Request header carrying the token (``Authorization`` by default)
    header_prefix
        Scheme prefix stripped before decoding (``"Bearer "`` by default)
    """

    def __init__(  # noqa: PLR0913
        self,
        app: ASGIApp,
        jwt_codec: JWTCodec,
        secret: str,
        header_name: str = "Authorization",
        header_prefix: str = "Bearer ",
    ):
        super().__init__(app)
        self._jwt_codec = jwt_codec
        self._secret = secret
        self._header_name = header_name
        self._header_prefix = header_prefix

    def _authenticate(self, request: Request) -> Principal:
        header = request.headers.get(self._header_name)
        if not header or not header.startswith(self._header_prefix):
            return Principal.anonymous()

        token = header[len(self._header_prefix) :].strip()
        try:
            claim = self._jwt_codec.decode(token, self._secret)
        except InvalidTokenError as e:
            logger.debug("Ignoring bearer token on %s: %s", request.url.path, e)
            return Principal.anonymous()

        if not claim.user_id:
            return Principal.anonymous()
        return Principal.authenticated(claim.user_id)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.principal = self._authenticate(request)
        return await call_next(request)
