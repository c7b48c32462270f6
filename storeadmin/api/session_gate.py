import logging
from typing import Sequence

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware

from storeadmin.core.security import read_session
from storeadmin.db.queries import DataAccessError, get_user_by_email


logger = logging.getLogger(__name__)

PROTECTED_PREFIXES = ("/dashboard", "/settings", "/products", "/orders", "/customers")


class SessionGateMiddleware(BaseHTTPMiddleware):
    """
    Gate for the dashboard pages.
    No session -> login page. Signed in but no user row for the email ->
    settings page, where the user picks a store. Requests already bound for
    the settings page are let through so the redirect cannot loop.
    """

    def __init__(
        self,
        app,
        protected_prefixes: Sequence[str] = PROTECTED_PREFIXES,
        login_path: str = "/login",
        settings_path: str = "/settings",
    ):
        super().__init__(app)
        self.protected_prefixes = tuple(protected_prefixes)
        self.login_path = login_path
        self.settings_path = settings_path

    def is_protected(self, path: str) -> bool:
        return any(path == prefix or path.startswith(prefix + "/") for prefix in self.protected_prefixes)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not self.is_protected(path):
            return await call_next(request)

        session = read_session(request)
        if session is None:
            return RedirectResponse(url=self.login_path, status_code=307)

        if session.email and not path.startswith(self.settings_path):
            try:
                registered = await run_in_threadpool(_is_registered, request, session.email)
            except DataAccessError:
                return JSONResponse({"error": "Failed to look up user"}, status_code=500)
            if not registered:
                logger.info(f"No user row for {session.email}, redirecting to {self.settings_path}")
                return RedirectResponse(url=self.settings_path, status_code=307)

        return await call_next(request)


def _is_registered(request: Request, email: str) -> bool:
    db = request.app.state.session_factory()
    try:
        return get_user_by_email(db, email) is not None
    finally:
        db.close()
