"""
FastAPI demo app: sign in with WeGene using WegeneStrategy.

Decisions:
- .env is loaded before building the strategy so WEGENE_* and SESSION_SECRET
  are available (Ruff E402 suppressed for that).
- Authlib keeps the OAuth state in request.session, so SessionMiddleware is required.
- The verify callback only echoes the profile; a real app would find or create
  its own user record here.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before reading WEGENE_*; Ruff E402.
from authlib.integrations.starlette_client import OAuthError  # noqa: E402

from wegene_auth import InternalOAuthError, WegeneStrategy, config_from_env  # noqa: E402

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


async def verify(access_token, refresh_token, profile):
    """Map the WeGene profile to an application user (here: the profile itself)."""
    return profile.as_dict()


strategy = WegeneStrategy(config_from_env(), verify)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}


@app.get("/login")
async def login(request: Request):
    """Redirect the user to WeGene; falls back to our own callback route if WEGENE_CALLBACK_URL is unset."""
    redirect_uri = strategy.config.callback_url or request.url_for("auth_callback")
    return await strategy.login_redirect(request, redirect_uri)


@app.get("/auth/wegene/callback", name="auth_callback")
async def auth_callback(request: Request):
    """Handle OAuth callback: exchange code, fetch profile, store user, redirect to /me."""
    try:
        user, _profile = await strategy.handle_callback(request)
    except OAuthError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    except InternalOAuthError as e:
        return JSONResponse({"error": str(e)}, status_code=502)

    if not user:
        return JSONResponse({"error": "access denied"}, status_code=403)
    request.session["user"] = user
    return RedirectResponse(url="/me")


@app.get("/me")
async def me(request: Request):
    """Return current user; redirect to /login if not authenticated."""
    if "user" not in request.session:
        return RedirectResponse(url="/login")
    return {"user": request.session["user"]}


@app.get("/logout")
async def logout(request: Request):
    """Clear session and redirect to home."""
    request.session.clear()
    return RedirectResponse(url="/")
