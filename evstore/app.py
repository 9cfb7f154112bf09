from __future__ import annotations

import logging
import os
import time

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events, get_filter_counts, record_event, track_preferences
from .auth.dependencies import get_current_user, login_session, require_admin, require_user
from .auth.models import AuthResponse, LoginRequest, SignupRequest
from .auth.users import EmailAlreadyRegistered, authenticate, create_user, find_user
from .catalog.models import Catalog
from .orders.models import OrderListResponse, OrderRequest, OrderResponse
from .orders.store import create_order, get_orders
from .recommendations.config import DEFAULT_RECOMMENDATION_CONFIG
from .recommendations.data_store import get_catalog
from .recommendations.history import get_history, save_recommendation
from .recommendations.models import (
    HistoryResponse,
    RecommendationResponse,
    RecommendRequest,
    VehicleOut,
)
from .recommendations.preferences import InvalidPreferenceError, normalize_preferences
from .recommendations.ranking import present_vehicle, recommend

logger = logging.getLogger(__name__)

app = FastAPI(title="EV Store API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "evstore-secret-change-in-production"),
    max_age=24 * 60 * 60,
)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/vehicles", response_model=list[VehicleOut])
def vehicles(catalog: Catalog = Depends(get_catalog)) -> list[VehicleOut]:
    return [present_vehicle(v) for v in catalog]


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/signup", response_model=AuthResponse, status_code=201)
def signup(body: SignupRequest, request: Request) -> AuthResponse:
    try:
        user = create_user(body.name, body.email, body.password)
    except EmailAlreadyRegistered:
        raise HTTPException(status_code=409, detail="Email already registered") from None
    login_session(request, user)
    logger.info("New account %s", user["email"])
    return AuthResponse(message="Account created successfully", user=user)


@app.post("/auth/login", response_model=AuthResponse)
def login(body: LoginRequest, request: Request) -> AuthResponse:
    if find_user(body.email) is None:
        raise HTTPException(status_code=404, detail="Account not found. Please sign up first.")
    user = authenticate(body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Incorrect password")
    login_session(request, user)
    return AuthResponse(message="Login successful", user=user)


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"success": True, "message": "Logged out successfully"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Recommendations ──────────────────────────────────────────────────────


@app.post("/recommend", response_model=RecommendationResponse)
def recommend_vehicles(
    body: RecommendRequest,
    catalog: Catalog = Depends(get_catalog),
    user: dict | None = Depends(get_current_user),
) -> RecommendationResponse:
    start_time = time.time()

    try:
        prefs = normalize_preferences(body.preferences)
    except InvalidPreferenceError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None

    items = recommend(catalog, prefs, limit=DEFAULT_RECOMMENDATION_CONFIG.top_n)

    # Analytics must never cost the shopper their results
    try:
        track_preferences(prefs)
        record_event("recommend", {
            "user_id": user["id"] if user else None,
            "vehicles": [i.name for i in items],
            "response_time_ms": round((time.time() - start_time) * 1000, 1),
        })
    except Exception:
        logger.exception("Analytics tracking failed")

    if user:
        save_recommendation(user["id"], prefs, items)

    return RecommendationResponse(recommendations=items)


@app.get("/recommend/history", response_model=HistoryResponse)
def recommendation_history(user: dict = Depends(require_user)) -> HistoryResponse:
    history = get_history(user["id"], limit=DEFAULT_RECOMMENDATION_CONFIG.history_limit)
    return HistoryResponse(history=history)


# ── Orders ───────────────────────────────────────────────────────────────


@app.post("/orders", response_model=OrderResponse, status_code=201)
def place_order(body: OrderRequest, user: dict = Depends(require_user)) -> OrderResponse:
    order = create_order(user["id"], body)
    logger.info("Order %s placed for %s", order.orderNumber, order.vehicleName)
    return OrderResponse(message="Order placed successfully", order=order)


@app.get("/orders", response_model=OrderListResponse)
def list_orders(user: dict = Depends(require_user)) -> OrderListResponse:
    orders = get_orders(user["id"])
    return OrderListResponse(orders=orders, count=len(orders))


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/analytics")
def analytics(user: dict = Depends(require_admin)) -> dict:
    return compute_analytics(get_filter_counts(), get_events())
