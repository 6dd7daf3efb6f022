"""Order push FastAPI application.

Receives order events from the store app and fans push notifications out to
admins, store owners and customers.

Usage:
    uvicorn orderpush.app:app --host 0.0.0.0 --port 3000
"""

from collections.abc import Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import firebase_admin
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from firebase_admin import credentials, firestore

from orderpush.config import Settings
from orderpush.errors import ConfigurationError, OrderPushError
from orderpush.notifications.api import router as notify_router
from orderpush.notifications.api.schemas import HealthResponse
from orderpush.notifications.channel.expo import ExpoGateway
from orderpush.notifications.channel.fcm import FcmGateway
from orderpush.notifications.channel.push_port import ExpoPushPort, FcmPushPort
from orderpush.notifications.notification.dispatch import PushDispatcher
from orderpush.notifications.notification.notifier import OrderNotifier
from orderpush.notifications.recipient.resolver import RecipientResolver
from orderpush.store.firestore_store import FirestoreStore
from orderpush.store.port import DocumentStorePort
from orderpush.utils.logging import add_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)

FIREBASE_APP_NAME = "orderpush"


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------
@dataclass
class Services:
    """Process-lifetime collaborators, built once at startup."""

    store: DocumentStorePort
    resolver: RecipientResolver
    dispatcher: PushDispatcher
    notifier: OrderNotifier
    closers: list[Callable[[], None]] = field(default_factory=list)

    def close(self) -> None:
        for closer in reversed(self.closers):
            try:
                closer()
            except Exception:
                logger.exception("Failed to release service resource")
        self.closers.clear()


def build_services(
    settings: Settings,
    store: DocumentStorePort,
    expo: ExpoPushPort,
    fcm: FcmPushPort,
) -> Services:
    """Wire resolver, dispatcher and notifier around the given adapters."""
    resolver = RecipientResolver(store)
    dispatcher = PushDispatcher(expo, fcm, sound=settings.expo_sound)
    notifier = OrderNotifier(
        resolver,
        dispatcher,
        default_delivery_fee=settings.default_delivery_fee,
        currency=settings.currency_symbol,
    )
    return Services(store=store, resolver=resolver, dispatcher=dispatcher, notifier=notifier)


def build_firebase_services(settings: Settings) -> Services:
    """Build services backed by Firestore, Expo and FCM.

    Raises:
        ConfigurationError: the service account is missing or malformed
    """
    service_account = settings.load_service_account()
    try:
        credential = credentials.Certificate(service_account)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid Firebase service account: {exc}") from exc

    firebase_app = firebase_admin.initialize_app(credential, name=FIREBASE_APP_NAME)
    store = FirestoreStore(
        firestore.client(app=firebase_app),
        orders_collection=settings.orders_collection,
        tokens_collection=settings.tokens_collection,
    )
    expo = ExpoGateway()
    fcm = FcmGateway(
        firebase_app,
        android_priority=settings.fcm_android_priority,
        android_channel_id=settings.fcm_android_channel_id,
    )

    services = build_services(settings, store, expo, fcm)
    services.closers.append(lambda: firebase_admin.delete_app(firebase_app))
    services.closers.append(expo.close)
    logger.info("Firebase services initialised", project_id=service_account.get("project_id"))
    return services


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings)

    if app.state.services is None:
        app.state.services = build_firebase_services(settings)

    yield

    app.state.services.close()


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------
async def service_error_handler(_request: Request, exc: OrderPushError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"ok": False, "error": exc.message})


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return JSONResponse(status_code=400, content={"ok": False, "error": f"invalid request body: {detail}"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(status_code=500, content={"ok": False, "error": str(exc) or type(exc).__name__})


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    """Create the API.

    ``services`` is built from Firebase credentials at startup unless one is
    passed in (tests, local development).
    """
    app = FastAPI(
        title="Order Push",
        description="Push notifications for store order events",
        lifespan=lifespan,
    )
    app.state.settings = settings or Settings()
    app.state.services = services

    @app.middleware("http")
    async def log_context_middleware(request: Request, call_next):
        """Bind the request path into every log line of the request.

        Unexpected errors are rendered here, inside the CORS layer, so 500
        responses carry the CORS headers too.
        """
        clear_context()
        add_context(request_path=request.url.path)
        try:
            return await call_next(request)
        except Exception as exc:
            return await unhandled_error_handler(request, exc)

    # Added last so it wraps the middleware above.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(OrderPushError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(notify_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse()

    return app


app = create_app()
