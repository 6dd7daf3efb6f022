from orderpush.notifications.api.routes import router

__all__ = ["router"]
