from fastapi.middleware.cors import CORSMiddleware

from wishlist.config import settings


def configure_cors(app):
    origins = settings.cors_origins or ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )
