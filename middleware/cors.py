import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
DEFAULT_ORIGINS = "http://localhost:3000"
def setup_cors(app: FastAPI) -> None:
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=3600,
    )
