from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.database import SessionLocal
from app.common.error_handlers import register_error_handlers
from app.services.database_service import initialize_database
from app.api.v1 import auth, businesses, business_accounts, documents, objects, system
from app.logger_config import add_file_handler, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.LOG_TO_FILE:
        add_file_handler(settings.LOG_DIR)

    db = SessionLocal()
    try:
        initialize_database(db)
    finally:
        db.close()

    logger.info(f"Server running at: {settings.LOCAL_URL}")
    yield


app = FastAPI(title="Business Records", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Register API routers
app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
app.include_router(
    businesses.router, prefix="/api/businesses", tags=["businesses"])
app.include_router(
    business_accounts.router, prefix="/api/businesses", tags=["business accounts"])
app.include_router(documents.router, prefix="/api", tags=["documents"])
app.include_router(objects.router, prefix="/api", tags=["objects"])
app.include_router(system.router, prefix="/api", tags=["system"])
app.include_router(objects.files_router, tags=["objects"])


@app.get("/")
def read_root():
    return {"message": "Welcome to the Business Records APIs!"}
