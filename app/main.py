import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from creator.adapter.input.web.creator_router import creator_router
from subscription.adapter.input.web.subscription_router import subscription_router
from config.database.session import init_db_schema

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan 훅에서 스키마를 준비합니다.
    """
    # 개발 환경 등 DB 스키마가 비어 있는 경우 UndefinedTable 오류를 예방합니다.
    if os.getenv("INIT_DB_SCHEMA", "true").lower() == "true":
        init_db_schema()
    yield


app = FastAPI(title="Creator Insight Server", version="0.1.0", lifespan=lifespan)

origins_env = os.getenv("CORS_ORIGINS")
origins = [origin for origin in origins_env.split(",") if origin] if origins_env else ["http://localhost:3000"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(creator_router, prefix="/creators")
app.include_router(subscription_router, prefix="/subscriptions")

@app.get("/health")
def health_check() -> dict[str, str]:
    """
    헬스체크 엔드포인트입니다.
    """
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("APP_HOST", "0.0.0.0")
    port = int(os.getenv("APP_PORT", "8000"))
    uvicorn.run(app, host=host, port=port)
