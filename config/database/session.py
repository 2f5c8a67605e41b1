import os
import urllib.parse

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import RequestSettings

load_dotenv()

# Uses SQL_* env vars provided (e.g., Supabase): SQL_USER, SQL_PASSWORD, SQL_HOST, SQL_PORT, SQL_DATABASE
# 한국어 주석: 수집 파이프라인이 채워 둔 PostgreSQL(Supabase)을 읽기 전용으로 조회합니다.
password = urllib.parse.quote_plus(os.getenv("SQL_PASSWORD", ""))

DATABASE_URL = os.getenv("DATABASE_URL") or (
    f"postgresql+psycopg2://{os.getenv('SQL_USER','postgres')}:{password}"
    f"@{os.getenv('SQL_HOST','localhost')}:{os.getenv('SQL_PORT','5432')}/{os.getenv('SQL_DATABASE','creator_insight')}"
)


def build_connect_args(database_url: str, statement_timeout_seconds: float) -> dict:
    """
    PostgreSQL 연결에 statement_timeout을 건다.
    asyncio 취소는 to_thread로 실행 중인 쿼리를 멈추지 못하므로,
    요청 타임아웃이 지난 뒤에도 남아 있는 쿼리는 DB 쪽에서 같은 시간으로 끊는다.
    """
    if make_url(database_url).get_backend_name() != "postgresql":
        return {}
    timeout_ms = max(int(statement_timeout_seconds * 1000), 1)
    return {"options": f"-c statement_timeout={timeout_ms}"}


engine = create_engine(
    DATABASE_URL,
    echo=os.getenv("SQL_ECHO", "false").lower() == "true",
    pool_pre_ping=True,
    connect_args=build_connect_args(DATABASE_URL, RequestSettings().creator_timeout_seconds),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db_schema():
    """
    애플리케이션 기동 시 테이블이 없을 경우를 대비해 스키마를 생성합니다.
    """
    # 모든 ORM 모델을 메타데이터에 등록한 뒤 생성해야 테이블이 빠지지 않는다.
    import creator.infrastructure.orm.models  # noqa: F401
    import subscription.infrastructure.orm.subscription_orm  # noqa: F401

    Base.metadata.create_all(bind=engine)
