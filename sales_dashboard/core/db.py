from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sales_dashboard.core.config import settings

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    # registers the models on Base.metadata
    import sales_dashboard.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
