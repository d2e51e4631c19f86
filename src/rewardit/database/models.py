"""SQLAlchemy models for rewardit database."""

from datetime import datetime, UTC
from sqlalchemy import Column, Integer, String, DateTime, Date, Numeric, Index, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Transaction(Base):
    """Customer purchase model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    customer_name = Column(String, nullable=False)
    # casefolded customer_name, used for case-insensitive matching
    customer_key = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_transactions_date", "date"),
        Index("ix_transactions_customer_key", "customer_key"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
