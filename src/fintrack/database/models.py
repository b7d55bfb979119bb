"""SQLAlchemy models for fintrack database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Enum,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from fintrack.domain.entities import (
    DEFAULT_CURRENCY,
    BudgetPeriod,
    Category as CategoryEnum,
    TransactionKind,
)

Base = declarative_base()


def _enum_values(enum_cls) -> list[str]:
    # Persist the lower-case values ("income") rather than member names.
    return [member.value for member in enum_cls]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Owner(Base):
    """Owner profile model."""

    __tablename__ = "owners"

    id = Column(String, primary_key=True)
    email = Column(String, nullable=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    profile_image_url = Column(String, nullable=True)
    default_currency = Column(String(3), default=DEFAULT_CURRENCY, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)


class Transaction(Base):
    """Income or expense entry model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)
    kind = Column(
        Enum(TransactionKind, name="transaction_kind", values_callable=_enum_values),
        nullable=False,
    )
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(
        Enum(CategoryEnum, name="category", values_callable=_enum_values),
        nullable=False,
    )
    date = Column(Date, nullable=False, index=True)
    currency_code = Column(String(3), default=DEFAULT_CURRENCY, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)


class Budget(Base):
    """Category budget model.

    (owner_id, category) is intentionally not unique.
    """

    __tablename__ = "budgets"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(
        Enum(CategoryEnum, name="category", values_callable=_enum_values),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    period = Column(
        Enum(BudgetPeriod, name="budget_period", values_callable=_enum_values),
        default=BudgetPeriod.MONTHLY,
        nullable=False,
    )
    currency_code = Column(String(3), default=DEFAULT_CURRENCY, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)


class Goal(Base):
    """Savings goal model."""

    __tablename__ = "goals"

    id = Column(Integer, primary_key=True)
    owner_id = Column(String, ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    target_amount = Column(Numeric(12, 2), nullable=False)
    current_amount = Column(Numeric(12, 2), default=0, nullable=False)
    target_date = Column(Date, nullable=True)
    currency_code = Column(String(3), default=DEFAULT_CURRENCY, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine_kwargs = {}
    if database_url.startswith("sqlite"):
        # Sessions are opened per call and may come from any thread.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    engine = create_engine(database_url, echo=False, **engine_kwargs)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
