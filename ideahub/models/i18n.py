"""Translation and list-of-values models."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ideahub.database import Base


class Translation(Base):
    """UI string in both languages, keyed by interface and position."""

    __tablename__ = "translations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    interface_name: Mapped[str] = mapped_column(String(100), nullable=False)
    position_key: Mapped[str] = mapped_column(String(100), nullable=False)
    english_text: Mapped[str] = mapped_column(Text, nullable=False)
    arabic_text: Mapped[str] = mapped_column(Text, nullable=False)


class ListOfValue(Base):
    """Dropdown option for a named list (departments, categories, ...)."""

    __tablename__ = "list_of_values"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    list_key: Mapped[str] = mapped_column(String(100), nullable=False)
    value_key: Mapped[str] = mapped_column(String(100), nullable=False)
    value_en: Mapped[str] = mapped_column(Text, nullable=False)
    value_ar: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=True)
