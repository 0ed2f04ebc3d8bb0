import uuid
from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demoshop.models.base import Base, SeoMixin, TimestampMixin, UUIDMixin


class BlogCategory(UUIDMixin, TimestampMixin, SeoMixin, Base):
    __tablename__ = "blog_categories"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    posts: Mapped[list["Post"]] = relationship("Post", back_populates="category")

    def __repr__(self) -> str:
        return f"<BlogCategory id={self.id!r} slug={self.slug!r}>"


class Author(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "blog_authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    github_handle: Mapped[str | None] = mapped_column(String(255), nullable=True)
    twitter_handle: Mapped[str | None] = mapped_column(String(255), nullable=True)

    posts: Mapped[list["Post"]] = relationship("Post", back_populates="author")

    def __repr__(self) -> str:
        return f"<Author id={self.id!r} email={self.email!r}>"


class Post(UUIDMixin, TimestampMixin, SeoMixin, Base):
    __tablename__ = "blog_posts"

    blog_author_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("blog_authors.id", ondelete="CASCADE"),
        nullable=True,
    )
    blog_category_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("blog_categories.id", ondelete="SET NULL"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published_at: Mapped[date | None] = mapped_column(Date, nullable=True)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)

    author: Mapped["Author | None"] = relationship("Author", back_populates="posts")
    category: Mapped["BlogCategory | None"] = relationship("BlogCategory", back_populates="posts")

    def __repr__(self) -> str:
        return f"<Post id={self.id!r} slug={self.slug!r}>"
