"""Library catalog models.

A Book records its own author and genre. Authors and genres do not list
their books; the Catalog answers those questions by scanning its books.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True, order=True)
class Genre:
    name: str


@dataclass(frozen=True, order=True)
class Author:
    name: str


@dataclass
class Book:
    """A book with its author, genre and publishing date."""

    title: str
    author: Author
    genre: Genre | None = None
    publishing_date: date | None = None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "title": self.title,
            "author": self.author.name,
            "genre": self.genre.name if self.genre else None,
            "publishing_date": (
                self.publishing_date.isoformat() if self.publishing_date else None
            ),
        }


@dataclass
class Catalog:
    """A named library holding a collection of books."""

    library_name: str
    books: list[Book] = field(default_factory=list)

    def __post_init__(self) -> None:
        initial, self.books = self.books, []
        for book in initial:
            self.add_book(book)

    def add_book(self, book: Book) -> None:
        """Add a book to the catalog.

        Raises:
            ValueError: If a book with the same title and author is present.
        """
        for existing in self.books:
            if existing.title == book.title and existing.author == book.author:
                raise ValueError(
                    f"{book.title!r} by {book.author.name!r} is already in "
                    f"{self.library_name!r}"
                )
        self.books.append(book)

    def books_by(self, author: Author) -> list[Book]:
        return [book for book in self.books if book.author == author]

    def books_in(self, genre: Genre) -> list[Book]:
        return [book for book in self.books if book.genre == genre]

    def authors(self) -> list[Author]:
        """Distinct authors, sorted by name."""
        return sorted({book.author for book in self.books})

    def genres(self) -> list[Genre]:
        """Distinct genres, sorted by name. Books without a genre are skipped."""
        return sorted({book.genre for book in self.books if book.genre})

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "library_name": self.library_name,
            "books": [book.to_dict() for book in self.books],
        }
