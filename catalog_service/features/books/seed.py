"""Initial catalog contents."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog_service.features.books.repository import BookRepository

if TYPE_CHECKING:
    from catalog_service.core.settings import PaginationSettings

# Seeded in id order; find_all_authors() lists them the same way.
AUTHORS: tuple[str, ...] = (
    "Nate Schutta",
    "Dan Vega",
    # Core Java
    "Joshua Bloch",
    "Herbert Schildt",
    "Raoul-Gabriel Urma",
    "Brian Goetz",
    # Spring Framework
    "Craig Walls",
    "Greg Turnquist",
    "Mark Heckler",
    "Thomas Vitale",
    "Josh Long",
    # Spring ecosystem
    "Dinesh Rajput",
    "John Carnell",
    "Laurentiu Spilca",
    "Petri Kainulainen",
    # Architecture & design
    "Rod Johnson",
    "Martin Fowler",
    "Neal Ford",
    # Modern Java
    "Ken Kousen",
    "Dmitry Jemerov",
    "Venkat Subramaniam",
    # Testing & practices
    "Petar Tahchiev",
    "Robert C. Martin",
    "Andrew Hunt",
)

# (title, author name, published year)
BOOKS: tuple[tuple[str, str, int], ...] = (
    ("Effective Java", "Joshua Bloch", 2017),
    ("Java: The Complete Reference", "Herbert Schildt", 2021),
    ("Modern Java in Action", "Raoul-Gabriel Urma", 2018),
    ("Java Concurrency in Practice", "Brian Goetz", 2006),
    ("Spring in Action", "Craig Walls", 2020),
    ("Spring Boot in Action", "Craig Walls", 2015),
    ("Learning Spring Boot 3.0", "Greg Turnquist", 2022),
    ("Spring Boot: Up and Running", "Mark Heckler", 2021),
    ("Cloud Native Spring in Action", "Thomas Vitale", 2021),
    ("Reactive Spring", "Josh Long", 2020),
    ("Building Microservices with Spring Boot", "Dinesh Rajput", 2020),
    ("Spring Microservices in Action", "John Carnell", 2021),
    ("Spring Security in Action", "Laurentiu Spilca", 2020),
    ("Spring Data JPA", "Petri Kainulainen", 2019),
    ("Expert One-on-One J2EE Design and Development", "Rod Johnson", 2002),
    ("Patterns of Enterprise Application Architecture", "Martin Fowler", 2002),
    ("Refactoring", "Martin Fowler", 2019),
    ("Building Evolutionary Architectures", "Neal Ford", 2017),
    ("Modern Java Recipes", "Ken Kousen", 2017),
    ("Kotlin in Action", "Dmitry Jemerov", 2017),
    ("Java 8 in Action", "Raoul-Gabriel Urma", 2014),
    ("Functional Programming in Java", "Venkat Subramaniam", 2014),
    ("JUnit in Action", "Petar Tahchiev", 2020),
    ("Clean Code", "Robert C. Martin", 2008),
    ("The Pragmatic Programmer", "Andrew Hunt", 2019),
)


def seed_catalog(repository: BookRepository) -> BookRepository:
    """Load the default authors and books into ``repository``.

    Authors get ids 1..24 and books ids 1..25 when the repository is empty.
    """
    for name in AUTHORS:
        repository.create_author(name)
    for title, author_name, year in BOOKS:
        repository.create_book(title, author_name, year)
    return repository


def create_seeded_repository(settings: PaginationSettings | None = None) -> BookRepository:
    return seed_catalog(BookRepository(settings=settings))
