"""
Pytest configuration and shared fixtures.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator

import pytest


FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5)


MODELS_GO = """package models

import "time"

// Address is a postal address.
type Address struct {
    Street  string `json:"street"`
    ZipCode string `json:"zip_code,omitempty"`
}

// User is an account.
type User struct {
    ID        int64      `json:"id" binding:"required"`
    Name      string     `json:"name"` // display name
    Email     *string    `json:"email"`
    Tags      []string   `json:"tags"`
    Friends   []*User    `json:"friends"`
    CreatedAt time.Time  `json:"created_at"`
    Profile   FileHeader `json:"profile"`
    secret    string
}

type IDs []*User

type (
    // Status of an order.
    Status string

    Index map[int]*Address
)

type userCache struct {
    entries map[string]User
}
"""


HANDLERS_GO = """package handlers

// CreateUserRequest is the body of user creation.
type CreateUserRequest struct {
    UserName string `json:"user_name" binding:"required,min=3"`
    Age      *int   `form:"age" json:"age,omitempty"`
}

// UserResponse is returned by user endpoints.
type UserResponse struct {
    ID   int64  `json:"id"`
    Name string `json:"name"`
}

// CreateUser godoc
// @Summary Create user
// @Param user body CreateUserRequest true "User data"
// @Success 201 {object} UserResponse
// @Router /users [post]
func CreateUser() {}

// GetUser godoc
// @Success 200 {object} UserResponse
// @Router /users/{id} [get]
func GetUser() {}

// ListUsers godoc
// @Success 200 {array} []UserResponse
// @Router /users [get]
func ListUsers() {}
"""


BROKEN_GO = """package models

type Broken struct {
    Name string
"""


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo handler and level changes made by configure_logging."""
    root_logger = logging.getLogger()
    package_logger = logging.getLogger("go_ts_generator")
    handlers = list(root_logger.handlers)
    root_level = root_logger.level
    package_level = package_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(root_level)
    package_logger.setLevel(package_level)


@pytest.fixture
def models_go() -> str:
    """Go source of plain model types."""
    return MODELS_GO


@pytest.fixture
def handlers_go() -> str:
    """Go source of annotated handlers and their API types."""
    return HANDLERS_GO


@pytest.fixture
def broken_go() -> str:
    """Go source with a syntax error."""
    return BROKEN_GO


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """A clock that always returns the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def write_go() -> Callable[[Path, str], Path]:
    """Write Go source to a file, creating parent directories."""
    def _write(path: Path, source: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def models_root(tmp_path: Path, write_go: Callable[[Path, str], Path]) -> Path:
    """A source root holding plain model types."""
    root = tmp_path / "models"
    write_go(root / "user.go", MODELS_GO)
    return root


@pytest.fixture
def handlers_root(tmp_path: Path, write_go: Callable[[Path, str], Path]) -> Path:
    """A source root holding annotated handlers and their API types."""
    root = tmp_path / "handlers"
    write_go(root / "user_handler.go", HANDLERS_GO)
    return root
