"""
Pytest configuration for modelgen.

Provides fixtures for:
- Parsed model specs shared across emitter tests
- Scratch Dart and Rust project trees under ``tmp_path``
"""

from __future__ import annotations

from pathlib import Path

import pytest

from modelgen.codegen import ModelSpec, build_model_spec

LIB_RS = """\
pub mod dao;
pub mod models;
pub mod account_dao;
pub mod schema;
"""

DAO_RS = """\
//! Data access objects

pub use crate::account_dao::AccountDao;
"""


@pytest.fixture
def todo_spec() -> ModelSpec:
    return build_model_spec("Todo", ["title:z", "done:b"])


@pytest.fixture
def rich_spec() -> ModelSpec:
    """One field of every interesting shape."""
    return build_model_spec(
        "Blog Post",
        "id:id,title:z,published:b,created_at:dt,views:i64,rating:d,tags:z[],scores:i[]",
    )


@pytest.fixture
def rust_project(tmp_path: Path) -> Path:
    """A minimal Cargo crate with DAO registry files."""
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "server"\n', encoding="utf-8")
    src = tmp_path / "src"
    src.mkdir()
    (src / "lib.rs").write_text(LIB_RS, encoding="utf-8")
    (src / "dao.rs").write_text(DAO_RS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def dart_project(tmp_path: Path) -> Path:
    """A minimal Flutter project root."""
    (tmp_path / "pubspec.yaml").write_text("name: app\n", encoding="utf-8")
    return tmp_path
