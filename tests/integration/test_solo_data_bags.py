"""Integration tests for solo-mode data bags on a real filesystem."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from core.config import BagkitConfig
from core.errors import DataBagNameFormatError, InvalidDataBagPathError
from core.types import Mode
from databag.client import DataBagClient


def _solo_client(*roots: Path) -> DataBagClient:
    config = BagkitConfig(
        mode=Mode.SOLO,
        data_bag_paths=roots,
        server_url="https://unused.example.com",
        dry_run=False,
    )
    return DataBagClient(config)


def _write_item(root: Path, bag_name: str, item: dict[str, str]) -> None:
    bag_dir = root / bag_name
    bag_dir.mkdir(parents=True, exist_ok=True)
    (bag_dir / f"{item['id']}.json").write_text(json.dumps(item), encoding="utf-8")


def test_solo_load_merges_roots_in_order(tmp_path: Path) -> None:
    """Items from the later root should replace same-id items."""
    first_root = tmp_path / "data_bags"
    second_root = tmp_path / "data_bags_2"
    _write_item(first_root, "users", {"id": "bob", "shell": "/bin/sh"})
    _write_item(first_root, "users", {"id": "john", "shell": "/bin/zsh"})
    _write_item(second_root, "users", {"id": "bob", "shell": "/bin/bash"})

    items = _solo_client(first_root, second_root).load("users")

    assert items == {
        "bob": {"id": "bob", "shell": "/bin/bash"},
        "john": {"id": "john", "shell": "/bin/zsh"},
    }


def test_solo_load_ignores_non_json_files(tmp_path: Path) -> None:
    """Only .json files directly in the bag directory are items."""
    _write_item(tmp_path, "users", {"id": "bob"})
    (tmp_path / "users" / "README.md").write_text("notes", encoding="utf-8")

    assert _solo_client(tmp_path).load("users") == {"bob": {"id": "bob"}}


def test_solo_load_missing_bag_returns_empty(tmp_path: Path) -> None:
    """An absent bag directory is not an error."""
    assert _solo_client(tmp_path).load("missing") == {}


def test_solo_load_rejects_wildcard_names(tmp_path: Path) -> None:
    """A wildcard bag name should not match other bags."""
    _write_item(tmp_path, "users", {"id": "bob"})

    with pytest.raises(DataBagNameFormatError):
        _solo_client(tmp_path).load("*")


@pytest.mark.parametrize("name", ["..", ".", "../secrets", "users/../.."])
def test_solo_load_rejects_names_escaping_the_root(tmp_path: Path, name: str) -> None:
    """Relative path names must not read items outside the data bag root."""
    (tmp_path / "secret.json").write_text(json.dumps({"id": "secret"}), encoding="utf-8")
    data_root = tmp_path / "data_bags"
    _write_item(data_root, "users", {"id": "bob"})

    with pytest.raises(DataBagNameFormatError):
        _solo_client(data_root).load(name)


def test_solo_list_and_inflate(tmp_path: Path) -> None:
    """Listing should see every bag directory and inflate their items."""
    _write_item(tmp_path, "users", {"id": "bob"})
    _write_item(tmp_path, "secrets", {"id": "db"})
    client = _solo_client(tmp_path)

    assert client.list() == {"secrets": "secrets", "users": "users"}
    assert client.list(inflate=True) == {
        "secrets": {"db": {"id": "db"}},
        "users": {"bob": {"id": "bob"}},
    }


def test_solo_load_raises_for_file_root(tmp_path: Path) -> None:
    """A root that is a regular file should be reported as invalid."""
    file_root = tmp_path / "not_a_dir"
    file_root.write_text("", encoding="utf-8")

    with pytest.raises(InvalidDataBagPathError, match=re.escape(str(file_root))):
        _solo_client(file_root).load("users")
