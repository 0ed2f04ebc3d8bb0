from pathlib import Path

from demoshop.services.storage import delete_directory


def test_delete_directory_removes_tree(storage_root: Path) -> None:
    assert delete_directory(storage_root, "public") is True
    assert not (storage_root / "public").exists()
    assert storage_root.exists()


def test_delete_directory_leaves_siblings(storage_root: Path) -> None:
    private = storage_root / "private"
    private.mkdir()
    (private / "invoice.pdf").write_bytes(b"%PDF")

    delete_directory(storage_root, "public")

    assert (private / "invoice.pdf").exists()


def test_delete_missing_directory_is_a_no_op(tmp_path: Path) -> None:
    assert delete_directory(tmp_path, "public") is False
