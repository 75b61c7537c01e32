"""Fixtures partagées."""
import pytest

from page_studio import BLOCK_KINDS, Document, IdFactory, create_block, insert


@pytest.fixture
def ids():
    return IdFactory(prefix="t")


@pytest.fixture
def starter():
    """[navigation "nav-init", hero "hero-init"]"""
    return Document(blocks=(
        create_block("navigation", id_factory=lambda: "nav-init"),
        create_block("hero", id_factory=lambda: "hero-init"),
    ))


@pytest.fixture
def every_kind(ids):
    """Un bloc de chaque type, dans l'ordre du catalogue."""
    doc = Document()
    for kind in BLOCK_KINDS:
        doc, _ = insert(doc, kind, id_factory=ids)
    return doc
