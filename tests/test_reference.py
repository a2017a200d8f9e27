import pytest

from gittree import Blob, DetachedObject, ObjectType, Reference, Tree


@pytest.fixture
def blob_id(store):
    return Blob(b"content", store=store).save()


class TestReference:
    @pytest.mark.parametrize(
        "mode, expected",
        [(0o40000, ObjectType.TREE), (0o100644, ObjectType.BLOB), (0o100755, ObjectType.BLOB)],
    )
    def test_type_from_mode_without_resolving(self, mode, expected):
        ref = Reference(id="0" * 40, mode=mode)
        assert ref.type == expected
        assert not ref.resolved

    def test_resolve_caches_object(self, store, blob_id):
        ref = Reference(store=store, id=blob_id, mode=0o100755)
        blob = ref.resolve()
        assert ref.resolved
        assert ref.resolve() is blob
        assert ref.object is blob
        assert blob.data == b"content"
        assert blob.mode == 0o100755

    def test_modified_delegates_once_resolved(self, store, blob_id):
        ref = Reference(store=store, id=blob_id, mode=0o100644)
        assert not ref.modified
        ref.resolve().data = b"changed"
        assert ref.modified
        new_id = ref.save()
        assert new_id != blob_id
        assert ref.id == new_id
        assert not ref.modified

    def test_save_unresolved_returns_known_id(self, store, blob_id):
        ref = Reference(store=store, id=blob_id, mode=0o100644)
        assert ref.save() == blob_id
        assert not ref.resolved

    def test_store_propagates_to_resolved_object(self, store, blob_id):
        ref = Reference(store=store, id=blob_id, mode=0o100644)
        ref.resolve()
        tree = Tree()
        tree.set("file", ref)
        assert ref.store is None
        assert ref.object.store is None

    def test_resolve_without_store(self):
        with pytest.raises(DetachedObject):
            Reference(id="0" * 40, mode=0o100644).resolve()
