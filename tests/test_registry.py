import dataclasses

import pytest

from domain.constants import SAMPLE_REGISTRANTS
from services.errors import ValidationError, RecordNotFound
from services.registry import RegistrantStore, missing_required


def make_fields(cedula="222", admin="999", **extra):
    fields = {"cedula": cedula, "cedula_admin": admin}
    fields.update(extra)
    return fields


def test_add_to_seeded_store_assigns_next_id_and_correl():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    rec = store.add(make_fields(nombre_apellido="Ana Gómez"))
    assert rec.id == 2
    assert rec.correl == "00002"
    assert len(store) == 2
    assert [r.id for r in store] == [1, 2]


def test_ids_strictly_increasing_and_correl_matches():
    store = RegistrantStore()
    ids = [store.add(make_fields(cedula=str(i))).id for i in range(12)]
    assert ids == list(range(1, 13))
    for r in store:
        assert r.correl == f"{r.id:05d}"


def test_delete_below_max_keeps_sequence_going():
    store = RegistrantStore()
    for i in range(3):
        store.add(make_fields(cedula=str(i)))
    store.delete(2)
    assert store.add(make_fields()).id == 4


def test_empty_store_starts_at_one():
    store = RegistrantStore()
    assert store.next_id() == 1
    assert store.add(make_fields()).correl == "00001"


@pytest.mark.parametrize("cedula,admin", [("", "9"), ("9", ""), ("   ", "9"), ("9", "\t"), (None, "9")])
def test_add_rejects_missing_required_fields(cedula, admin):
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    before = store.records
    with pytest.raises(ValidationError) as exc:
        store.add(make_fields(cedula=cedula, admin=admin))
    assert exc.value.missing
    assert store.records == before
    assert store.version == 0


def test_missing_required_lists_both():
    assert missing_required({}) == ["cedula", "cedula_admin"]
    assert missing_required({"cedula": "1", "cedula_admin": "2"}) == []


def test_update_replaces_fields_but_keeps_identity():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    updated = store.update(1, make_fields(cedula="4000", admin="1", afiliado=False, pais="Chile"))
    assert updated.id == 1
    assert updated.correl == "00001"
    assert updated.cedula == "4000"
    assert updated.afiliado is False
    assert updated.pais == "Chile"
    # fields not supplied are blanked, like a full form submit
    assert updated.nombre_apellido == ""
    assert store.get(1) == updated


def test_update_ignores_id_and_correl_in_fields():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    updated = store.update(1, make_fields(id=77, correl="99999"))
    assert (updated.id, updated.correl) == (1, "00001")


def test_update_validation_failure_leaves_record():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    original = store.get(1)
    with pytest.raises(ValidationError):
        store.update(1, make_fields(admin=""))
    assert store.get(1) == original


def test_update_unknown_id():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    with pytest.raises(RecordNotFound):
        store.update(42, make_fields())
    assert len(store) == 1


def test_delete_removes_only_target_and_is_idempotent():
    store = RegistrantStore()
    for i in range(3):
        store.add(make_fields(cedula=str(i)))
    assert store.delete(2) is True
    assert [r.id for r in store] == [1, 3]
    version = store.version
    assert store.delete(2) is False
    assert [r.id for r in store] == [1, 3]
    assert store.version == version


def test_records_is_a_copy():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    store.records.clear()
    assert len(store) == 1


def test_seed_with_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        RegistrantStore(SAMPLE_REGISTRANTS + SAMPLE_REGISTRANTS)


def test_deleting_highest_id_frees_it_for_next_add():
    # next id is max(existing) + 1, so removing the top record hands its id out again
    store = RegistrantStore()
    for i in range(3):
        store.add(make_fields(cedula=str(i)))
    store.delete(3)
    rec = store.add(make_fields(cedula="again"))
    assert (rec.id, rec.correl) == (3, "00003")
    assert [r.id for r in store] == [1, 2, 3]


def test_records_cannot_be_mutated_in_place():
    store = RegistrantStore(SAMPLE_REGISTRANTS)
    rec = store.records[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        rec.cedula_admin = ""
    with pytest.raises(dataclasses.FrozenInstanceError):
        store.get(1).id = 99
    assert store.get(1).cedula_admin == "5000000"


@pytest.mark.parametrize("raw,expected", [("false", False), ("No", False), ("", False), ("true", True), ("Sí", True), (1, True), (0, False)])
def test_flag_strings_are_parsed(raw, expected):
    store = RegistrantStore()
    assert store.add(make_fields(afiliado=raw)).afiliado is expected


@pytest.mark.parametrize("raw", ["maybe", 2, 1.5, []])
def test_unparseable_flag_rejected(raw):
    store = RegistrantStore()
    with pytest.raises(ValueError):
        store.add(make_fields(simpatizante=raw))
    assert len(store) == 0
