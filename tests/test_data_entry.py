import dataclasses
import datetime as dt

import pytest

from domain.models import empty_form
from services.data_entry import DataEntrySession
from services.errors import ValidationError, RecordNotFound, NothingToExport


def fields(cedula="222", admin="999", **extra):
    form = empty_form()
    form.update(cedula=cedula, cedula_admin=admin, **extra)
    return form


@pytest.fixture
def session():
    return DataEntrySession.start("admin")


def test_start_seeds_sample_roster(session):
    assert session.username == "admin"
    assert [r.id for r in session.visible()] == [1]
    assert DataEntrySession.start("x", seed=[]).visible() == []


def test_submit_adds_and_resets_form(session):
    rev = session.form_revision
    rec = session.submit(fields(nombre_apellido="Ana"))
    assert (rec.id, rec.correl) == (2, "00002")
    assert session.form == empty_form()
    assert session.form_revision > rev
    assert len(session.store) == 2


def test_failed_submit_keeps_form(session):
    rev = session.form_revision
    with pytest.raises(ValidationError):
        session.submit(fields(cedula="", nombre_apellido="Ana"))
    assert session.form["nombre_apellido"] == "Ana"
    assert session.form_revision == rev
    assert len(session.store) == 1


def test_edit_flow_updates_in_place(session):
    form = session.start_edit(1)
    assert session.is_editing
    assert form["cedula"] == "3111111"
    form["pais"] = "Colombia"
    rec = session.submit(form)
    assert (rec.id, rec.correl, rec.pais) == (1, "00001", "Colombia")
    assert not session.is_editing
    assert len(session.store) == 1


def test_failed_update_stays_in_edit_mode(session):
    session.start_edit(1)
    with pytest.raises(ValidationError):
        session.submit(fields(admin=" "))
    assert session.editing_id == 1
    assert session.store.get(1).cedula_admin == "5000000"


def test_cancel_edit(session):
    session.start_edit(1)
    session.cancel_edit()
    assert not session.is_editing
    assert session.form == empty_form()


def test_start_edit_unknown(session):
    with pytest.raises(RecordNotFound):
        session.start_edit(9)


def test_delete_request_then_cancel_keeps_record(session):
    session.submit(fields())
    session.request_delete(2)
    assert session.pending_delete.is_open
    assert len(session.store) == 2
    session.cancel_delete()
    assert not session.pending_delete.is_open
    assert [r.id for r in session.store] == [1, 2]


def test_delete_request_then_confirm(session):
    session.submit(fields())
    session.request_delete(2)
    assert session.confirm_delete() is True
    assert [r.id for r in session.store] == [1]
    assert not session.pending_delete.is_open


def test_confirm_without_request_is_noop(session):
    assert session.confirm_delete() is False
    assert len(session.store) == 1


def test_deleting_record_under_edit_cancels_edit(session):
    session.start_edit(1)
    session.request_delete(1)
    session.confirm_delete()
    assert not session.is_editing
    assert len(session.store) == 0


def test_search_and_filters_drive_visible(session):
    session.submit(fields(nombre_apellido="Sin Afiliar"))
    session.set_filter("afiliado", True)
    assert [r.id for r in session.visible()] == [1]
    session.clear_filters()
    session.set_search("sin afi")
    assert [r.id for r in session.visible()] == [2]
    session.set_search("")
    assert [r.id for r in session.visible()] == [1, 2]


def test_visible_recomputed_after_mutation(session):
    assert len(session.visible()) == 1
    session.submit(fields())
    assert len(session.visible()) == 2


def test_set_filter_unknown_flag(session):
    with pytest.raises(ValueError):
        session.set_filter("vip", True)


def test_counts(session):
    session.submit(fields(simpatizante=True))
    session.set_filter("simpatizante", True)
    counts = session.counts()
    assert counts["total"] == 2
    assert counts["visible"] == 1
    assert counts["simpatizante"] == 1


def test_export_of_visible_projection(session):
    session.submit(fields())
    session.set_filter("afiliado", True)
    name, payload = session.export(day=dt.date(2025, 1, 31))
    assert name == "registros_2025-01-31.csv"
    text = payload.decode("utf-8-sig")
    assert len(text.split("\n")) == 2
    assert session.export_label() == "Exportar 1 registro(s)"


def test_export_unavailable_when_nothing_visible(session):
    session.set_search("no-such-value")
    assert not session.can_export()
    assert session.export_label() == "Nada que exportar"
    with pytest.raises(NothingToExport):
        session.export()
    assert session.empty_message() is not None


def test_visible_records_are_read_only(session):
    session.set_filter("afiliado", True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.visible()[0].afiliado = False
    assert [r.id for r in session.visible()] == [1]
