from career_api.core import store as store_module
from career_api.core.store import AnalysisRecord, ResultStore


def _record(text="<h3>Analyse</h3>"):
    return AnalysisRecord(analysis=text, form_data={"education": "abitur"})


def test_get_unknown_id_returns_none():
    assert ResultStore().get("unknown-id-123") is None


def test_put_then_get_is_repeatable():
    store = ResultStore()
    record = _record()
    store.put("cs_test_1", record)
    assert store.get("cs_test_1") is record
    assert store.get("cs_test_1") is record
    assert len(store) == 1


def test_entries_expire_after_ttl(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(store_module.time, "time", lambda: now[0])

    store = ResultStore(ttl_seconds=60)
    store.put("a", _record())
    now[0] += 59
    assert store.get("a") is not None

    now[0] += 1
    assert store.get("a") is None
    assert store.sweep_expired() == 1
    assert len(store) == 0


def test_put_sweeps_expired_entries(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(store_module.time, "time", lambda: now[0])

    store = ResultStore(ttl_seconds=10)
    store.put("old", _record())
    now[0] += 11
    store.put("new", _record())
    assert len(store) == 1
    assert store.get("new") is not None


def test_zero_ttl_keeps_entries(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(store_module.time, "time", lambda: now[0])

    store = ResultStore(ttl_seconds=0)
    store.put("a", _record())
    now[0] += 10 ** 9
    assert store.get("a") is not None
    assert store.sweep_expired() == 0
