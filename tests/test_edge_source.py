import pytest
from google.api_core.exceptions import Forbidden
from google.auth.exceptions import DefaultCredentialsError

import edge_source
from citation_graph import load_from_source


class FakeBlob:
    def __init__(self, objects, name):
        self.objects = objects
        self.name = name

    def exists(self, client=None):
        return self.name in self.objects

    def download_as_text(self):
        return self.objects[self.name]


class FakeBucket:
    def __init__(self, objects):
        self.objects = objects

    def blob(self, name):
        return FakeBlob(self.objects, name)


def _fake_client(buckets):
    class FakeClient:
        def bucket(self, name):
            return FakeBucket(buckets.get(name, {}))

    return FakeClient


def test_split_gcs_uri():
    assert edge_source.is_gcs_uri("gs://b/x.txt")
    assert not edge_source.is_gcs_uri("data/x.txt")
    assert edge_source.split_gcs_uri("gs://b/dir/x.txt") == ("b", "dir/x.txt")
    for bad in ["gs://", "gs://bucket", "gs://bucket/", "data/x.txt"]:
        with pytest.raises(ValueError):
            edge_source.split_gcs_uri(bad)


def test_open_local_file(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text("# c\n1 2\n", encoding="utf-8")

    with edge_source.open_edge_source(str(path)) as stream:
        g = load_from_source(stream)

    assert g.num_edges() == 1


def test_open_missing_local_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        with edge_source.open_edge_source(str(tmp_path / "nope.txt")):
            pass


def test_open_gcs_object(monkeypatch, capsys):
    buckets = {"papers": {"cit/edges.txt": "# c\n1 2\n2 3\n"}}
    monkeypatch.setattr(edge_source.storage, "Client", _fake_client(buckets))

    with edge_source.open_edge_source("gs://papers/cit/edges.txt") as stream:
        g = load_from_source(stream)

    assert g.num_edges() == 2
    assert '"event_type": "gcs_fetch"' in capsys.readouterr().err


def test_open_missing_gcs_object(monkeypatch, capsys):
    monkeypatch.setattr(edge_source.storage, "Client", _fake_client({}))

    with pytest.raises(FileNotFoundError):
        with edge_source.open_edge_source("gs://papers/missing.txt"):
            pass

    assert '"event_type": "not_found"' in capsys.readouterr().err


def _failing_client(exc):
    class FailingClient:
        def __init__(self, *args, **kwargs):
            raise exc

    return FailingClient


@pytest.mark.parametrize(
    "exc",
    [Forbidden("access denied"), DefaultCredentialsError("no credentials")],
)
def test_gcs_client_failures_are_io_errors(monkeypatch, capsys, exc):
    monkeypatch.setattr(edge_source.storage, "Client", _failing_client(exc))

    with pytest.raises(OSError) as excinfo:
        with edge_source.open_edge_source("gs://papers/edges.txt"):
            pass

    assert excinfo.value.__cause__ is exc
    assert '"event_type": "gcs_error"' in capsys.readouterr().err


def test_gcs_download_failure_is_an_io_error(monkeypatch):
    class BrokenBlob(FakeBlob):
        def download_as_text(self):
            raise Forbidden("access denied")

    class BrokenBucket(FakeBucket):
        def blob(self, name):
            return BrokenBlob(self.objects, name)

    class BrokenClient:
        def bucket(self, name):
            return BrokenBucket({"edges.txt": ""})

    monkeypatch.setattr(edge_source.storage, "Client", BrokenClient)

    with pytest.raises(OSError):
        with edge_source.open_edge_source("gs://papers/edges.txt"):
            pass
