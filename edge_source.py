import io
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from event_log import log_event

GCS_SCHEME = "gs://"


def is_gcs_uri(location: str) -> bool:
    return location.startswith(GCS_SCHEME)


def split_gcs_uri(uri: str) -> Tuple[str, str]:
    rest = uri[len(GCS_SCHEME):] if is_gcs_uri(uri) else ""
    bucket, _, object_name = rest.partition("/")
    if not bucket or not object_name:
        raise ValueError(f"expected gs://<bucket>/<object>, got {uri!r}")
    return bucket, object_name


def _download_gcs_text(uri: str) -> str:
    bucket_name, object_name = split_gcs_uri(uri)
    try:
        client = storage.Client()
        blob = client.bucket(bucket_name).blob(object_name)
        found = blob.exists(client)
        text = blob.download_as_text() if found else None
    except (GoogleAPIError, GoogleAuthError, UnicodeDecodeError) as e:
        log_event("gcs_error", bucket=bucket_name, object=object_name, error=str(e))
        raise OSError(f"cannot read {uri}: {e}") from e

    if not found:
        log_event("not_found", bucket=bucket_name, object=object_name)
        raise FileNotFoundError(f"no such object: {uri}")

    log_event("gcs_fetch", bucket=bucket_name, object=object_name, size=len(text))
    return text


@contextmanager
def open_edge_source(location: str) -> Iterator[TextIO]:
    """Yield a text stream over a local edge-list file or a gs:// object."""
    if is_gcs_uri(location):
        with io.StringIO(_download_gcs_text(location)) as stream:
            yield stream
        return

    with Path(location).open(mode="r", encoding="utf-8") as stream:
        yield stream
