"""Fixtures — sample page, fake fetcher, image bytes."""

import os

import pytest
import requests

JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00"

PAGE = """<html>
<head><title>APOD: Dark Nebulae</title></head>
<body>
<center>
<p>
<a href="image/2410/dark_big.jpg">
<IMG SRC="image/2410/dark_1024.jpg"
alt="Dark dust clouds drift across
a field of stars."
style="max-width:100%"></a>
</center>
<center>
<b> Dark Nebulae </b> <br>
<b> Image Credit: </b> Someone
</center>
</body>
</html>
"""

SIMPLE_PAGE = """<html><body>
<b>Dark Nebulae</b>
<IMG SRC="image.jpg">
</body></html>
"""

VIDEO_PAGE = """<html><body>
<b>A Total Eclipse</b>
<iframe src="https://www.youtube.com/embed/xyz"></iframe>
</body></html>
"""


def jpeg_bytes(payload: bytes) -> bytes:
    return JPEG_HEADER + payload


class FakeFetcher:
    """Serves canned responses keyed by URL; unknown URLs fail like a dead network."""

    def __init__(self, pages=None, blobs=None):
        self.pages = pages or {}
        self.blobs = blobs or {}
        self.requested = []

    def get_text(self, url):
        self.requested.append(url)
        if url not in self.pages:
            raise requests.ConnectionError(f"no route to {url}")
        return self.pages[url]

    def get_bytes(self, url):
        self.requested.append(url)
        if url not in self.blobs:
            raise requests.HTTPError(f"404 for {url}")
        return self.blobs[url]


class FakeMetadataWriter:
    available = True

    def __init__(self, exit_code=0, stdout="", stderr=""):
        from apotd.metadata import MetadataWriteResult

        self.result = MetadataWriteResult(exit_code, stdout, stderr)
        self.calls = []

    def write(self, path, text):
        self.calls.append((path, text))
        return self.result


def set_mtime(path, seconds):
    os.utime(path, (seconds, seconds))


@pytest.fixture
def image_data():
    return jpeg_bytes(b"dark nebulae" * 64)
