from pathlib import Path

import httpx
import pytest

from arbcase.ingest.sources import (
    FileTableSource,
    HttpTableSource,
    SourceUnavailableError,
    TextTableSource,
    decode_utf8,
    decode_with_fallback,
    fetch_text,
    repair_known_names,
)


def test_decode_with_fallback_prefers_utf8():
    payload = "Player\nJesús Lúzardo\n".encode("utf-8")
    assert decode_with_fallback(payload) == "Player\nJesús Lúzardo\n"


def test_decode_with_fallback_uses_latin1_for_invalid_utf8():
    payload = "Player\nJosé Berríos\n".encode("latin-1")
    assert decode_with_fallback(payload) == "Player\nJosé Berríos\n"


def test_decode_with_fallback_repairs_mojibake_names():
    # UTF-8 bytes that were previously mis-decoded as latin-1 and re-saved.
    payload = "Jesús Lúzardo".encode("utf-8").decode("latin-1").encode("utf-8")
    assert decode_with_fallback(payload) == "Jesús Lúzardo"


def test_repair_known_names_handles_replacement_characters():
    assert repair_known_names("Jes\ufffds L\ufffdzardo") == "Jesús Lúzardo"
    assert repair_known_names("Joe Ryan") == "Joe Ryan"


def test_decode_with_fallback_repairs_replacement_characters_read_as_latin1():
    # U+FFFD forces the latin-1 path, which turns each one into three characters.
    payload = "Player\nJes\ufffds L\ufffdzardo\n".encode("utf-8")
    assert decode_with_fallback(payload) == "Player\nJesús Lúzardo\n"
    assert repair_known_names("Jes\u00ef\u00bf\u00bd\u00ef\u00bf\u00bds") == "Jesús"


def test_decode_utf8_strips_bom():
    assert decode_utf8("\ufeffName,Season".encode("utf-8")) == "Name,Season"


@pytest.mark.anyio
async def test_file_source_reads_bytes(tmp_path: Path):
    path = tmp_path / "table.csv"
    path.write_text("Name,Season\n", encoding="utf-8")
    assert await fetch_text(FileTableSource(path)) == "Name,Season\n"


@pytest.mark.anyio
async def test_file_source_missing_raises_source_unavailable(tmp_path: Path):
    source = FileTableSource(tmp_path / "missing.csv")
    with pytest.raises(SourceUnavailableError) as excinfo:
        await source.fetch()
    assert excinfo.value.source == str(tmp_path / "missing.csv")


@pytest.mark.anyio
async def test_http_source_fetches_content():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/sorted_predictions.csv"
        return httpx.Response(200, text="Player\nRyan, Joe\n")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        source = HttpTableSource("http://site.test/sorted_predictions.csv", client=client)
        assert await fetch_text(source) == "Player\nRyan, Joe\n"


@pytest.mark.anyio
async def test_http_source_error_status_raises_source_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        source = HttpTableSource("http://site.test/missing.csv", client=client)
        with pytest.raises(SourceUnavailableError):
            await source.fetch()


@pytest.mark.anyio
async def test_text_source_round_trips_text():
    source = TextTableSource("Name\nJoe Ryan\n", label="inline")
    assert source.describe() == "inline"
    assert await fetch_text(source) == "Name\nJoe Ryan\n"
