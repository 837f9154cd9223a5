"""Tests for the publisher tools, run through the dispatcher against a stub Confluence."""

import pytest

from confluence_publisher.servers.dispatcher import call_tool

pytestmark = pytest.mark.anyio

BASE_URL = "https://test.atlassian.net"


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("# Guide\n\nHello **world**\n", encoding="utf-8")
    return path


@pytest.fixture
def search_hits(stub_remote):
    """Two pages in the stub, both returned by the next search."""
    first = stub_remote.add_page(
        "201", title="Onboarding", space_key="DEV", body="<p>Welcome</p>", version=3
    )
    second = stub_remote.add_page(
        "202", title="Runbook", space_key="OPS", body="<p>Restart</p>", version=1
    )
    stub_remote.search_results = [first, second]
    return stub_remote


def _search_cql(stub_remote):
    return [
        params["cql"]
        for method, path, params in stub_remote.requests
        if path == "rest/api/content/search"
    ]


class TestPublishMarkdown:
    async def test_publish_creates_page(self, configured_env, stub_remote, markdown_file):
        envelope = await call_tool(
            "publish_markdown",
            {"markdownPath": str(markdown_file), "title": "Guide", "spaceKey": "DEV"},
        )

        assert envelope == {
            "status": "success",
            "pageId": "1000",
            "title": "Guide",
            "url": f"{BASE_URL}/wiki/spaces/DEV/pages/1000",
        }
        (_, path, payload), = stub_remote.calls("POST")
        assert path == "rest/api/content"
        assert payload["space"] == {"key": "DEV"}
        assert "ancestors" not in payload
        body = payload["body"]["storage"]["value"]
        assert "<h1>Guide</h1>" in body
        assert "<strong>world</strong>" in body

    async def test_publish_under_parent(self, configured_env, stub_remote, markdown_file):
        envelope = await call_tool(
            "publish_markdown",
            {
                "markdownPath": str(markdown_file),
                "title": "Child",
                "spaceKey": "DEV",
                "parentId": "42",
            },
        )

        assert envelope["status"] == "success"
        assert stub_remote.calls("POST")[0][2]["ancestors"] == [{"id": "42"}]

    async def test_publish_missing_file(self, configured_env, stub_remote, tmp_path):
        missing = tmp_path / "missing.md"

        envelope = await call_tool(
            "publish_markdown",
            {"markdownPath": str(missing), "title": "Guide", "spaceKey": "DEV"},
        )

        assert envelope["status"] == "error"
        assert envelope["error"].startswith(
            f"Failed to read Markdown file '{missing}'"
        )
        assert stub_remote.requests == []

    async def test_publish_duplicate_title(self, configured_env, stub_remote, markdown_file):
        stub_remote.add_page("1", title="Guide", space_key="DEV")

        envelope = await call_tool(
            "publish_markdown",
            {"markdownPath": str(markdown_file), "title": "Guide", "spaceKey": "DEV"},
        )

        assert envelope["status"] == "error"
        assert envelope["error"].startswith(
            "Confluence API error: A page with this title already exists"
        )


class TestSyncMarkdown:
    async def test_sync_increments_version(self, configured_env, stub_remote, markdown_file):
        stub_remote.add_page("123", title="Remote Title", space_key="TEST", version=2)

        envelope = await call_tool(
            "sync_markdown", {"markdownPath": str(markdown_file), "pageId": "123"}
        )

        assert envelope == {
            "status": "success",
            "pageId": "123",
            "title": "Remote Title",
            "version": 3,
            "url": f"{BASE_URL}/wiki/spaces/TEST/pages/123",
        }
        assert [call[0] for call in stub_remote.requests] == ["GET", "GET", "PUT"]
        stored = stub_remote.pages["123"]
        assert stored["title"] == "Remote Title"
        assert "<h1>Guide</h1>" in stored["body"]["storage"]["value"]

    async def test_sync_twice_creates_two_versions(
        self, configured_env, stub_remote, markdown_file
    ):
        stub_remote.add_page("123", version=1)
        arguments = {"markdownPath": str(markdown_file), "pageId": "123"}

        first = await call_tool("sync_markdown", arguments)
        second = await call_tool("sync_markdown", arguments)

        assert first["version"] == 2
        assert second["version"] == 3

    async def test_sync_unknown_page(self, configured_env, stub_remote, markdown_file):
        envelope = await call_tool(
            "sync_markdown", {"markdownPath": str(markdown_file), "pageId": "999"}
        )

        assert envelope == {
            "status": "error",
            "error": "Confluence API error: No content found with id: ContentId{id=999}",
        }
        assert stub_remote.calls("PUT") == []

    async def test_sync_missing_file_reads_nothing_remote(
        self, configured_env, stub_remote, tmp_path
    ):
        stub_remote.add_page("123")

        envelope = await call_tool(
            "sync_markdown", {"markdownPath": str(tmp_path / "nope.md"), "pageId": "123"}
        )

        assert envelope["status"] == "error"
        assert stub_remote.requests == []


class TestSearchContent:
    async def test_search_defaults(self, configured_env, search_hits):
        envelope = await call_tool("search_content", {"query": "type = page"})

        assert envelope == {
            "status": "success",
            "results": [
                {
                    "id": "201",
                    "title": "Onboarding",
                    "version": 3,
                    "space": "DEV",
                    "url": f"{BASE_URL}/wiki/spaces/DEV/pages/201",
                },
                {
                    "id": "202",
                    "title": "Runbook",
                    "version": 1,
                    "space": "OPS",
                    "url": f"{BASE_URL}/wiki/spaces/OPS/pages/202",
                },
            ],
        }
        (_, _, params), = search_hits.requests
        assert params["cql"] == "type = page"
        assert params["limit"] == 10

    async def test_search_plain_text(self, configured_env, stub_remote):
        await call_tool(
            "search_content", {"query": "deploy guide", "cql": False, "limit": 3}
        )

        assert _search_cql(stub_remote) == ['text ~ "deploy guide"']

    async def test_search_without_output_path_writes_nothing(
        self, configured_env, search_hits, tmp_path, monkeypatch
    ):
        monkeypatch.chdir(tmp_path)

        await call_tool("search_content", {"query": "type = page"})

        assert list(tmp_path.iterdir()) == []
        assert len(search_hits.requests) == 1

    async def test_search_exports_results(self, configured_env, search_hits, tmp_path):
        output = tmp_path / "exports"

        envelope = await call_tool(
            "search_content", {"query": "type = page", "outputPath": str(output)}
        )

        assert envelope["status"] == "success"
        assert sorted(p.name for p in output.iterdir()) == ["201.md", "202.md"]
        assert (output / "201.md").read_bytes() == (
            b"---\n"
            b"title: Onboarding\n"
            b"spaceKey: DEV\n"
            b"pageId: 201\n"
            b"version: 3\n"
            b"url: https://test.atlassian.net/wiki/spaces/DEV/pages/201\n"
            b"---\n"
            b"\n"
            b"<p>Welcome</p>\n"
        )

    async def test_search_no_results_creates_no_directory(
        self, configured_env, stub_remote, tmp_path
    ):
        output = tmp_path / "exports"

        envelope = await call_tool(
            "search_content", {"query": "type = page", "outputPath": str(output)}
        )

        assert envelope == {"status": "success", "results": []}
        assert not output.exists()


class TestFetchLatestArticles:
    async def test_fetch_saves_every_result(self, configured_env, search_hits, tmp_path):
        output = tmp_path / "articles"

        envelope = await call_tool(
            "fetch_latest_articles",
            {"query": "type = page ORDER BY created DESC", "outputPath": str(output)},
        )

        assert envelope == {
            "status": "success",
            "message": "2 articles have been saved",
            "articles": [
                {"id": "201", "title": "Onboarding", "filename": str(output / "201.md")},
                {"id": "202", "title": "Runbook", "filename": str(output / "202.md")},
            ],
        }
        assert (output / "202.md").read_text(encoding="utf-8").endswith(
            "---\n\n<p>Restart</p>\n"
        )
        content_reads = [
            params
            for method, path, params in search_hits.requests
            if path.startswith("rest/api/content/20")
        ]
        assert content_reads == [{"expand": "body.storage,version"}] * 2

    async def test_fetch_honours_cql_flag(self, configured_env, stub_remote, tmp_path):
        await call_tool(
            "fetch_latest_articles",
            {"query": "kubernetes", "outputPath": str(tmp_path), "cql": False},
        )

        assert _search_cql(stub_remote) == ['text ~ "kubernetes"']

    async def test_fetch_zero_results(self, configured_env, stub_remote, tmp_path):
        output = tmp_path / "articles"

        envelope = await call_tool(
            "fetch_latest_articles", {"query": "type = page", "outputPath": str(output)}
        )

        assert envelope == {
            "status": "success",
            "message": "0 articles have been saved",
            "articles": [],
        }
        assert not output.exists()

    async def test_fetch_stops_at_first_failure(self, configured_env, search_hits, tmp_path):
        # The second hit was deleted after the search ran
        del search_hits.pages["202"]
        output = tmp_path / "articles"

        envelope = await call_tool(
            "fetch_latest_articles", {"query": "type = page", "outputPath": str(output)}
        )

        assert envelope["status"] == "error"
        assert "No content found with id" in envelope["error"]
        assert (output / "201.md").exists()
        assert not (output / "202.md").exists()

    async def test_fetch_write_failure(self, configured_env, search_hits, tmp_path):
        blocker = tmp_path / "articles"
        blocker.write_text("", encoding="utf-8")

        envelope = await call_tool(
            "fetch_latest_articles", {"query": "type = page", "outputPath": str(blocker)}
        )

        assert envelope["status"] == "error"
        assert envelope["error"].startswith("Failed to write")
