"""Tests for route handlers."""

import asyncio
import json

import pytest
from httpx import AsyncClient

from app.services.lookup import WordLookupService
from app.state import AppState, VocabularyController
from tests.fakes import FakeCompletion


async def search(client: AsyncClient, controller: VocabularyController, word: str) -> None:
    """Submit the search form and wait for the lookup to finish."""
    await client.post("/search", data={"word": word})
    await controller.wait_pending()


class TestIndex:
    """Tests for the lookup screen."""

    @pytest.mark.asyncio
    async def test_welcome(self, async_client: AsyncClient):
        """Should show the welcome panel when idle."""
        response = await async_client.get("/")

        assert response.status_code == 200
        assert "Welcome!" in response.text
        assert 'id="word-details"' not in response.text
        assert 'http-equiv="refresh"' not in response.text

    @pytest.mark.asyncio
    async def test_loading_placeholders(self, async_client: AsyncClient, controller):
        """Should render skeletons and disable search while a fetch is pending."""
        controller.state = AppState(is_loading=True, current_word="beautiful")

        response = await async_client.get("/")

        assert response.text.count('class="skeleton"') == 4
        assert "disabled" in response.text


class TestSearch:
    """Tests for search routes."""

    @pytest.mark.asyncio
    async def test_search_renders_four_panels(self, async_client: AsyncClient, controller):
        """Should render every supplied field of the 'beautiful' scenario."""
        response = await async_client.post("/search", data={"word": " Beautiful "})
        assert response.status_code == 303
        assert response.headers["location"] == "/"
        await controller.wait_pending()

        html = (await async_client.get("/")).text

        for panel in ("word-details", "etymology", "synonyms", "similar-words"):
            assert f'id="{panel}"' in html
        assert "adjective" in html
        assert "beau-ti-ful" in html
        assert html.count('<li class="example">') == 3
        assert html.count('class="card form"') == 2
        assert "bellus" in html
        assert "em + bell + ish" in html
        assert "程度较轻" in html
        assert "bountiful" in html
        assert 'value=" Beautiful "' in html
        assert 'http-equiv="refresh"' not in html

    @pytest.mark.asyncio
    async def test_redirects_while_lookup_pending(
        self, async_client: AsyncClient, controller, sample_details
    ):
        """Should answer at once and show the loading view until the lookup resolves."""
        gate = asyncio.Event()

        async def gated(prompt, schema, schema_name):
            await gate.wait()
            return json.dumps(sample_details)

        controller.lookup = WordLookupService(gated)

        response = await async_client.post("/search", data={"word": "beautiful"})
        assert response.status_code == 303

        html = (await async_client.get("/")).text
        assert html.count('class="skeleton"') == 4
        assert 'placeholder="Enter a word..." disabled>' in html
        assert 'http-equiv="refresh"' in html

        gate.set()
        await controller.wait_pending()

        html = (await async_client.get("/")).text
        assert 'class="skeleton"' not in html
        assert 'id="etymology"' in html
        assert 'http-equiv="refresh"' not in html

    @pytest.mark.asyncio
    async def test_blank_search_noop(self, async_client: AsyncClient, completion, controller):
        before = controller.state
        await async_client.post("/search", data={"word": "   "})

        assert controller.state is before

        html = (await async_client.get("/")).text
        assert "Welcome!" in html
        assert completion.calls == []

    @pytest.mark.asyncio
    async def test_search_error_panel(self, async_client: AsyncClient, controller):
        controller.lookup = WordLookupService(FakeCompletion(default={"error": "not a word"}))

        await search(async_client, controller, "asdfgh")

        html = (await async_client.get("/")).text
        assert "Oops! Something went wrong." in html
        assert "not a word" in html
        assert controller.state.current_word is None

    @pytest.mark.asyncio
    async def test_double_click_navigation(self, async_client: AsyncClient, controller):
        response = await async_client.get("/search", params={"word": "Embellish"})

        assert response.status_code == 303
        assert controller.state.is_loading is True
        await controller.wait_pending()
        assert controller.state.current_word == "embellish"
        assert controller.state.search_text == "Embellish"
        assert controller.state.view == "results"

    @pytest.mark.asyncio
    async def test_add_similar_word(self, async_client: AsyncClient, controller):
        await search(async_client, controller, "beautiful")
        await async_client.post("/similar", data={"similar_word": " beautify "})

        assert controller.state.similar_words == ("beautify",)
        html = (await async_client.get("/")).text
        assert 'data-word="beautify"' in html


class TestSaved:
    """Tests for saved-words routes."""

    @pytest.mark.asyncio
    async def test_bookmark_appears_in_sidebar(
        self, async_client: AsyncClient, controller, saved_word_store
    ):
        await search(async_client, controller, "beautiful")
        await async_client.post("/saved")
        await async_client.post("/sidebar")

        html = (await async_client.get("/")).text
        assert 'id="saved-words"' in html
        assert '<button type="submit" class="saved-word">beautiful</button>' in html
        assert [s.word for s in await saved_word_store.load()] == ["beautiful"]

    @pytest.mark.asyncio
    async def test_empty_sidebar(self, async_client: AsyncClient):
        await async_client.post("/sidebar")

        html = (await async_client.get("/")).text
        assert "You haven't saved any words yet." in html

    @pytest.mark.asyncio
    async def test_select_and_delete(self, async_client: AsyncClient, controller):
        await search(async_client, controller, "beautiful")
        await async_client.post("/saved")
        await search(async_client, controller, "bright")

        response = await async_client.post("/saved/beautiful/select")
        assert response.status_code == 303
        assert controller.state.current_word == "beautiful"

        await async_client.post("/saved/beautiful/delete")
        assert controller.state.saved_words == ()

    @pytest.mark.asyncio
    async def test_select_and_delete_word_with_slash(self, async_client: AsyncClient, controller):
        await search(async_client, controller, "and/or")
        await async_client.post("/saved")
        await search(async_client, controller, "bright")
        await async_client.post("/sidebar")

        html = (await async_client.get("/")).text
        assert 'action="/saved/and/or/select"' in html

        response = await async_client.post("/saved/and/or/select")
        assert response.status_code == 303
        assert controller.state.current_word == "and/or"

        response = await async_client.post("/saved/and/or/delete")
        assert response.status_code == 303
        assert controller.state.saved_words == ()

    @pytest.mark.asyncio
    async def test_select_unknown(self, async_client: AsyncClient):
        response = await async_client.post("/saved/missing/select")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_api_saved(self, async_client: AsyncClient, controller, sample_details):
        await search(async_client, controller, "beautiful")
        await async_client.post("/similar", data={"similar_word": "bountiful"})
        await async_client.post("/saved")

        response = await async_client.get("/api/saved")

        assert response.json() == [
            {"word": "beautiful", "details": sample_details, "similarWords": ["bountiful"]}
        ]


class TestApiLookup:
    """Tests for the JSON lookup endpoint."""

    @pytest.mark.asyncio
    async def test_success(self, async_client: AsyncClient, controller, sample_details):
        response = await async_client.get("/api/lookup/Beautiful")

        assert response.status_code == 200
        assert response.json() == {"word": "beautiful", "details": sample_details}
        assert controller.state.current_word is None

    @pytest.mark.asyncio
    async def test_blank(self, async_client: AsyncClient):
        response = await async_client.get("/api/lookup/%20")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_model_error(self, async_client: AsyncClient, controller):
        controller.lookup = WordLookupService(FakeCompletion(default={"error": "not a word"}))

        response = await async_client.get("/api/lookup/asdfgh")

        assert response.status_code == 422
        assert "not a word" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_incomplete(self, async_client: AsyncClient, controller):
        controller.lookup = WordLookupService(FakeCompletion(default={"pos": "noun"}))

        response = await async_client.get("/api/lookup/cat")

        assert response.status_code == 502
        assert "incomplete data" in response.json()["detail"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.json() == {"status": "healthy", "version": "0.1.0"}
