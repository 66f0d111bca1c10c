"""Tests for SongManagerController: search, detail overlay and deletion."""

from conftest import FakeApiClient, make_song

from playlist_bridge.ui.controllers import SongManagerController
from playlist_bridge.ui.controllers.songs import DELETE_PROMPT


def make_controller(
    client: FakeApiClient, answer: bool = True, server_search: bool = False
) -> SongManagerController:
    controller = SongManagerController(client, lambda _prompt: answer, server_search=server_search)
    controller.mount()
    return controller


class TestSearch:
    """Local and server-backed search."""

    def test_empty_query_shows_everything(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.set_query("")
        assert len(controller.visible) == 4

    def test_local_search_makes_no_call(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.set_query("Eagles")
        assert [s.id for s in controller.visible] == ["s2"]
        assert fake_client.called("search_songs") == []

    def test_no_match_is_empty(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.set_query("no such song")
        assert controller.visible == []

    def test_server_search_replaces_local_results(self, fake_client: FakeApiClient) -> None:
        remote = make_song("r1", title="Remote hit")
        fake_client.search_results = [remote]
        controller = make_controller(fake_client, server_search=True)

        controller.set_query("hit")

        ((query,),) = fake_client.called("search_songs")
        assert query.q == "hit"
        assert query.limit == 10
        assert controller.visible == [remote]

    def test_server_search_skipped_for_blank_query(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client, server_search=True)
        controller.set_query("  ")
        assert fake_client.called("search_songs") == []

    def test_server_search_failure_falls_back(self, fake_client: FakeApiClient) -> None:
        fake_client.fail.add("search_songs")
        controller = make_controller(fake_client, server_search=True)
        controller.set_query("queen")
        assert controller.state.action_error == "Search failed: search_songs failed"
        assert [s.id for s in controller.visible] == ["s1"]

    def test_refetch_drops_deleted_song_from_server_results(
        self, fake_client: FakeApiClient
    ) -> None:
        """Deleting during a server search removes the song from what is listed."""
        fake_client.search_results = [fake_client.songs[0]]
        controller = make_controller(fake_client, server_search=True)
        controller.set_query("queen")
        assert [s.id for s in controller.visible] == ["s1"]

        assert controller.delete("s1") is True

        assert controller.state.query == "queen"
        assert controller.visible == []

    def test_refetch_refreshes_server_results(self, fake_client: FakeApiClient) -> None:
        fake_client.search_results = [fake_client.songs[0]]
        controller = make_controller(fake_client, server_search=True)
        controller.set_query("queen")

        fake_client.songs[0] = make_song("s1", title="Bohemian Rhapsody (Live)", artist="Queen")
        controller.fetch()

        assert [s.title for s in controller.visible] == ["Bohemian Rhapsody (Live)"]


class TestDetailOverlay:
    def test_select_opens_overlay(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        song = controller.select("s3")
        assert song is not None
        assert controller.state.modal_open is True
        assert controller.state.selected.title == "Imagine"

    def test_close(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.select("s3")
        controller.close()
        assert controller.state.selected is None

    def test_select_unknown(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        assert controller.select("nope") is None
        assert controller.state.modal_open is False
        assert controller.state.action_error == "Song not found: nope"

    def test_refresh_selected(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.select("s1")
        updated = make_song("s1", title="Bohemian Rhapsody (Remastered)")
        fake_client.songs[0] = updated
        assert controller.refresh_selected() == updated
        assert controller.state.selected.title == "Bohemian Rhapsody (Remastered)"


class TestDelete:
    def test_declined_makes_no_call(self, fake_client: FakeApiClient) -> None:
        prompts = []

        def decline(prompt: str) -> bool:
            prompts.append(prompt)
            return False

        controller = SongManagerController(fake_client, decline)
        controller.mount()

        assert controller.delete("s1") is False
        assert prompts == [DELETE_PROMPT]
        assert fake_client.called("delete_song") == []
        assert len(fake_client.called("list_songs")) == 1

    def test_confirmed_deletes_once_and_refetches_once(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        assert controller.delete("s1") is True
        assert fake_client.called("delete_song") == [("s1",)]
        assert len(fake_client.called("list_songs")) == 2
        assert controller.find("s1") is None

    def test_deleting_selected_song_closes_overlay(self, fake_client: FakeApiClient) -> None:
        controller = make_controller(fake_client)
        controller.select("s1")
        controller.delete("s1")
        assert controller.state.selected is None

    def test_failed_delete_reported(self, fake_client: FakeApiClient) -> None:
        fake_client.fail.add("delete_song")
        controller = make_controller(fake_client)
        assert controller.delete("s1") is False
        assert controller.state.action_error == "Failed to delete song: delete_song failed"
        assert len(fake_client.called("list_songs")) == 1
