"""Tests for routing and shell command handling."""

import pytest
from conftest import FakeApiClient, RecordingNavigator
from rich.console import Console

from playlist_bridge import router
from playlist_bridge.context import AppContext
from playlist_bridge.core.config import Config
from playlist_bridge.ui.controllers import (
    DashboardController,
    ImportController,
    PlaylistListController,
    SongManagerController,
)


def render_text(ctx: AppContext) -> str:
    console = Console(record=True, width=120, color_system=None)
    console.print(router.render_view(ctx))
    return console.export_text()


@pytest.fixture
def ctx(fake_client: FakeApiClient, navigator: RecordingNavigator) -> AppContext:
    return AppContext.create(
        Config(),
        client=fake_client,
        navigator=navigator,
        confirm=lambda _prompt: True,
        console=Console(record=True, width=120, color_system=None),
    )


class TestResolve:
    """Path to view resolution."""

    @pytest.mark.parametrize(
        "path,controller_type",
        [
            ("/", DashboardController),
            ("/import", ImportController),
            ("playlists", PlaylistListController),
            ("/songs/", SongManagerController),
        ],
    )
    def test_known_paths(self, ctx: AppContext, path: str, controller_type: type) -> None:
        ctx = router.navigate(ctx, path)
        assert isinstance(ctx.view, controller_type)
        assert ctx.view.unmounted is False

    def test_unknown_path_is_not_found(self, ctx: AppContext) -> None:
        ctx = router.navigate(ctx, "/nowhere")
        assert ctx.view is None
        assert ctx.path == "/nowhere"
        assert "404 - Page not found" in render_text(ctx)

    def test_navigation_unmounts_previous_view(self, ctx: AppContext) -> None:
        first = router.navigate(ctx, "/playlists")
        second = router.navigate(first, "/songs")
        assert first.view.unmounted is True
        assert second.view.unmounted is False

    def test_mount_fetches_once(self, ctx: AppContext, fake_client: FakeApiClient) -> None:
        ctx = router.navigate(ctx, "/songs")
        render_text(ctx)
        render_text(ctx)
        assert len(fake_client.called("list_songs")) == 1


class TestHandleCommand:
    """Tests for handle_command."""

    def test_quit(self, ctx: AppContext) -> None:
        _, should_continue = router.handle_command(ctx, "quit", [])
        assert should_continue is False

    def test_go(self, ctx: AppContext) -> None:
        ctx, should_continue = router.handle_command(ctx, "go", ["/playlists"])
        assert should_continue is True
        assert ctx.path == "/playlists"

    def test_import_end_to_end(self, ctx: AppContext, fake_client: FakeApiClient) -> None:
        ctx, _ = router.handle_command(
            ctx, "import", ["https://open.spotify.com/playlist/ABC123"]
        )
        ((draft,),) = fake_client.called("create_playlist")
        assert draft.external_id == "ABC123"
        assert draft.platform == "spotify"
        assert ctx.view.state.url == ""
        assert "Playlist imported successfully!" in render_text(ctx)

    def test_auth_rejects_unknown_platform(
        self, ctx: AppContext, navigator: RecordingNavigator
    ) -> None:
        ctx, _ = router.handle_command(ctx, "auth", ["deezer"])
        assert navigator.opened == []

    def test_auth_opens_navigator(self, ctx: AppContext, navigator: RecordingNavigator) -> None:
        router.handle_command(ctx, "auth", ["spotify"])
        assert len(navigator.opened) == 1

    def test_filter_routes_to_playlists(self, ctx: AppContext) -> None:
        ctx, _ = router.handle_command(ctx, "filter", ["youtube"])
        assert isinstance(ctx.view, PlaylistListController)
        assert [p.id for p in ctx.view.visible] == ["p2"]

    def test_convert(self, ctx: AppContext, fake_client: FakeApiClient) -> None:
        ctx, _ = router.handle_command(ctx, "convert", ["p1"])
        assert len(fake_client.called("convert_playlist")) == 1

    def test_delete_on_songs_view_deletes_song(
        self, ctx: AppContext, fake_client: FakeApiClient
    ) -> None:
        ctx = router.navigate(ctx, "/songs")
        router.handle_command(ctx, "delete", ["s1"])
        assert fake_client.called("delete_song") == [("s1",)]
        assert fake_client.called("delete_playlist") == []

    def test_delete_elsewhere_deletes_playlist(
        self, ctx: AppContext, fake_client: FakeApiClient
    ) -> None:
        router.handle_command(ctx, "delete", ["p1"])
        assert fake_client.called("delete_playlist") == [("p1",)]

    def test_search_show_close(self, ctx: AppContext) -> None:
        ctx, _ = router.handle_command(ctx, "search", ["queen"])
        assert [s.id for s in ctx.view.visible] == ["s1"]
        ctx, _ = router.handle_command(ctx, "show", ["s1"])
        assert ctx.view.state.modal_open is True
        assert "Song Details" in render_text(ctx)
        ctx, _ = router.handle_command(ctx, "close", [])
        assert ctx.view.state.modal_open is False

    def test_view_error(self, ctx: AppContext, fake_client: FakeApiClient) -> None:
        fake_client.fail.add("delete_playlist")
        ctx, _ = router.handle_command(ctx, "delete", ["p1"])
        assert router.view_error(ctx) == "Failed to delete playlist: delete_playlist failed"

    def test_health(self, ctx: AppContext, fake_client: FakeApiClient) -> None:
        assert router.handle_health(ctx) is True
        fake_client.fail.add("health")
        assert router.handle_health(ctx) is False

    def test_unknown_command_continues(self, ctx: AppContext) -> None:
        new_ctx, should_continue = router.handle_command(ctx, "dance", [])
        assert should_continue is True
        assert new_ctx is ctx
