"""Spotify Web API endpoint table.

Each operation is an :class:`Endpoint` pairing an HTTP method with a URL
template relative to the API base URL. Placeholder segments are spelled with
the parameter name that fills them, e.g. ``albums/id/tracks``. Calling an
endpoint takes the request parameters and a bearer token::

    token = get_access_token(client_id, client_secret)
    response = get_an_album({"id": "0sNOF9WDwhWunNAHPD3Baj", "market": "SE"}, token)

The raw ``requests.Response`` is returned; its status is not inspected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

import requests

from .request import SENDERS


@dataclass(frozen=True)
class Endpoint:
    """A single remote operation: HTTP method plus URL template."""

    method: str
    template: str

    def execute(
        self, params: Mapping[str, Any], token: str, **options: Any
    ) -> requests.Response:
        """Send the request.

        ``options`` are forwarded to the request builder, e.g. ``session=`` or
        ``settings=`` to take the base URL and timeout from loaded settings.
        """
        return SENDERS[self.method](self.template, params, token, **options)

    __call__ = execute


@dataclass(frozen=True)
class UnimplementedEndpoint(Endpoint):
    """An operation whose request body has not been wired up yet."""

    missing: str = "request body"

    def execute(
        self, params: Mapping[str, Any], token: str, **options: Any
    ) -> requests.Response:
        raise NotImplementedError(
            f"{self.method} {self.template} is not implemented: {self.missing}"
        )

    __call__ = execute


# Albums
get_an_album = Endpoint("GET", "albums/id")
get_an_albums_tracks = Endpoint("GET", "albums/id/tracks")
get_several_albums = Endpoint("GET", "albums")

# Artists
get_an_artist = Endpoint("GET", "artists/id")
get_an_artists_albums = Endpoint("GET", "artists/id/albums")
get_an_artists_top_tracks = Endpoint("GET", "artists/id/top-tracks")
get_an_artists_related_artists = Endpoint("GET", "artists/id/related-artists")
get_several_artists = Endpoint("GET", "artists")

# Browse
get_a_category = Endpoint("GET", "browse/categories/category_id")
get_a_categorys_playlists = Endpoint("GET", "browse/categories/category_id/playlists")
get_list_of_categories = Endpoint("GET", "browse/categories")
get_list_of_featured_playlists = Endpoint("GET", "browse/featured-playlists")
get_list_of_new_releases = Endpoint("GET", "browse/new-releases")
get_available_genre_seeds = Endpoint("GET", "recommendations/available-genre-seeds")
# TODO: map the seed_*, min_*, max_* and target_* tunables onto the query string.
get_recommendations = UnimplementedEndpoint(
    "GET", "recommendations", missing="seed and tunable attributes are not mapped"
)

# Follow
check_if_current_user_follows_artists_or_users = Endpoint("GET", "me/following/contains")
check_if_users_follow_a_playlist = Endpoint("GET", "playlists/playlist_id/followers/contains")
follow_artists_or_users = Endpoint("PUT", "me/following")
follow_a_playlist = Endpoint("PUT", "playlists/playlist_id/followers")
get_users_followed_artists = Endpoint("GET", "me/following")
unfollow_artists_or_users = Endpoint("DELETE", "me/following")
unfollow_a_playlist = Endpoint("DELETE", "playlists/playlist_id/followers")

# Library
check_users_saved_albums = Endpoint("GET", "me/albums/contains")
check_users_saved_tracks = Endpoint("GET", "me/tracks/contains")
get_current_users_saved_albums = Endpoint("GET", "me/albums")
get_users_saved_tracks = Endpoint("GET", "me/tracks")
remove_albums_for_current_user = Endpoint("DELETE", "me/albums")
remove_users_saved_tracks = Endpoint("DELETE", "me/tracks")
save_albums_for_current_user = Endpoint("PUT", "me/albums")
save_tracks_for_user = Endpoint("PUT", "me/tracks")

# Personalization
get_users_top_artists_and_tracks = UnimplementedEndpoint(
    "GET", "me/top/type", missing="the artists/tracks type segment is not substituted"
)

# Player
get_users_available_devices = Endpoint("GET", "me/player/devices")
get_information_about_users_current_playback = Endpoint("GET", "me/player")
get_current_users_recently_played_tracks = Endpoint("GET", "me/player/recently-played")
get_users_currently_playing_track = Endpoint("GET", "me/player/currently-playing")
pause_users_playback = Endpoint("PUT", "me/player/pause")
seek_to_position_in_currently_playing_track = Endpoint("PUT", "me/player/seek")
set_repeat_mode_on_users_playback = Endpoint("PUT", "me/player/repeat")
set_volume_for_users_playback = Endpoint("PUT", "me/player/volume")
skip_users_playback_to_next_track = Endpoint("POST", "me/player/next")
skip_users_playback_to_previous_track = Endpoint("POST", "me/player/previous")
start_resume_users_playback = Endpoint("PUT", "me/player/play")
toggle_shuffle_for_users_playback = Endpoint("PUT", "me/player/shuffle")
add_item_to_playback_queue = Endpoint("POST", "me/player/queue")
transfer_users_playback = UnimplementedEndpoint(
    "PUT", "me/player", missing="the device_ids body is not built"
)

# Playlists
add_tracks_to_playlist = Endpoint("POST", "playlists/playlist_id/tracks")
change_playlist_details = Endpoint("PUT", "playlists/playlist_id")
create_a_playlist = Endpoint("POST", "users/user_id/playlists")
get_list_of_current_users_playlists = Endpoint("GET", "me/playlists")
get_list_of_users_playlists = Endpoint("GET", "users/user_id/playlists")
get_playlist_cover_image = Endpoint("GET", "playlists/playlist_id/images")
get_a_playlist = Endpoint("GET", "playlists/playlist_id")
get_playlists_tracks = Endpoint("GET", "playlists/playlist_id/tracks")
remove_tracks_from_playlist = Endpoint("DELETE", "playlists/playlist_id/tracks")
replace_playlists_tracks = Endpoint("PUT", "playlists/playlist_id/tracks")
reorder_playlists_tracks = UnimplementedEndpoint(
    "PUT",
    "playlists/playlist_id/tracks",
    missing="the range_start/insert_before body is not built",
)

# Search
search_for_an_item = Endpoint("GET", "search")

# Tracks
get_audio_analysis_for_track = Endpoint("GET", "audio-analysis/id")
get_audio_features_for_track = Endpoint("GET", "audio-features/id")
get_audio_features_for_several_tracks = Endpoint("GET", "audio-features")
get_several_tracks = Endpoint("GET", "tracks")
get_a_track = Endpoint("GET", "tracks/id")

# Users profile
get_current_users_profile = Endpoint("GET", "me")
get_users_profile = Endpoint("GET", "users/user_id")


ENDPOINTS: Dict[str, Endpoint] = {
    name: value for name, value in globals().items() if isinstance(value, Endpoint)
}


__all__ = ["ENDPOINTS", "Endpoint", "UnimplementedEndpoint", *ENDPOINTS]
