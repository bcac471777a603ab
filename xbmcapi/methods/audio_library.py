"""AudioLibrary namespace.

See http://kodi.wiki/view/JSON-RPC_API/v6#AudioLibrary
"""

from __future__ import annotations

from xbmcapi.methods.builder import Namespace, RemoteMethod
from xbmcapi.methods.schema import FILTERED_LISTING, LISTING, PROPERTIES, p

ALBUM_ID = p("albumid", "album_id")
ARTIST_ID = p("artistid", "artist_id")
SONG_ID = p("songid", "song_id")

GENRE = p("genre")
MOOD = p("mood")
STYLE = p("style")
DESCRIPTION = p("description")
RATING = p("rating")
YEAR = p("year")


class AudioLibrary(Namespace):
    name = "AudioLibrary"

    clean = RemoteMethod("AudioLibrary.Clean")
    export = RemoteMethod("AudioLibrary.Export", optional=(p("options"),))
    scan = RemoteMethod("AudioLibrary.Scan", optional=(p("directory"),))

    get_album_details = RemoteMethod("AudioLibrary.GetAlbumDetails", required=(ALBUM_ID,), optional=(PROPERTIES,))
    get_albums = RemoteMethod("AudioLibrary.GetAlbums", optional=FILTERED_LISTING)
    get_artist_details = RemoteMethod("AudioLibrary.GetArtistDetails", required=(ARTIST_ID,), optional=(PROPERTIES,))
    get_artists = RemoteMethod(
        "AudioLibrary.GetArtists",
        optional=(p("albumartistsonly", "album_artists_only"),) + FILTERED_LISTING,
    )
    get_genres = RemoteMethod("AudioLibrary.GetGenres", optional=LISTING)
    get_recently_added_albums = RemoteMethod("AudioLibrary.GetRecentlyAddedAlbums", optional=LISTING)
    get_recently_added_songs = RemoteMethod(
        "AudioLibrary.GetRecentlyAddedSongs",
        optional=(p("albumlimit", "album_limit"),) + LISTING,
        doc="Songs from the most recently added albums (albumlimit caps the album count).",
    )
    get_recently_played_albums = RemoteMethod("AudioLibrary.GetRecentlyPlayedAlbums", optional=LISTING)
    get_recently_played_songs = RemoteMethod("AudioLibrary.GetRecentlyPlayedSongs", optional=LISTING)
    get_song_details = RemoteMethod("AudioLibrary.GetSongDetails", required=(SONG_ID,), optional=(PROPERTIES,))
    get_songs = RemoteMethod("AudioLibrary.GetSongs", optional=FILTERED_LISTING)

    set_album_details = RemoteMethod(
        "AudioLibrary.SetAlbumDetails",
        required=(ALBUM_ID,),
        optional=(
            p("title"), p("artist"), DESCRIPTION, GENRE, p("theme"), MOOD, STYLE, p("type"),
            p("albumlabel", "album_label"), RATING, YEAR,
        ),
    )
    set_artist_details = RemoteMethod(
        "AudioLibrary.SetArtistDetails",
        required=(ARTIST_ID,),
        optional=(
            p("artist"), p("instrument"), STYLE, MOOD, p("born"), p("formed"), DESCRIPTION, GENRE,
            p("died"), p("disbanded"), p("yearsactive", "years_active"),
        ),
    )
    set_song_details = RemoteMethod(
        "AudioLibrary.SetSongDetails",
        required=(SONG_ID,),
        optional=(
            p("title"), p("artist"), p("albumartist", "album_artist"), GENRE, YEAR, RATING, p("album"),
            p("track"), p("disc"), p("duration"), p("comment"),
            p("musicbrainztrackid", "musicbrainz_track_id"),
            p("musicbrainzartistid", "musicbrainz_artist_id"),
            p("musicbrainzalbumid", "musicbrainz_album_id"),
            p("musicbrainzalbumartistid", "musicbrainz_album_artist_id"),
            p("playcount", "play_count"), p("lastplayed", "last_played"),
        ),
    )
