"""VideoLibrary namespace.

See http://kodi.wiki/view/JSON-RPC_API/v6#VideoLibrary
"""

from __future__ import annotations

from xbmcapi.methods.builder import Namespace, RemoteMethod
from xbmcapi.methods.schema import FILTERED_LISTING, LISTING, PROPERTIES, p

EPISODE_ID = p("episodeid", "episode_id")
MOVIE_ID = p("movieid", "movie_id")
MUSIC_VIDEO_ID = p("musicvideoid", "music_video_id")
TV_SHOW_ID = p("tvshowid", "tv_show_id")
SET_ID = p("setid", "set_id")

# Detail fields accepted by the Set*Details methods.
TITLE = p("title")
PLAY_COUNT = p("playcount", "play_count")
RUNTIME = p("runtime")
DIRECTOR = p("director")
STUDIO = p("studio")
YEAR = p("year")
PLOT = p("plot")
GENRE = p("genre")
RATING = p("rating")
MPAA = p("mpaa")
IMDB_NUMBER = p("imdbnumber", "imdb_number")
VOTES = p("votes")
LAST_PLAYED = p("lastplayed", "last_played")
ORIGINAL_TITLE = p("originaltitle", "original_title")
SORT_TITLE = p("sorttitle", "sort_title")
WRITER = p("writer")
THUMBNAIL = p("thumbnail")
FANART = p("fanart")
TAG = p("tag")
ART = p("art")


class VideoLibrary(Namespace):
    name = "VideoLibrary"

    clean = RemoteMethod("VideoLibrary.Clean", doc="Remove items that no longer exist from the library.")
    export = RemoteMethod("VideoLibrary.Export", optional=(p("options"),))
    scan = RemoteMethod("VideoLibrary.Scan", optional=(p("directory"),), doc="Scan sources (or one directory) for new items.")

    get_episode_details = RemoteMethod(
        "VideoLibrary.GetEpisodeDetails", required=(EPISODE_ID,), optional=(PROPERTIES,),
    )
    get_episodes = RemoteMethod(
        "VideoLibrary.GetEpisodes",
        optional=(TV_SHOW_ID, p("season")) + FILTERED_LISTING,
    )
    get_genres = RemoteMethod(
        "VideoLibrary.GetGenres",
        required=(p("type"),),
        optional=LISTING,
        doc="Genres of one media type: movie, tvshow or musicvideo.",
    )
    get_movie_details = RemoteMethod(
        "VideoLibrary.GetMovieDetails", required=(MOVIE_ID,), optional=(PROPERTIES,),
    )
    get_movie_set_details = RemoteMethod(
        "VideoLibrary.GetMovieSetDetails", required=(SET_ID,), optional=(PROPERTIES, p("movies")),
    )
    get_movie_sets = RemoteMethod("VideoLibrary.GetMovieSets", optional=LISTING)
    get_movies = RemoteMethod("VideoLibrary.GetMovies", optional=FILTERED_LISTING)
    get_music_video_details = RemoteMethod(
        "VideoLibrary.GetMusicVideoDetails", required=(MUSIC_VIDEO_ID,), optional=(PROPERTIES,),
    )
    get_music_videos = RemoteMethod("VideoLibrary.GetMusicVideos", optional=FILTERED_LISTING)
    get_recently_added_episodes = RemoteMethod("VideoLibrary.GetRecentlyAddedEpisodes", optional=LISTING)
    get_recently_added_movies = RemoteMethod("VideoLibrary.GetRecentlyAddedMovies", optional=LISTING)
    get_recently_added_music_videos = RemoteMethod("VideoLibrary.GetRecentlyAddedMusicVideos", optional=LISTING)
    get_seasons = RemoteMethod("VideoLibrary.GetSeasons", required=(TV_SHOW_ID,), optional=LISTING)
    get_tv_show_details = RemoteMethod(
        "VideoLibrary.GetTVShowDetails", required=(TV_SHOW_ID,), optional=(PROPERTIES,),
    )
    get_tv_shows = RemoteMethod("VideoLibrary.GetTVShows", optional=FILTERED_LISTING)

    remove_episode = RemoteMethod("VideoLibrary.RemoveEpisode", required=(EPISODE_ID,))
    remove_movie = RemoteMethod("VideoLibrary.RemoveMovie", required=(MOVIE_ID,))
    remove_music_video = RemoteMethod("VideoLibrary.RemoveMusicVideo", required=(MUSIC_VIDEO_ID,))
    remove_tv_show = RemoteMethod("VideoLibrary.RemoveTVShow", required=(TV_SHOW_ID,))

    set_episode_details = RemoteMethod(
        "VideoLibrary.SetEpisodeDetails",
        required=(EPISODE_ID,),
        optional=(
            TITLE, PLAY_COUNT, RUNTIME, DIRECTOR, PLOT, RATING, VOTES, LAST_PLAYED, WRITER,
            p("firstaired", "first_aired"), p("productioncode", "production_code"),
            p("season"), p("episode"), ORIGINAL_TITLE, THUMBNAIL, FANART, ART,
        ),
    )
    set_movie_details = RemoteMethod(
        "VideoLibrary.SetMovieDetails",
        required=(MOVIE_ID,),
        optional=(
            TITLE, PLAY_COUNT, RUNTIME, DIRECTOR, STUDIO, YEAR, PLOT, GENRE, RATING, MPAA, IMDB_NUMBER,
            VOTES, LAST_PLAYED, ORIGINAL_TITLE, p("trailer"), p("tagline"), p("plotoutline", "plot_outline"),
            WRITER, p("country"), p("top250"), SORT_TITLE, p("set"), p("showlink", "show_link"),
            THUMBNAIL, FANART, TAG, ART,
        ),
    )
    set_music_video_details = RemoteMethod(
        "VideoLibrary.SetMusicVideoDetails",
        required=(MUSIC_VIDEO_ID,),
        optional=(
            TITLE, PLAY_COUNT, RUNTIME, DIRECTOR, STUDIO, YEAR, PLOT, p("album"), p("artist"), GENRE,
            p("track"), LAST_PLAYED, THUMBNAIL, FANART, TAG, ART,
        ),
    )
    set_tv_show_details = RemoteMethod(
        "VideoLibrary.SetTVShowDetails",
        required=(TV_SHOW_ID,),
        optional=(
            TITLE, PLAY_COUNT, STUDIO, PLOT, RATING, MPAA, IMDB_NUMBER, p("premiered"), VOTES,
            LAST_PLAYED, ORIGINAL_TITLE, SORT_TITLE, p("episodeguide", "episode_guide"),
            THUMBNAIL, FANART, TAG, ART,
        ),
    )
