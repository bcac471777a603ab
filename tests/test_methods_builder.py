import pytest

from xbmcapi.methods import NAMESPACES, UNSET, Files, Namespace, VideoLibrary, build_params
from xbmcapi.methods.builder import RemoteMethod, params_from_object
from xbmcapi.methods.schema import MethodSpec, p
from xbmcapi.rpc.protocol import RpcRequest
from xbmcapi.rpc.serialization import decode_request, encode_request
from xbmcapi.utils.exceptions import ClientNotInitializedError, MissingRequiredParameterError


class StubClient:
    def __init__(self):
        self.sent: list[tuple] = []

    def send(self, method, params=None, on_success=None, on_error=None):
        self.sent.append((method, params, on_success, on_error))
        return "future"


def test_get_movies_sends_only_given_fields():
    client = StubClient()
    library = VideoLibrary(client)

    out = library.get_movies(properties=["title", "year"], limits={"start": 0, "end": 10})

    assert out == "future"
    method, params, _, _ = client.sent[0]
    assert method == "VideoLibrary.GetMovies"
    assert params == {"properties": ["title", "year"], "limits": {"start": 0, "end": 10}}


def test_missing_required_parameter_raises_before_sending():
    client = StubClient()
    library = VideoLibrary(client)

    with pytest.raises(MissingRequiredParameterError) as exc_info:
        library.set_episode_details(title="Pilot")

    assert exc_info.value.method == "VideoLibrary.SetEpisodeDetails"
    assert exc_info.value.parameter == "episode_id"
    assert client.sent == []


def test_required_parameter_passed_as_none_counts_as_missing():
    with pytest.raises(MissingRequiredParameterError):
        VideoLibrary(StubClient()).get_movie_details(movie_id=None)


def test_python_and_wire_names_both_accepted():
    library = VideoLibrary(StubClient())
    assert library.set_episode_details.build(episode_id=3, play_count=1) == {"episodeid": 3, "playcount": 1}
    assert library.set_episode_details.build(episodeid=3, lastplayed="") == {"episodeid": 3, "lastplayed": ""}


def test_explicit_none_is_kept_and_unset_dropped():
    library = VideoLibrary(StubClient())
    params = library.set_movie_details.build(movie_id=12, rating=None, year=UNSET)
    assert params == {"movieid": 12, "rating": None}


def test_positional_arguments_follow_required_then_optional_order():
    library = VideoLibrary(StubClient())
    assert library.get_episode_details.build(7, ["title"]) == {"episodeid": 7, "properties": ["title"]}


def test_build_rejects_unknown_and_duplicate_arguments():
    library = VideoLibrary(StubClient())
    with pytest.raises(TypeError, match="unexpected parameter"):
        library.get_movies.build(bogus=1)
    with pytest.raises(TypeError, match="multiple values"):
        library.get_episode_details.build(7, episode_id=7)
    with pytest.raises(TypeError, match="positional"):
        library.remove_movie.build(1, 2)


def test_by_object_extracts_known_keys():
    client = StubClient()
    library = VideoLibrary(client)
    details = {"movieid": 5, "title": "Alien", "play_count": 2, "file": "/movies/alien.mkv"}

    library.set_movie_details.by_object(details)

    method, params, _, _ = client.sent[0]
    assert method == "VideoLibrary.SetMovieDetails"
    assert params == {"movieid": 5, "title": "Alien", "playcount": 2}


def test_by_object_checks_required_fields():
    client = StubClient()
    with pytest.raises(MissingRequiredParameterError):
        VideoLibrary(client).set_tv_show_details.by_object({"title": "Lost"})
    assert client.sent == []


def test_handlers_are_forwarded_to_client():
    client = StubClient()
    ok, fail = (lambda result: None), (lambda error: None)
    VideoLibrary(client).scan(on_success=ok, on_error=fail)
    assert client.sent == [("VideoLibrary.Scan", {}, ok, fail)]


def test_files_methods_use_schema_keys():
    client = StubClient()
    files = Files(client)

    files.get_directory("/media/movies", media="video")
    files.get_file_details(file="/media/movies/alien.mkv", properties=["size"])

    assert client.sent[0][:2] == ("Files.GetDirectory", {"directory": "/media/movies", "media": "video"})
    assert client.sent[1][:2] == ("Files.GetFileDetails", {"file": "/media/movies/alien.mkv", "properties": ["size"]})
    with pytest.raises(MissingRequiredParameterError):
        files.get_sources()


def test_built_params_survive_the_wire():
    params = VideoLibrary(StubClient()).get_episodes.build(tv_show_id=1, season=2, properties=["title"])
    request = RpcRequest(id=11, method="VideoLibrary.GetEpisodes", params=params)
    assert decode_request(encode_request(request)).params == {"tvshowid": 1, "season": 2, "properties": ["title"]}


def test_namespace_requires_a_client():
    with pytest.raises(ClientNotInitializedError):
        VideoLibrary(None)


def test_remote_method_descriptor_on_custom_namespace():
    class Player(Namespace):
        name = "Player"
        get_active_players = RemoteMethod("Player.GetActivePlayers")
        play_pause = RemoteMethod("Player.PlayPause", required=(p("playerid", "player_id"),))

    client = StubClient()
    Player(client).play_pause(player_id=1)

    assert client.sent[0][:2] == ("Player.PlayPause", {"playerid": 1})
    assert list(Player.methods()) == ["get_active_players", "play_pause"]
    assert isinstance(Player.play_pause, RemoteMethod)


def test_every_declared_method_belongs_to_its_namespace():
    for ns in NAMESPACES.values():
        specs = ns.methods()
        assert specs, ns.name
        for spec in specs.values():
            assert spec.namespace == ns.name
            wires = [param.wire for param in spec.params]
            assert len(wires) == len(set(wires)), spec.method


def test_params_from_object_prefers_wire_key():
    spec = MethodSpec("X.Y", required=(p("movieid", "movie_id"),))
    assert params_from_object(spec, {"movieid": 1, "movie_id": 2}) == {"movieid": 1}


def test_build_params_with_no_arguments():
    assert build_params(MethodSpec("JSONRPC.Ping")) == {}


def test_get_movies_by_object_with_only_properties():
    client = StubClient()
    VideoLibrary(client).get_movies.by_object({"properties": ["title", "year"]})

    method, params, _, _ = client.sent[0]
    assert method == "VideoLibrary.GetMovies"
    assert params == {"properties": ["title", "year"]}
    assert not {"limits", "sort", "filter"} & set(params)
