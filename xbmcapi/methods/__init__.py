"""Remote method namespaces."""

from .application import GUI, JSONRPC, Addons, Application
from .audio_library import AudioLibrary
from .builder import BoundRemoteMethod, Namespace, RemoteMethod, build_params, params_from_object
from .files import Files
from .schema import UNSET, MethodSpec, Param
from .video_library import VideoLibrary

# Client attribute -> namespace class.
NAMESPACES: dict[str, type[Namespace]] = {
    "video_library": VideoLibrary,
    "audio_library": AudioLibrary,
    "files": Files,
    "application": Application,
    "gui": GUI,
    "addons": Addons,
    "jsonrpc": JSONRPC,
}

__all__ = [
    "NAMESPACES",
    "UNSET",
    "Addons",
    "Application",
    "AudioLibrary",
    "BoundRemoteMethod",
    "Files",
    "GUI",
    "JSONRPC",
    "MethodSpec",
    "Namespace",
    "Param",
    "RemoteMethod",
    "VideoLibrary",
    "build_params",
    "params_from_object",
]
