"""Files namespace."""

from __future__ import annotations

from xbmcapi.methods.builder import Namespace, RemoteMethod
from xbmcapi.methods.schema import LIMITS, PROPERTIES, SORT, p

MEDIA = p("media")


class Files(Namespace):
    name = "Files"

    download = RemoteMethod("Files.Download", required=(p("path"),))
    prepare_download = RemoteMethod(
        "Files.PrepareDownload",
        required=(p("path"),),
        doc="Ask the server for a download URL for path; the result carries the protocol and details.",
    )
    get_directory = RemoteMethod(
        "Files.GetDirectory",
        required=(p("directory"),),
        optional=(MEDIA, PROPERTIES, SORT),
    )
    get_file_details = RemoteMethod(
        "Files.GetFileDetails",
        required=(p("file"),),
        optional=(MEDIA, PROPERTIES),
    )
    get_sources = RemoteMethod(
        "Files.GetSources",
        required=(MEDIA,),
        optional=(LIMITS, SORT),
        doc="Media sources of one type: video, music, pictures, files or programs.",
    )
