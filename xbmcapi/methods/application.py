"""Application, GUI, Addons and JSONRPC namespaces."""

from __future__ import annotations

from xbmcapi.methods.builder import Namespace, RemoteMethod
from xbmcapi.methods.schema import LIMITS, PROPERTIES, p

ADDON_ID = p("addonid", "addon_id")


class Application(Namespace):
    name = "Application"

    get_properties = RemoteMethod("Application.GetProperties", required=(PROPERTIES,))
    quit = RemoteMethod("Application.Quit")
    set_mute = RemoteMethod("Application.SetMute", required=(p("mute"),), doc="mute is a bool or \"toggle\".")
    set_volume = RemoteMethod(
        "Application.SetVolume",
        required=(p("volume"),),
        doc="volume is 0-100 or \"increment\"/\"decrement\".",
    )


class GUI(Namespace):
    name = "GUI"

    activate_window = RemoteMethod("GUI.ActivateWindow", required=(p("window"),), optional=(p("parameters"),))
    get_properties = RemoteMethod("GUI.GetProperties", required=(PROPERTIES,))
    set_fullscreen = RemoteMethod("GUI.SetFullscreen", required=(p("fullscreen"),))
    show_notification = RemoteMethod(
        "GUI.ShowNotification",
        required=(p("title"), p("message")),
        optional=(p("image"), p("displaytime", "display_time")),
    )


class Addons(Namespace):
    name = "Addons"

    execute_addon = RemoteMethod(
        "Addons.ExecuteAddon", required=(ADDON_ID,), optional=(p("params"), p("wait")),
    )
    get_addon_details = RemoteMethod("Addons.GetAddonDetails", required=(ADDON_ID,), optional=(PROPERTIES,))
    get_addons = RemoteMethod(
        "Addons.GetAddons",
        optional=(p("type"), p("content"), p("enabled"), PROPERTIES, LIMITS),
    )
    set_addon_enabled = RemoteMethod(
        "Addons.SetAddonEnabled", required=(ADDON_ID, p("enabled")),
    )


class JSONRPC(Namespace):
    name = "JSONRPC"

    ping = RemoteMethod("JSONRPC.Ping", doc="Returns \"pong\".")
    version = RemoteMethod("JSONRPC.Version")
    permission = RemoteMethod("JSONRPC.Permission")
    introspect = RemoteMethod(
        "JSONRPC.Introspect",
        optional=(
            p("getdescriptions", "get_descriptions"),
            p("getmetadata", "get_metadata"),
            p("filterbytransport", "filter_by_transport"),
            p("filter"),
        ),
    )
    notify_all = RemoteMethod(
        "JSONRPC.NotifyAll", required=(p("sender"), p("message")), optional=(p("data"),),
    )
