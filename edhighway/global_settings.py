"""The application's global settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from edhighway.settings import BoolSetting, ComboSetting, FileSetting, IntSetting, SettingsMap
from edhighway.settings_store import SettingsStore
from edhighway.stylesheets import StyleSheetsLoader

PathLike = Union[str, "os.PathLike[str]"]


def make_global_settings(
    store: Optional[SettingsStore] = None,
    home: Optional[PathLike] = None,
    styles: Optional[StyleSheetsLoader] = None,
) -> SettingsMap:
    """Build every global setting, all kept in ``store``.

    Keys are fixed: other code reads them by name and stored values are found by them.
    """
    store = store if store is not None else SettingsStore()
    home_dir = os.fspath(home) if home is not None else str(Path.home())
    styles = styles if styles is not None else StyleSheetsLoader()

    return SettingsMap(
        [
            IntSetting(
                "01_1Int_Revertlen", 10,
                "Amount to keep of from/to system's names (each).",
                "We store last routes built from/to fields. Those defines how many to keep of "
                "each.\nYou can easy revert back later to one of it.",
                3, 30, store=store,
            ),
            IntSetting(
                "01_SYS_NAME_DROP_DELAY", 100,
                "Dropdown system name min delay (ms).",
                "This value defines minimal delay before systems' names will be pulled from "
                "website.\nSetting will take effect after restart.",
                25, 1200, store=store,
            ),
            IntSetting(
                "02_Int_SHIP_LY", 70,
                "Default jump range (ly)",
                "This value defines rounded ship's jump range (ly) to be used as default for "
                "new plot.",
                5, 500, store=store,
            ),
            IntSetting(
                "03_Int_PRECISE", 70,
                "Route plotter's precision (%).",
                "Increase this to reduce how far off the direct route the system will plot to "
                "get to a neutron star (An efficiency of 100 will not deviate from the direct "
                "route in order to plot from A to B and will most likely break down the "
                "journey into 20000 LY blocks).",
                5, 100, store=store,
            ),
            IntSetting(
                "03_Int_UNDO", 20,
                "Undo limit for route optimizer.",
                "Sets how many stages can be undone in route optimizer tab. Consumes RAM.",
                5, 100, store=store,
            ),
            IntSetting(
                "04_Int_tritiumstep", 704,
                "Tritium +/- step.",
                "The step of how much to add/remove tritium in FC calc per arrows click "
                "(cargo ship size). In tonnes.",
                1, 2000, store=store,
            ),
            FileSetting(
                "70_LogsFolder", home_dir,
                "Elite's Logs Folder",
                "Set a folder where *.log files are stored by E.D.",
                "Select logs' folder", store=store,
            ),
            BoolSetting(
                "71_TrackEnable", False,
                "Enable logs' tracking.",
                "If enabled starts tracking of the log files for other abilities except "
                "routes.\nRestart is required.",
                store,
            ),
            ComboSetting(
                "1000_VisualStyleSheet", 0,
                "App Style",
                "You can select on of pre-defined visual styles here.",
                styles, store=store,
            ),
            BoolSetting(
                "1010_BiggerFont", False,
                "Bigger Font (restart)",
                "Use bigger font. Restart is required to apply changes.",
                store,
            ),
        ]
    )