from __future__ import annotations

import zipfile
from pathlib import Path

SAMPLE_LANG = """## Comments can be added anywhere on a line.
pack.name=Ocean Explorers
pack.description=Explore the reef and learn about sea life.
action.interact.talk=Talk to the marine biologist.
npc.greeting=§2Welcome to the research station!§r Please look around.
npc.task=Find three different types of coral. Then report back to me.
npc.locked=###{LOCKED} This door opens later (after the quiz).
tile.coral.name=Coral
count.value=12.5
"""

SAMPLE_LANG_SHORT = """pack.name=Ocean Explorers
npc.hint=Swim to the blue buoy.
"""


def write_minimal_mcworld(
    path: Path, entries: dict[str, str], directories: list[str] | None = None
) -> None:
    """Create a minimal world archive with the given file entries."""
    with zipfile.ZipFile(path, "w") as zf:
        for directory in directories or []:
            zf.writestr(directory.rstrip("/") + "/", "")
        zf.writestr("level.dat", b"\x00\x01binary")
        zf.writestr("levelname.txt", "Ocean Explorers")
        for name, body in entries.items():
            zf.writestr(name, body)
