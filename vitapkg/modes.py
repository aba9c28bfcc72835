"""Content modes of the package list and the choices that depend on them."""

from __future__ import annotations

import enum
from collections.abc import Collection, Mapping


class Mode(enum.Enum):
    """Which catalogue the package list is showing."""

    GAMES = "games"
    DLCS = "dlcs"
    DEMOS = "demos"
    THEMES = "themes"
    PSM_GAMES = "psm_games"
    PSX_GAMES = "psx_games"
    PSP_GAMES = "psp_games"
    PSP_DLCS = "psp_dlcs"


class ContentType(enum.Enum):
    """Kind of content handled by the in-app downloader."""

    GAME = "game"
    DLC = "dlc"
    PSM_GAME = "psm_game"
    PSX_GAME = "psx_game"
    PSP_GAME = "psp_game"
    PSP_DLC = "psp_dlc"


class BgdlType(enum.Enum):
    """Kind of content handed to the system background downloader."""

    GAME = "game"
    DLC = "dlc"
    THEME = "theme"


_MODE_TO_TYPE = {
    Mode.GAMES: ContentType.GAME,
    Mode.DLCS: ContentType.DLC,
    Mode.PSM_GAMES: ContentType.PSM_GAME,
    Mode.PSX_GAMES: ContentType.PSX_GAME,
    Mode.PSP_GAMES: ContentType.PSP_GAME,
    Mode.PSP_DLCS: ContentType.PSP_DLC,
}

_MODE_TO_BGDL = {
    Mode.GAMES: BgdlType.GAME,
    Mode.DEMOS: BgdlType.GAME,
    Mode.DLCS: BgdlType.DLC,
    Mode.THEMES: BgdlType.THEME,
}

# Bit of each mode in the mask telling the menu which lists can be refreshed.
_REFRESH_BITS = {
    Mode.GAMES: 0,
    Mode.DLCS: 1,
    Mode.PSX_GAMES: 2,
    Mode.PSP_GAMES: 3,
    Mode.PSM_GAMES: 4,
    Mode.THEMES: 5,
    Mode.DEMOS: 6,
    Mode.PSP_DLCS: 7,
}

_PSP_PSX_MODES = frozenset({Mode.PSP_GAMES, Mode.PSP_DLCS, Mode.PSX_GAMES})


def mode_to_type(mode: Mode) -> ContentType:
    """Return the downloader content type for ``mode``.

    Demos and themes go through the background downloader and have no
    content type; asking for one raises :class:`ValueError`.
    """
    try:
        return _MODE_TO_TYPE[mode]
    except KeyError:
        raise ValueError(f"unsupported mode {mode}") from None


def mode_to_bgdl_type(mode: Mode) -> BgdlType:
    """Return the background-download type for ``mode``, or raise :class:`ValueError`."""
    try:
        return _MODE_TO_BGDL[mode]
    except KeyError:
        raise ValueError(f"unsupported bgdl mode {mode}") from None


def theme_is_installed(content_id: str, installed_themes: Collection[str]) -> bool:
    """Whether the theme with ``content_id`` is among ``installed_themes``.

    Installed themes are named by the content id without its seven
    character prefix and without the three characters after the title id.
    """
    if len(content_id) < 19:
        return False
    return content_id[7:16] + content_id[19:] in installed_themes


def refresh_mask(urls: Mapping[Mode, str]) -> int:
    """Bit mask with a bit set for every mode whose list URL is not empty."""
    mask = 0
    for mode, bit in _REFRESH_BITS.items():
        if urls.get(mode):
            mask |= 1 << bit
    return mask


def mode_partition(mode: Mode, psv_location: str, psp_psx_location: str) -> str:
    """Partition that content of ``mode`` is installed to."""
    return psp_psx_location if mode in _PSP_PSX_MODES else psv_location


def count_text(count: int, total: int) -> str:
    """Status line giving the number of listed items, and the total when filtered."""
    if count == total:
        return f"Count: {count}"
    return f"Count: {count} ({total})"


def refresh_text(action: str, updated: int, total: int) -> str:
    """Progress line shown while the lists are refreshed."""
    if total == 0:
        return f"{action}..."
    return f"{action}... {updated * 100 // total}%"