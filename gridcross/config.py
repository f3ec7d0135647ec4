"""Configuration helpers for the layout pipeline."""

from __future__ import annotations

import copy

from .model import LayoutOptions

_LAYOUT_OPTIONS = LayoutOptions()


def get_layout_options() -> LayoutOptions:
    return copy.deepcopy(_LAYOUT_OPTIONS)


def set_layout_options(options: LayoutOptions) -> None:
    global _LAYOUT_OPTIONS
    _LAYOUT_OPTIONS = copy.deepcopy(options)
