"""ASCII dog sprites per level, with mood features filled in at render time.

Placeholders: ``{eye}`` (used for both eyes), ``{tail}`` and ``{mark}``.
"""

from __future__ import annotations

PET_SPRITES = {
    # Puppy
    1: (
        "   ∧_∧  {mark}",
        "  ({eye}ᴥ{eye})",
        " ╭─∪─∪─╮",
        " │ ▒▒▒ │{tail}",
        " ╰─────╯",
        "  ││ ││",
    ),
    # Young dog
    2: (
        "   ∧_∧    {mark}",
        "  ( {eye}ᴥ{eye})   ∧",
        " ╭─╰──╯─╮ ╱ ╲",
        " │ ▒▒▒▒ │╱   {tail}",
        " │ ▓▓▓▓ │",
        " ╰──────╯",
        "  ││  ││",
    ),
    # Adult dog
    3: (
        "       ╭───╮   {mark}",
        " ∧_∧   │   │  ∧",
        "( {eye}ᴥ{eye}) ╰───╯ ╱ ╲",
        "╭─╰───╯──╮   ╱   ╲",
        "│ ▓░▒▒▒░ │──╱  {tail}",
        "│ ▒░▓▓░▒ │",
        "│ ░▒▒▒▓░ │",
        "╰────────╯",
        " ││    ││",
    ),
    # Cool dog
    4: (
        "       ╭───╮   {mark}",
        " ∧_∧   │   │  ∧",
        "(▀{eye}ᴥ{eye}▀)╰───╯ ╱ ╲",
        "╭─╰───╯──╮   ╱   ╲",
        "│ ▓░▒▒▒░ │──╱  {tail}",
        "│ ▒░▓▓░▒ │  ♪",
        "│ ░▒▒▒▓░ │",
        "╰────────╯",
        " ││    ││",
    ),
    # Legendary doge
    5: (
        "     ╔═══╗      {mark}",
        "     ║ ♕ ║",
        " ★   ╚╦═╦╝  ★  ∧",
        " ∧_∧ ╭┴─┴╮    ╱ ╲  ✦",
        "( {eye}ᴥ{eye})│   │   ╱   ╲",
        "╭─╰───╯╰───╯──╮  {tail}",
        "│ ▓░▒▒▒░▓░▒▒ │",
        "│ ▒░▓▓░▒▒░▓▓ │  ♪",
        "│ ░▒▒▒▓░░▒▒▒ │",
        "╰─────────────╯",
        " ││      ││   ✦",
    ),
}

SPRITE_FEATURES = {
    'excited': {'eye': 'ᵔ', 'tail': '∼', 'mark': '♥'},
    'happy': {'eye': '◕', 'tail': '∼', 'mark': ''},
    'neutral': {'eye': '•', 'tail': '', 'mark': ''},
    'sad': {'eye': '╥', 'tail': '', 'mark': ''},
    'sick': {'eye': '×', 'tail': '', 'mark': '~'},
    'sleeping': {'eye': '─', 'tail': '', 'mark': 'Zz'},
}

# Sunglasses stay on unless the dog is asleep or unwell
SPRITE_EYE_OVERRIDES = {
    4: {'excited': '■', 'happy': '■', 'neutral': '■', 'sad': '■'},
}
