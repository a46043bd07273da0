"""
Identity tags for generators, effects and resize strategies.

The enums are plain tags; numeric ids and display names live in the
lookup tables below so the tags stay free of formatting concerns.
"""

from enum import Enum, auto


class GeneratorName(Enum):
    PASSTHRU = auto()
    BLINKENLIGHTS = auto()
    IMAGE = auto()
    PLASMA = auto()
    COLOR_SCROLL = auto()
    FIRE = auto()
    METABALLS = auto()
    PIXELIMAGE = auto()
    COLOR_FADE = auto()
    TEXTWRITER = auto()
    DROPS = auto()
    CELL = auto()
    PLASMA_ADVANCED = auto()
    FFT = auto()
    SCREEN_CAPTURE = auto()
    OSC_GEN1 = auto()
    OSC_GEN2 = auto()
    VISUAL_ZERO = auto()
    NOISE = auto()
    GAME_OF_LIFE = auto()


class EffectName(Enum):
    VOLUMINIZE = auto()


class ResizeName(Enum):
    """How a generator buffer is resampled onto the output device."""

    PIXEL_RESIZE = auto()
    QUALITY_RESIZE = auto()


# Stable ids used by remote-control and preset storage.
GENERATOR_IDS = {
    GeneratorName.PASSTHRU: 0,
    GeneratorName.BLINKENLIGHTS: 1,
    GeneratorName.IMAGE: 2,
    GeneratorName.PLASMA: 3,
    GeneratorName.COLOR_SCROLL: 4,
    GeneratorName.FIRE: 5,
    GeneratorName.METABALLS: 6,
    GeneratorName.PIXELIMAGE: 7,
    GeneratorName.COLOR_FADE: 8,
    GeneratorName.TEXTWRITER: 9,
    GeneratorName.DROPS: 10,
    GeneratorName.CELL: 11,
    GeneratorName.PLASMA_ADVANCED: 12,
    GeneratorName.FFT: 13,
    GeneratorName.SCREEN_CAPTURE: 14,
    GeneratorName.OSC_GEN1: 15,
    GeneratorName.OSC_GEN2: 16,
    GeneratorName.VISUAL_ZERO: 17,
    GeneratorName.NOISE: 18,
    GeneratorName.GAME_OF_LIFE: 19,
}

EFFECT_IDS = {
    EffectName.VOLUMINIZE: 0,
}

_GENERATORS_BY_ID = {v: k for k, v in GENERATOR_IDS.items()}


def generator_id(name: GeneratorName) -> int:
    return GENERATOR_IDS[name]


def generator_by_id(ident: int) -> GeneratorName:
    """Reverse lookup of a generator id."""
    try:
        return _GENERATORS_BY_ID[ident]
    except KeyError:
        raise ValueError(f"Unknown generator id: {ident}") from None


def effect_id(name: EffectName) -> int:
    return EFFECT_IDS[name]


def display_name(member: Enum) -> str:
    """Human readable label, e.g. GAME_OF_LIFE -> 'Game Of Life'."""
    return " ".join(word.capitalize() for word in member.name.split("_"))
