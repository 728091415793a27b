"""Category configuration: loading, validation and the built-in defaults."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any


class ConfigError(Exception):
    """Raised when a configuration cannot be read, parsed or validated."""


@dataclass
class CategoryDefinition:
    """One category with its matching keywords and subcategory keywords."""

    name: str
    priority: int
    keywords: list[str] = field(default_factory=list)
    subcategories: dict[str, list[str]] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "priority": self.priority,
            "keywords": list(self.keywords),
        }
        if self.subcategories:
            data["subcategories"] = {k: list(v) for k, v in self.subcategories.items()}
        return data


@dataclass
class CategoryConfig:
    """The full set of categories used for classification."""

    categories: list[CategoryDefinition] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of this configuration."""
        return {"categories": [cat.to_dict() for cat in self.categories]}


def _string_list(value: Any, what: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{what} must be a list of strings")
    return list(value)


def _category_from_dict(data: Any) -> CategoryDefinition:
    if not isinstance(data, dict):
        raise ConfigError("each category must be an object")
    name = data.get("name", "")
    if name is None:
        name = ""
    if not isinstance(name, str):
        raise ConfigError("category name must be a string")
    priority = data.get("priority", 0)
    if priority is None:
        priority = 0
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise ConfigError(f"priority of category {name!r} must be an integer")
    keywords = _string_list(data.get("keywords"), f"keywords of category {name!r}")
    raw_subs = data.get("subcategories")
    subcategories: dict[str, list[str]] | None = None
    if raw_subs is not None:
        if not isinstance(raw_subs, dict):
            raise ConfigError(f"subcategories of category {name!r} must be an object")
        subcategories = {
            sub: _string_list(words, f"subcategory {sub!r} of category {name!r}")
            for sub, words in raw_subs.items()
        }
    return CategoryDefinition(name, priority, keywords, subcategories)


def config_from_dict(data: Any) -> CategoryConfig:
    """Build a configuration from its decoded JSON form, without validating it."""
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")
    raw = data.get("categories")
    if raw is None:
        return CategoryConfig([])
    if not isinstance(raw, list):
        raise ConfigError("categories must be a list")
    return CategoryConfig([_category_from_dict(item) for item in raw])


def validate_config(config: CategoryConfig) -> None:
    """Raise ConfigError describing the first problem found in the configuration."""
    if not config.categories:
        raise ConfigError("configuration must contain at least one category")
    seen: set[str] = set()
    for cat in config.categories:
        if not cat.name:
            raise ConfigError("category name cannot be empty")
        if cat.name in seen:
            raise ConfigError(f"duplicate category name: {cat.name}")
        seen.add(cat.name)
        if not cat.keywords:
            raise ConfigError(f"category {cat.name} must have at least one keyword")


def load_config(config_path: str | os.PathLike[str] | None) -> CategoryConfig:
    """Load a configuration from a JSON file, or the defaults when no path is given."""
    if not config_path:
        return default_config()
    try:
        with open(config_path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc
    try:
        config = config_from_dict(json.loads(text))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc
    except ConfigError as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc
    try:
        validate_config(config)
    except ConfigError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
    return config


_DEFAULT_CATEGORIES: list[tuple[str, list[str], dict[str, list[str]]]] = [
    (
        "oneshots",
        ["oneshot", "one-shot", "hit", "stab", "shot"],
        {
            "bass": ["bass shot", "bass_shot", "bass stab", "bass_stab", "bass hit", "bass_hit", "bassshot"],
            "synth": ["synth shot", "synth_shot", "synth stab", "synth_stab", "synthshot"],
            "vocal": ["vocal shot", "vocal_shot"],
            "drum": ["drum hit", "drum_hit", "drum stab", "drum_stab"],
            "melodic": ["melodic stab", "melodic_stab"],
            "general": ["oneshot", "one-shot", "one_shot", "hit", "stab", "shot"],
        },
    ),
    (
        "drums",
        [
            "kick", "snare", "hihat", "hi-hat", "hi_hat", "hi hat", "hats", "clap", "tom",
            "cymbal", "crash", "ride", "drum", "bd", "sd", "hh", "closed hat", "open hat",
            "hat closed", "hat open", "sidestick", "side stick", "rimshot", "rim shot", "cup",
            "rim", "cym", "china", "crossstick", "cross stick",
        ],
        {
            "kick": ["kick", "bd"],
            "snare": ["snare", "sd"],
            "hihat": ["hihat", "hi-hat", "hi_hat", "hi hat", "hh", "hats", "closed hat", "open hat", "hat closed", "hat open"],
            "clap": ["clap"],
            "tom": ["tom", "toms"],
            "cymbal": ["cymbal", "crash", "ride", "cup", "cym", "china"],
            "rimshot": ["sidestick", "side stick", "rimshot", "rim shot", "crossstick", "cross stick", "rim"],
            "fill": ["drum fill", "drum_fill"],
            "loop": ["drum loop", "drum_loop", "beat loop", "beat_loop"],
            "ethnic": ["ethnic drum", "ethnic_drum", "indian drum", "indian_drum", "tribal drum", "tribal_drum"],
            "acoustic": ["acoustic drum", "acoustic_drum"],
            "cinematic": ["cinematic drum", "cinematic_drum", "cinematic"],
        },
    ),
    (
        "bass",
        ["bass", "sub", "808", "909"],
        {
            "sub": ["sub", "subbass", "sub-bass", "sub_bass"],
            "808": ["808"],
            "909": ["909"],
            "growl": ["growl", "wobble", "whomp", "freak"],
            "loop": ["bass loop", "bass_loop", "bassloop"],
            "psy": ["psy", "psy bass", "psy_bass", "psybass"],
            "pluck": ["bass pluck", "bass_pluck", "pluck bass", "pluck_bass", "plucked bass", "plucked_bass"],
        },
    ),
    (
        "percussion",
        [
            "perc", "percussion", "shaker", "conga", "bongo", "tambourine", "tamb", "cowbell",
            "cabasa", "clave", "claves", "agogo", "timbale", "timpani", "maracas", "maraca",
            "woodblock", "wood block", "triangle", "guiro", "djembe", "udu", "brush", "chk", "cowb",
        ],
        {
            "shaker": ["shaker", "shake"],
            "conga": ["conga", "congas"],
            "bongo": ["bongo"],
            "tambourine": ["tambourine", "tamb"],
            "cowbell": ["cowbell", "cow bell", "cowb"],
            "cabasa": ["cabasa"],
            "clave": ["clave", "claves"],
            "agogo": ["agogo"],
            "timbale": ["timbale"],
            "timpani": ["timpani"],
            "maracas": ["maracas", "maraca"],
            "woodblock": ["woodblock", "wood block"],
            "triangle": ["triangle"],
            "guiro": ["guiro"],
            "djembe": ["djembe"],
            "udu": ["udu"],
            "brush": ["brush"],
            "miscellaneous": ["chk"],
            "high": ["hi perc", "hi_perc", "high perc", "high_perc", "high percussion", "high_percussion", "percussion high", "percussion_high"],
            "low": ["low perc", "low_perc", "low percussion", "low_percussion", "percussion low", "percussion_low"],
            "mid": ["mid perc", "mid_perc", "mid percussion", "mid_percussion", "percussion mid", "percussion_mid"],
            "loop": ["percussion loop", "percussion_loop", "perc loop", "perc_loop"],
            "rimshot": ["rimshot", "rim shot", "rim_shot", "rim"],
            "clank": ["clank", "metal perc", "metal_perc", "metallic"],
            "wood": ["wooden", "wood perc", "wood_perc", "wooden perc", "wooden_perc"],
            "slap": ["slap", "percussion slap", "percussion_slap"],
            "knock": ["knock", "percussion knock", "percussion_knock"],
            "beatbox": ["beatbox", "beat box", "beat_box"],
            "ethnic": ["ethnic perc", "ethnic_perc", "tribal perc", "tribal_perc", "african perc", "african_perc", "indian perc", "indian_perc"],
        },
    ),
    (
        "vocals",
        ["vocal", "vox", "voice", "acapella", "choir", "shout", "chant", "adlib"],
        {
            "vocal": ["vocal"],
            "vox": ["vox"],
            "voice": ["voice"],
            "acapella": ["acapella"],
            "choir": ["choir", "chorus", "ensemble"],
            "shout": ["shout", "yell", "scream"],
            "chant": ["chant", "chanting"],
            "adlib": ["adlib", "ad-lib", "ad lib"],
        },
    ),
    (
        "synth",
        ["synth", "lead", "pad", "pluck", "saw", "square", "sine"],
        {
            "lead": ["lead", "leads", "synth lead", "synth_lead"],
            "pad": ["pad", "pads", "synth pad", "synth_pad"],
            "pluck": ["pluck", "plucks", "plucked", "synth pluck", "synth_pluck"],
            "saw": ["saw", "sawtooth"],
            "square": ["square"],
            "sine": ["sine"],
            "loop": ["synth loop", "synth_loop", "synthloop"],
            "reverse": ["reverse synth", "reverse_synth", "reversed"],
            "fill": ["synth fill", "synth_fill", "synthfill"],
            "arp": ["arp", "arpeggio", "arpeggiated"],
            "blip": ["blip", "beep", "bleep"],
        },
    ),
    (
        "melodic",
        [
            "piano", "guitar", "bell", "marimba", "xylophone", "harp", "strings", "violin",
            "cello", "flute", "horn", "trumpet", "sax", "saxophone", "organ", "keys", "brass",
            "woodwind", "arpeggio", "arpeggiated", "melody", "oud", "bouzouki", "duduk",
            "glissentar", "joombush", "mandolin", "mandolino", "wurli", "wurlitzer", "clav",
            "clavinet", "accordion", "chime", "chimes",
        ],
        {
            "piano": ["piano"],
            "guitar": ["guitar", "gtr", "acoustic guitar", "electric guitar"],
            "bell": ["bell", "chime", "chimes"],
            "marimba": ["marimba"],
            "xylophone": ["xylophone"],
            "harp": ["harp"],
            "strings": ["strings", "string", "violin", "cello", "viola"],
            "woodwind": ["flute", "clarinet", "oboe", "sax", "saxophone", "woodwind"],
            "brass": ["horn", "trumpet", "trombone", "brass"],
            "keys": ["organ", "keys", "keyboard", "wurli", "wurlitzer", "clav", "clavinet"],
            "oud": ["oud"],
            "bouzouki": ["bouzouki"],
            "duduk": ["duduk"],
            "glissentar": ["glissentar"],
            "joombush": ["joombush"],
            "mandolin": ["mandolin", "mandolino"],
            "accordion": ["accordion"],
        },
    ),
    (
        "fx",
        [
            "fx", "sfx", "riser", "downsweep", "whoosh", "impact", "sweep", "noise", "white",
            "reverse", "rev", "glitch", "tone", "envelope", "pulse", "ufo", "bleeps", "sync", "click",
        ],
        {
            "riser": ["riser", "uplift", "risefx"],
            "downsweep": ["downsweep"],
            "whoosh": ["whoosh"],
            "impact": ["impact", "boom", "slam"],
            "sweep": ["sweep", "uplifter"],
            "noise": ["noise", "white", "white noise", "pink noise"],
            "reverse": ["reverse", "rev"],
            "game": ["game", "video game"],
            "psy": ["psy", "psychedelic"],
            "transformer": ["transformer", "robot"],
            "laser": ["laser", "lazer"],
            "water": ["water", "splash", "ocean"],
            "glitch": ["glitch"],
            "tone": ["tone"],
            "envelope": ["envelope"],
            "pulse": ["pulse"],
            "ufo": ["ufo"],
            "blip": ["bleeps"],
            "sync": ["sync"],
            "click": ["click"],
        },
    ),
    (
        "transition",
        ["fill", "transition", "build", "buildup", "build-up", "breakdown", "break-down", "downlifter", "stop"],
        {
            "fill": ["fill"],
            "transition": ["transition"],
            "buildup": ["build", "buildup", "build-up"],
            "breakdown": ["breakdown", "break-down"],
            "downlifter": ["downlifter"],
            "stop": ["stop"],
        },
    ),
    (
        "ambiance",
        ["ambiance", "ambient", "atmosphere", "drone", "texture", "atmospheric"],
        {
            "dark": ["dark"],
            "bright": ["bright"],
            "space": ["space"],
            "nature": ["nature"],
            "industrial": ["industrial"],
        },
    ),
    (
        "foley",
        ["foley", "bird", "animal", "water", "splash", "scratch", "vinyl", "snap", "whistle", "ocean", "nature", "wind"],
        {
            "nature": ["bird", "wind"],
            "animal": ["animal"],
            "water": ["water", "splash", "ocean"],
            "vinyl": ["scratch", "vinyl"],
            "human": ["snap", "whistle"],
            "mechanical": ["mechanical"],
        },
    ),
    (
        "loops",
        ["loop", "phrase", "bar", "beat"],
        {
            "loop": ["loop"],
            "phrase": ["phrase"],
            "bar": ["bar"],
            "beat": ["beat"],
        },
    ),
]


def default_config() -> CategoryConfig:
    """Return a fresh copy of the built-in category configuration."""
    return CategoryConfig(
        [
            CategoryDefinition(
                name=name,
                priority=priority,
                keywords=list(keywords),
                subcategories={sub: list(words) for sub, words in subs.items()},
            )
            for priority, (name, keywords, subs) in enumerate(_DEFAULT_CATEGORIES, start=1)
        ]
    )