"""Static named color table (CSS web colors plus Material palette shades).

Lookups are case-insensitive. Material names additionally ignore spaces,
dashes and underscores so ``"Blue 700"``, ``"blue-700"`` and ``"Blue700"``
resolve to the same entry.

Public API:
    lookup(name) -> (r, g, b, a) | None
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

__all__ = ["WEB_COLORS", "MATERIAL_COLORS", "lookup"]

RGBA = Tuple[int, int, int, float]


def _hex(value: str) -> RGBA:
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), 1.0


_WEB: dict[str, str] = {
    "aliceblue": "F0F8FF",
    "antiquewhite": "FAEBD7",
    "aqua": "00FFFF",
    "aquamarine": "7FFFD4",
    "azure": "F0FFFF",
    "beige": "F5F5DC",
    "bisque": "FFE4C4",
    "black": "000000",
    "blanchedalmond": "FFEBCD",
    "blue": "0000FF",
    "blueviolet": "8A2BE2",
    "brown": "A52A2A",
    "burlywood": "DEB887",
    "cadetblue": "5F9EA0",
    "chartreuse": "7FFF00",
    "chocolate": "D2691E",
    "coral": "FF7F50",
    "cornflowerblue": "6495ED",
    "cornsilk": "FFF8DC",
    "crimson": "DC143C",
    "cyan": "00FFFF",
    "darkblue": "00008B",
    "darkcyan": "008B8B",
    "darkgoldenrod": "B8860B",
    "darkgray": "A9A9A9",
    "darkgreen": "006400",
    "darkgrey": "A9A9A9",
    "darkkhaki": "BDB76B",
    "darkmagenta": "8B008B",
    "darkolivegreen": "556B2F",
    "darkorange": "FF8C00",
    "darkorchid": "9932CC",
    "darkred": "8B0000",
    "darksalmon": "E9967A",
    "darkseagreen": "8FBC8F",
    "darkslateblue": "483D8B",
    "darkslategray": "2F4F4F",
    "darkslategrey": "2F4F4F",
    "darkturquoise": "00CED1",
    "darkviolet": "9400D3",
    "deeppink": "FF1493",
    "deepskyblue": "00BFFF",
    "dimgray": "696969",
    "dimgrey": "696969",
    "dodgerblue": "1E90FF",
    "firebrick": "B22222",
    "floralwhite": "FFFAF0",
    "forestgreen": "228B22",
    "fuchsia": "FF00FF",
    "gainsboro": "DCDCDC",
    "ghostwhite": "F8F8FF",
    "gold": "FFD700",
    "goldenrod": "DAA520",
    "gray": "808080",
    "green": "008000",
    "greenyellow": "ADFF2F",
    "grey": "808080",
    "honeydew": "F0FFF0",
    "hotpink": "FF69B4",
    "indianred": "CD5C5C",
    "indigo": "4B0082",
    "ivory": "FFFFF0",
    "khaki": "F0E68C",
    "lavender": "E6E6FA",
    "lavenderblush": "FFF0F5",
    "lawngreen": "7CFC00",
    "lemonchiffon": "FFFACD",
    "lightblue": "ADD8E6",
    "lightcoral": "F08080",
    "lightcyan": "E0FFFF",
    "lightgoldenrodyellow": "FAFAD2",
    "lightgray": "D3D3D3",
    "lightgreen": "90EE90",
    "lightgrey": "D3D3D3",
    "lightpink": "FFB6C1",
    "lightsalmon": "FFA07A",
    "lightseagreen": "20B2AA",
    "lightskyblue": "87CEFA",
    "lightslategray": "778899",
    "lightslategrey": "778899",
    "lightsteelblue": "B0C4DE",
    "lightyellow": "FFFFE0",
    "lime": "00FF00",
    "limegreen": "32CD32",
    "linen": "FAF0E6",
    "magenta": "FF00FF",
    "maroon": "800000",
    "mediumaquamarine": "66CDAA",
    "mediumblue": "0000CD",
    "mediumorchid": "BA55D3",
    "mediumpurple": "9370DB",
    "mediumseagreen": "3CB371",
    "mediumslateblue": "7B68EE",
    "mediumspringgreen": "00FA9A",
    "mediumturquoise": "48D1CC",
    "mediumvioletred": "C71585",
    "midnightblue": "191970",
    "mintcream": "F5FFFA",
    "mistyrose": "FFE4E1",
    "moccasin": "FFE4B5",
    "navajowhite": "FFDEAD",
    "navy": "000080",
    "oldlace": "FDF5E6",
    "olive": "808000",
    "olivedrab": "6B8E23",
    "orange": "FFA500",
    "orangered": "FF4500",
    "orchid": "DA70D6",
    "palegoldenrod": "EEE8AA",
    "palegreen": "98FB98",
    "paleturquoise": "AFEEEE",
    "palevioletred": "DB7093",
    "papayawhip": "FFEFD5",
    "peachpuff": "FFDAB9",
    "peru": "CD853F",
    "pink": "FFC0CB",
    "plum": "DDA0DD",
    "powderblue": "B0E0E6",
    "purple": "800080",
    "rebeccapurple": "663399",
    "red": "FF0000",
    "rosybrown": "BC8F8F",
    "royalblue": "4169E1",
    "saddlebrown": "8B4513",
    "salmon": "FA8072",
    "sandybrown": "F4A460",
    "seagreen": "2E8B57",
    "seashell": "FFF5EE",
    "sienna": "A0522D",
    "silver": "C0C0C0",
    "skyblue": "87CEEB",
    "slateblue": "6A5ACD",
    "slategray": "708090",
    "slategrey": "708090",
    "snow": "FFFAFA",
    "springgreen": "00FF7F",
    "steelblue": "4682B4",
    "tan": "D2B48C",
    "teal": "008080",
    "thistle": "D8BFD8",
    "tomato": "FF6347",
    "turquoise": "40E0D0",
    "violet": "EE82EE",
    "wheat": "F5DEB3",
    "white": "FFFFFF",
    "whitesmoke": "F5F5F5",
    "yellow": "FFFF00",
    "yellowgreen": "9ACD32",
}

# Material shades used by the default brand plus their immediate neighbours.
_MATERIAL: dict[str, str] = {
    "red50": "FFEBEE",
    "red100": "FFCDD2",
    "red200": "EF9A9A",
    "red300": "E57373",
    "red400": "EF5350",
    "red500": "F44336",
    "red600": "E53935",
    "red700": "D32F2F",
    "red800": "C62828",
    "red900": "B71C1C",
    "reda100": "FF8A80",
    "reda200": "FF5252",
    "reda400": "FF1744",
    "reda700": "D50000",
    "blue50": "E3F2FD",
    "blue100": "BBDEFB",
    "blue200": "90CAF9",
    "blue300": "64B5F6",
    "blue400": "42A5F5",
    "blue500": "2196F3",
    "blue600": "1E88E5",
    "blue700": "1976D2",
    "blue800": "1565C0",
    "blue900": "0D47A1",
    "bluea100": "82B1FF",
    "bluea200": "448AFF",
    "bluea400": "2979FF",
    "bluea700": "2962FF",
    "lightblue300": "4FC3F7",
    "lightblue500": "03A9F4",
    "lightblue700": "0288D1",
    "lightbluea700": "0091EA",
    "indigo300": "7986CB",
    "indigo500": "3F51B5",
    "indigo600": "3949AB",
    "indigo700": "303F9F",
    "green300": "81C784",
    "green500": "4CAF50",
    "green600": "43A047",
    "green700": "388E3C",
    "green800": "2E7D32",
    "teal300": "4DB6AC",
    "teal500": "009688",
    "teal600": "00897B",
    "teal700": "00796B",
    "amber300": "FFD54F",
    "amber500": "FFC107",
    "amber700": "FFA000",
    "yellow500": "FFEB3B",
    "yellowa400": "FFEA00",
    "lime500": "CDDC39",
    "limea200": "EEFF41",
    "purple500": "9C27B0",
    "purple700": "7B1FA2",
    "purple800": "6A1B9A",
    "grey50": "FAFAFA",
    "grey100": "F5F5F5",
    "grey200": "EEEEEE",
    "grey300": "E0E0E0",
    "grey400": "BDBDBD",
    "grey500": "9E9E9E",
    "grey600": "757575",
    "grey700": "616161",
    "grey800": "424242",
    "grey900": "212121",
}

WEB_COLORS: Mapping[str, RGBA] = MappingProxyType(
    {**{k: _hex(v) for k, v in _WEB.items()}, "transparent": (0, 0, 0, 0.0)}
)
MATERIAL_COLORS: Mapping[str, RGBA] = MappingProxyType({k: _hex(v) for k, v in _MATERIAL.items()})


def _material_key(name: str) -> str:
    return name.strip().lower().replace(" ", "").replace("-", "").replace("_", "")


def lookup(name: str) -> Optional[RGBA]:
    """Resolve a color name to an RGBA tuple, or None when unknown."""
    key = name.strip().lower()
    if key in WEB_COLORS:
        return WEB_COLORS[key]
    return MATERIAL_COLORS.get(_material_key(name))
