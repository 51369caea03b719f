"""Calendar, web and colour tables."""

from __future__ import annotations

from typing import Any, Dict, List

__all__ = ["COLOR_NAMES", "MONTHS", "TLDS"]

# ``numeric`` is zero padded, ``days`` ignores leap years.
MONTHS: List[Dict[str, Any]] = [
    {"name": "January", "short_name": "Jan", "numeric": "01", "days": 31},
    {"name": "February", "short_name": "Feb", "numeric": "02", "days": 28},
    {"name": "March", "short_name": "Mar", "numeric": "03", "days": 31},
    {"name": "April", "short_name": "Apr", "numeric": "04", "days": 30},
    {"name": "May", "short_name": "May", "numeric": "05", "days": 31},
    {"name": "June", "short_name": "Jun", "numeric": "06", "days": 30},
    {"name": "July", "short_name": "Jul", "numeric": "07", "days": 31},
    {"name": "August", "short_name": "Aug", "numeric": "08", "days": 31},
    {"name": "September", "short_name": "Sep", "numeric": "09", "days": 30},
    {"name": "October", "short_name": "Oct", "numeric": "10", "days": 31},
    {"name": "November", "short_name": "Nov", "numeric": "11", "days": 30},
    {"name": "December", "short_name": "Dec", "numeric": "12", "days": 31},
]

TLDS: List[str] = """
com org edu gov co.uk net io ac ad ae af ag ai al am ao aq ar as at au aw ax az
ba bb bd be bf bg bh bi bj bm bn bo br bs bt bw by bz ca cc cd cf cg ch ci ck
cl cm cn co cr cu cv cw cx cy cz de dj dk dm do dz ec ee eg er es et eu fi fj
fk fm fo fr ga gb gd ge gf gg gh gi gl gm gn gp gq gr gs gt gu gw gy hk hm hn
hr ht hu id ie il im in iq ir is it je jm jo jp ke kg kh ki km kn kp kr kw ky
kz la lb lc li lk lr ls lt lu lv ly ma mc md me mg mh mk ml mm mn mo mp mq mr
ms mt mu mv mw mx my mz na nc ne nf ng ni nl no np nr nu nz om pa pe pf pg ph
pk pl pm pn pr ps pt pw py qa re ro rs ru rw sa sb sc sd se sg sh si sk sl sm
sn so sr ss st sv sx sy sz tc td tf tg th tj tk tl tm tn to tr tt tv tw tz ua
ug us uy uz va vc ve vg vi vn vu wf ws ye yt za zm zw
""".split()

COLOR_NAMES: List[str] = """
AliceBlue Black Navy DarkBlue MediumBlue Blue DarkGreen Green Teal DarkCyan
DeepSkyBlue DarkTurquoise MediumSpringGreen Lime SpringGreen Aqua Cyan
MidnightBlue DodgerBlue LightSeaGreen ForestGreen SeaGreen DarkSlateGray
LimeGreen MediumSeaGreen Turquoise RoyalBlue SteelBlue DarkSlateBlue
MediumTurquoise Indigo DarkOliveGreen CadetBlue CornflowerBlue RebeccaPurple
MediumAquaMarine DimGray SlateBlue OliveDrab SlateGray LightSlateGray
MediumSlateBlue LawnGreen Chartreuse Aquamarine Maroon Purple Olive Gray
SkyBlue LightSkyBlue BlueViolet DarkRed DarkMagenta SaddleBrown Ivory White
DarkSeaGreen LightGreen MediumPurple DarkViolet PaleGreen DarkOrchid
YellowGreen Sienna Brown DarkGray LightBlue GreenYellow PaleTurquoise
LightSteelBlue PowderBlue FireBrick DarkGoldenRod MediumOrchid RosyBrown
DarkKhaki Silver MediumVioletRed IndianRed Peru Chocolate Tan LightGray
Thistle Orchid GoldenRod PaleVioletRed Crimson Gainsboro Plum BurlyWood
LightCyan Lavender DarkSalmon Violet PaleGoldenRod LightCoral Khaki
HoneyDew Azure SandyBrown Wheat Beige WhiteSmoke MintCream
GhostWhite Salmon AntiqueWhite Linen LightGoldenRodYellow OldLace Red
Fuchsia Magenta DeepPink OrangeRed Tomato HotPink Coral DarkOrange
LightSalmon Orange LightPink Pink Gold PeachPuff NavajoWhite Moccasin
Bisque MistyRose BlanchedAlmond PapayaWhip LavenderBlush SeaShell Cornsilk
LemonChiffon FloralWhite Snow Yellow LightYellow
""".split()
