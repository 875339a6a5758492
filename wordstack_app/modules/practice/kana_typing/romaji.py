"""
Romanization table for kana typing practice.

Maps each typing unit (a single mora, a contracted mora, small kana, the
geminate marker, the moraic nasal, or a full-width symbol) to the ASCII
spellings a learner may type for it. Built once at import and read-only.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

GEMINATE_MARKER = "っ"
MORAIC_NASAL = "ん"

_ROMAJI = {
    # vowels
    "あ": ("a",),
    "い": ("i",),
    "う": ("u", "wu", "whu"),
    "え": ("e",),
    "お": ("o",),
    # k
    "か": ("ka", "ca"),
    "き": ("ki",),
    "く": ("ku", "cu"),
    "け": ("ke",),
    "こ": ("ko", "co"),
    # s
    "さ": ("sa",),
    "し": ("si", "shi", "ci"),
    "す": ("su",),
    "せ": ("se", "ce"),
    "そ": ("so",),
    # t
    "た": ("ta",),
    "ち": ("ti", "chi"),
    "つ": ("tu", "tsu"),
    "て": ("te",),
    "と": ("to",),
    # n
    "な": ("na",),
    "に": ("ni",),
    "ぬ": ("nu",),
    "ね": ("ne",),
    "の": ("no",),
    # h
    "は": ("ha",),
    "ひ": ("hi",),
    "ふ": ("hu", "fu"),
    "へ": ("he",),
    "ほ": ("ho",),
    # m
    "ま": ("ma",),
    "み": ("mi",),
    "む": ("mu",),
    "め": ("me",),
    "も": ("mo",),
    # y
    "や": ("ya",),
    "ゆ": ("yu",),
    "よ": ("yo",),
    # r
    "ら": ("ra",),
    "り": ("ri",),
    "る": ("ru",),
    "れ": ("re",),
    "ろ": ("ro",),
    # w
    "わ": ("wa",),
    "を": ("wo",),
    MORAIC_NASAL: ("n", "nn"),
    # voiced / semi-voiced
    "が": ("ga",),
    "ぎ": ("gi",),
    "ぐ": ("gu",),
    "げ": ("ge",),
    "ご": ("go",),
    "ざ": ("za",),
    "じ": ("zi", "ji"),
    "ず": ("zu",),
    "ぜ": ("ze",),
    "ぞ": ("zo",),
    "だ": ("da",),
    "ぢ": ("di",),
    "づ": ("du",),
    "で": ("de",),
    "ど": ("do",),
    "ば": ("ba",),
    "び": ("bi",),
    "ぶ": ("bu",),
    "べ": ("be",),
    "ぼ": ("bo",),
    "ぱ": ("pa",),
    "ぴ": ("pi",),
    "ぷ": ("pu",),
    "ぺ": ("pe",),
    "ぽ": ("po",),
    "ゔ": ("vu",),
    # contracted syllables
    "うぁ": ("wha", "uxa", "ula"),
    "うぃ": ("whi", "wi", "uxi", "uli"),
    "うぇ": ("whe", "we", "uxe", "ule"),
    "うぉ": ("who", "uxo", "ulo"),
    "ゔぁ": ("va", "vuxa", "vula"),
    "ゔぃ": ("vi", "vuxi", "vuli"),
    "ゔぇ": ("ve", "vuxe", "vule"),
    "ゔぉ": ("vo", "vuxo", "vulo"),
    "いぇ": ("ye", "ixe", "ile"),
    "きゃ": ("kya", "kixya", "kilya"),
    "きぃ": ("kyi", "kixi", "kili"),
    "きゅ": ("kyu", "kixyu", "kilyu"),
    "きぇ": ("kye", "kixe", "kile"),
    "きょ": ("kyo", "kixyo", "kilyo"),
    "ぎゃ": ("gya", "gixya", "gilya"),
    "ぎぃ": ("gyi", "gixi", "gili"),
    "ぎゅ": ("gyu", "gixyu", "gilyu"),
    "ぎぇ": ("gye", "gixe", "gile"),
    "ぎょ": ("gyo", "gixyo", "gilyo"),
    "しゃ": ("sha", "sya", "shixya", "shilya", "sixya", "silya", "cixya", "cilya"),
    "しぃ": ("syi", "shixi", "shili", "sixi", "sili", "cixi", "cili"),
    "しゅ": ("shu", "syu", "shixyu", "shilyu", "sixyu", "silyu", "cixyu", "cilyu"),
    "しぇ": ("she", "sye", "shixe", "shile", "sixe", "sile", "cixe", "cile"),
    "しょ": ("sho", "syo", "shixyo", "shilyo", "sixyo", "silyo", "cixyo", "cilyo"),
    "じゃ": ("ja", "jya", "zya", "jixya", "jilya", "zixya", "zilya"),
    "じぃ": ("jyi", "zyi", "jixi", "jili", "zixi", "zili"),
    "じゅ": ("ju", "jyu", "zyu", "jixyu", "jilyu", "zixyu", "zilyu"),
    "じぇ": ("je", "jye", "zye", "jixe", "jile", "zixe", "zile"),
    "じょ": ("jo", "jyo", "zyo", "jixyo", "jilyo", "zixyo", "zilyo"),
    "ちゃ": ("cya", "tya", "tixya", "tilya", "chixya", "chilya"),
    "ちぃ": ("cyi", "tyi", "tixi", "tili", "chixi", "chili"),
    "ちゅ": ("cyu", "tyu", "tixyu", "tilyu", "chixyu", "chilyu"),
    "ちぇ": ("cye", "tye", "tixe", "tile", "chixe", "chile"),
    "ちょ": ("cyo", "tyo", "tixyo", "tilyo", "chixyo", "chilyo"),
    "ぢゃ": ("dya", "dixya", "dilya"),
    "ぢぃ": ("dyi", "dixi", "dili"),
    "ぢゅ": ("dyu", "dixyu", "dilyu"),
    "ぢぇ": ("dye", "dixe", "dile"),
    "ぢょ": ("dyo", "dixyo", "dilyo"),
    "てゃ": ("tha", "texya", "telya"),
    "てぃ": ("thi", "texi", "teli"),
    "てゅ": ("thu", "texyu", "telyu"),
    "てぇ": ("the", "texe", "tele"),
    "てょ": ("tho", "texyo", "telyo"),
    "でゃ": ("dha", "dexya", "delya"),
    "でぃ": ("dhi", "dexi", "deli"),
    "でゅ": ("dhu", "dexyu", "delyu"),
    "でぇ": ("dhe", "dexe", "dele"),
    "でょ": ("dho", "dexyo", "delyo"),
    "にゃ": ("nya", "nixya", "nilya"),
    "にぃ": ("nyi", "nixi", "nili"),
    "にゅ": ("nyu", "nixyu", "nilyu"),
    "にぇ": ("nye", "nixe", "nile"),
    "にょ": ("nyo", "nixyo", "nilyo"),
    "ひゃ": ("hya", "hixya", "hilya"),
    "ひぃ": ("hyi", "hixi", "hili"),
    "ひゅ": ("hyu", "hixyu", "hilyu"),
    "ひぇ": ("hye", "hixe", "hile"),
    "ひょ": ("hyo", "hixyo", "hilyo"),
    "びゃ": ("bya", "bixya", "bilya"),
    "びぃ": ("byi", "bixi", "bili"),
    "びゅ": ("byu", "bixyu", "bilyu"),
    "びぇ": ("bye", "bixe", "bile"),
    "びょ": ("byo", "bixyo", "bilyo"),
    "ぴゃ": ("pya", "pixya", "pilya"),
    "ぴぃ": ("pyi", "pixi", "pili"),
    "ぴゅ": ("pyu", "pixyu", "pilyu"),
    "ぴぇ": ("pye", "pixe", "pile"),
    "ぴょ": ("pyo", "pixyo", "pilyo"),
    "ふぁ": ("fa", "fuxa", "fula", "huxa", "hula"),
    "ふぃ": ("fi", "fuxi", "fuli", "huxi", "huli"),
    "ふぇ": ("fe", "fuxe", "fule", "huxe", "hule"),
    "ふぉ": ("fo", "fuxo", "fulo", "huxo", "hulo"),
    "ふゃ": ("fya", "fuxya", "fulya", "huxya", "hulya"),
    "ふょ": ("fyo", "fuxyo", "fulyo", "huxyo", "hulyo"),
    "みゃ": ("mya", "mixya", "milya"),
    "みぃ": ("myi", "mixi", "mili"),
    "みゅ": ("myu", "mixyu", "milyu"),
    "みぇ": ("mye", "mixe", "mile"),
    "みょ": ("myo", "mixyo", "milyo"),
    "りゃ": ("rya", "rixya", "rilya"),
    "りぃ": ("ryi", "rixi", "rili"),
    "りゅ": ("ryu", "rixyu", "rilyu"),
    "りぇ": ("rye", "rixe", "rile"),
    "りょ": ("ryo", "rixyo", "rilyo"),
    "とぅ": ("twu", "toxu", "tolu"),
    "どぅ": ("dwu", "doxu", "dolu"),
    # small kana
    "ぁ": ("xa", "la"),
    "ぃ": ("xi", "li"),
    "ぅ": ("xu", "lu"),
    "ぇ": ("xe", "le"),
    "ぉ": ("xo", "lo"),
    "ゃ": ("xya", "lya"),
    "ゅ": ("xyu", "lyu"),
    "ょ": ("xyo", "lyo"),
    "ゎ": ("xwa", "lwa"),
    GEMINATE_MARKER: ("xtu", "ltu"),
    # long vowel mark and full-width symbols
    "ー": ("-",),
    "、": (",",),
    "。": (".",),
    "？": ("?",),
    "！": ("!",),
    "〜": ("~",),
    "（": ("(",),
    "）": (")",),
    "「": ("[",),
    "」": ("]",),
    "・": ("/",),
    "；": (";",),
    "：": (":",),
    "　": (" ",),
}

ROMAJI_TABLE: Mapping[str, Tuple[str, ...]] = MappingProxyType(_ROMAJI)

# Spellings that type the geminate marker on its own
GEMINATE_SPELLINGS: Tuple[str, ...] = ROMAJI_TABLE[GEMINATE_MARKER]

NASAL_SINGLE = "n"
NASAL_DOUBLE = "nn"

# Initial letters after which a lone "n" would be read as part of the next mora
AMBIGUOUS_NASAL_CONTEXT = "aiueony"
