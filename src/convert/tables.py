"""Static lookup tables: emoji shortcodes and named HTML entities.

Both are read-only mappings built once at import time and shared by every
converter instance.
"""
from __future__ import annotations

from types import MappingProxyType

EMOJI = MappingProxyType({
    # Smileys & emotion
    "smile": "😊",
    "laughing": "😄",
    "joy": "😂",
    "rofl": "🤣",
    "grin": "😁",
    "smiley": "😃",
    "sweat_smile": "😅",
    "wink": "😉",
    "blush": "😊",
    "yum": "😋",
    "heart_eyes": "😍",
    "kissing": "😗",
    "kissing_heart": "😘",
    "kissing_closed_eyes": "😚",
    "kissing_smiling_eyes": "😙",
    "stuck_out_tongue": "😛",
    "stuck_out_tongue_winking_eye": "😜",
    "stuck_out_tongue_closed_eyes": "😝",
    "neutral_face": "😐",
    "expressionless": "😑",
    "no_mouth": "😶",
    "smirk": "😏",
    "unamused": "😒",
    "thinking": "🤔",
    "zipper_mouth": "🤐",
    "hugging": "🤗",
    "rolling_eyes": "🙄",
    "grimacing": "😬",
    "lying_face": "🤥",
    # Gestures & people
    "wave": "👋",
    "raised_hand": "✋",
    "thumbsup": "👍",
    "+1": "👍",
    "thumbsdown": "👎",
    "-1": "👎",
    "punch": "👊",
    "fist": "✊",
    "ok_hand": "👌",
    "clap": "👏",
    "pray": "🙏",
    "muscle": "💪",
    "point_up": "☝️",
    "point_down": "👇",
    "point_left": "👈",
    "point_right": "👉",
    # Hearts
    "heart": "❤️",
    "orange_heart": "🧡",
    "yellow_heart": "💛",
    "green_heart": "💚",
    "blue_heart": "💙",
    "purple_heart": "💜",
    "black_heart": "🖤",
    "broken_heart": "💔",
    "two_hearts": "💕",
    "sparkling_heart": "💖",
    "heartbeat": "💓",
    "heartpulse": "💗",
    "cupid": "💘",
    # Symbols
    "star": "⭐",
    "sparkles": "✨",
    "check": "✓",
    "x": "❌",
    "warning": "⚠️",
    "question": "❓",
    "exclamation": "❗",
    "zap": "⚡",
    "fire": "🔥",
    "sunny": "☀️",
    "cloud": "☁️",
    "umbrella": "☔",
    "snowflake": "❄️",
    "rainbow": "🌈",
    # Objects
    "gift": "🎁",
    "trophy": "🏆",
    "medal": "🏅",
    "crown": "👑",
    "gem": "💎",
    "bell": "🔔",
    "lock": "🔒",
    "key": "🔑",
    "bulb": "💡",
    "book": "📖",
    "pencil": "📝",
    "phone": "📱",
    "computer": "💻",
    "cd": "💿",
    "camera": "📷",
    "tv": "📺",
    "radio": "📻",
    "speaker": "🔈",
    "clock": "🕐",
    "hourglass": "⌛",
    "money": "💰",
    "email": "📧",
    "mailbox": "📫",
})

ENTITIES = MappingProxyType({
    # Markup-significant
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "apos": "'",
    # Legal
    "copy": "©",
    "reg": "®",
    "trade": "™",
    # Currency
    "cent": "¢",
    "pound": "£",
    "euro": "€",
    "yen": "¥",
    "curren": "¤",
    # Math
    "plusmn": "±",
    "times": "×",
    "divide": "÷",
    "minus": "−",
    "lowast": "∗",
    "radic": "√",
    "infin": "∞",
    "asymp": "≈",
    "ne": "≠",
    "equiv": "≡",
    "le": "≤",
    "ge": "≥",
    "sum": "∑",
    "prod": "∏",
    "prop": "∝",
    "ang": "∠",
    "and": "∧",
    "or": "∨",
    "cap": "∩",
    "cup": "∪",
    "int": "∫",
    "there4": "∴",
    "sim": "∼",
    "cong": "≅",
    "perp": "⊥",
    # Spaces and dashes
    "nbsp": "\u00a0",
    "ensp": "\u2002",
    "emsp": "\u2003",
    "thinsp": "\u2009",
    "ndash": "–",
    "mdash": "—",
    # Quotation marks
    "lsquo": "‘",
    "rsquo": "’",
    "sbquo": "‚",
    "ldquo": "“",
    "rdquo": "”",
    "bdquo": "„",
    "laquo": "«",
    "raquo": "»",
    # Punctuation and symbols
    "bull": "•",
    "hellip": "…",
    "prime": "′",
    "Prime": "″",
    "oline": "‾",
    "frasl": "⁄",
    "deg": "°",
    "micro": "µ",
    "para": "¶",
    "sect": "§",
    "middot": "·",
    "cedil": "¸",
    "ordf": "ª",
    "ordm": "º",
    "iexcl": "¡",
    "iquest": "¿",
    "shy": "\u00ad",
    "macr": "¯",
    "acute": "´",
    "uml": "¨",
    # Greek
    "Alpha": "Α",
    "Beta": "Β",
    "Gamma": "Γ",
    "Delta": "Δ",
    "Epsilon": "Ε",
    "Zeta": "Ζ",
    "Eta": "Η",
    "Theta": "Θ",
    "Iota": "Ι",
    "Kappa": "Κ",
    "Lambda": "Λ",
    "Mu": "Μ",
    "Nu": "Ν",
    "Xi": "Ξ",
    "Omicron": "Ο",
    "Pi": "Π",
    "Rho": "Ρ",
    "Sigma": "Σ",
    "Tau": "Τ",
    "Upsilon": "Υ",
    "Phi": "Φ",
    "Chi": "Χ",
    "Psi": "Ψ",
    "Omega": "Ω",
    "alpha": "α",
    "beta": "β",
    "gamma": "γ",
    "delta": "δ",
    "epsilon": "ε",
    "zeta": "ζ",
    "eta": "η",
    "theta": "θ",
    "iota": "ι",
    "kappa": "κ",
    "lambda": "λ",
    "mu": "μ",
    "nu": "ν",
    "xi": "ξ",
    "omicron": "ο",
    "pi": "π",
    "rho": "ρ",
    "sigmaf": "ς",
    "sigma": "σ",
    "tau": "τ",
    "upsilon": "υ",
    "phi": "φ",
    "chi": "χ",
    "psi": "ψ",
    "omega": "ω",
    # Latin extended
    "OElig": "Œ",
    "oelig": "œ",
    "Scaron": "Š",
    "scaron": "š",
    "Yuml": "Ÿ",
    "fnof": "ƒ",
    "circ": "ˆ",
    "tilde": "˜",
    "dagger": "†",
    "Dagger": "‡",
})
