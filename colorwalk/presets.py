# colorwalk/presets.py
"""
Fixed emotion presets (keywords, colors, valence, suggested micro-actions).
Built once at import; the registry is read-only.
"""
from types import MappingProxyType
from typing import NamedTuple, Tuple


class EmotionPreset(NamedTuple):
    key: str
    name: str
    color: str
    accent: str
    valence: float
    visuals: str
    examples: Tuple[str, ...]
    tasks: Tuple[str, ...]


NEUTRAL_KEY = "neutral"

# Order matters for classification (joy > calm > anxious > sad)
PRIORITY_ORDER = ("joy", "calm", "anxious", "sad")

_PRESETS = (
    EmotionPreset(
        key="joy",
        name="快樂",
        color="#FFD54F",  # yellow
        accent="yellow-400",
        valence=0.8,
        visuals="bubbles",
        examples=("開心", "快樂", "喜歡", "感謝", "興奮", "滿足", "幸福"),
        tasks=(
            "拍下一件讓你笑的事",
            "對自己說三句感謝",
            "把今天的高光時刻寫下來",
        ),
    ),
    EmotionPreset(
        key="calm",
        name="平靜",
        color="#81C784",  # green
        accent="green-400",
        valence=0.4,
        visuals="breath",
        examples=("平靜", "放鬆", "舒服", "安穩", "自在"),
        tasks=(
            "深呼吸 3 分鐘",
            "做一次身心掃描",
            "短走 5 分鐘，留意腳步聲",
        ),
    ),
    EmotionPreset(
        key="anxious",
        name="焦慮",
        color="#90A4AE",  # blue grey
        accent="slate-400",
        valence=-0.2,
        visuals="ripple",
        examples=("焦慮", "擔心", "緊張", "煩躁", "不安"),
        tasks=(
            "寫下 3 件可以掌控的小事並執行 1 件",
            "2 分鐘方形呼吸（4-4-4-4）",
            "把擔心的事拆解成三步驟",
        ),
    ),
    EmotionPreset(
        key="sad",
        name="悲傷",
        color="#9575CD",  # purple
        accent="violet-400",
        valence=-0.6,
        visuals="raindrop",
        examples=("難過", "失落", "悲傷", "低落", "委屈"),
        tasks=(
            "寫一封不寄出的信給自己",
            "播放一首安靜的歌並躺下 5 分鐘",
            "擁抱自己 20 秒",
        ),
    ),
    EmotionPreset(
        key=NEUTRAL_KEY,
        name="中性",
        color="#BDBDBD",  # grey
        accent="zinc-400",
        valence=0.0,
        visuals="glow",
        examples=("還好", "普通", "一般", "沒特別", "中立"),
        tasks=(
            "喝一杯水並伸展 1 分鐘",
            "寫下今天最想完成的一件小事",
            "整理桌面 2 分鐘",
        ),
    ),
)

EMOTION_PRESETS = MappingProxyType({p.key: p for p in _PRESETS})

# key -> visual style tag consumed by the rendering layer
VISUAL_STYLES = MappingProxyType({p.key: p.visuals for p in _PRESETS})

FALLBACK_COLOR = "#bbb"


def get_preset(key: str) -> EmotionPreset:
    """Look up a preset by key; unknown keys resolve to neutral."""
    return EMOTION_PRESETS.get(key, EMOTION_PRESETS[NEUTRAL_KEY])


def neutral() -> EmotionPreset:
    return EMOTION_PRESETS[NEUTRAL_KEY]


def color_for(key: str) -> str:
    preset = EMOTION_PRESETS.get(key)
    return preset.color if preset else FALLBACK_COLOR


def keyword_chips(per_preset: int = 2):
    """First few examples of every preset, for the quick-insert buttons."""
    chips = []
    for p in EMOTION_PRESETS.values():
        for i, word in enumerate(p.examples[:per_preset]):
            chips.append({"id": f"{p.key}-{i}", "key": p.key, "word": word})
    return chips
