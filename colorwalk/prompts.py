# colorwalk/prompts.py
"""
Prompt text for the optional hosted classifier, plus the Traditional Chinese
copy shown by the page and the CLI.
"""

# Remote classifier: the reply must be a single preset key
CLASSIFIER_SYSTEM = """You label short mood descriptions written in Traditional Chinese or English.

Answer with exactly one lowercase word from this list and nothing else:
joy, calm, anxious, sad, neutral

- joy: happy, grateful, excited, satisfied
- calm: relaxed, peaceful, at ease
- anxious: worried, nervous, restless, uneasy
- sad: down, lost, hurt, low
- neutral: none of the above, or unclear
"""

CLASSIFIER_USER_TEMPLATE = "Mood description:\n{text}\n\nLabel:"

# Page copy
APP_TITLE = "Color Walk — 讓情緒上色，幸福隨步而來"
APP_SUBTITLE = "以 AI 解析感受 · 轉化為色彩 · 走出你的情緒色彩旅程"
INPUT_HEADER = "情緒色彩對話"
INPUT_PLACEHOLDER = "用一句話描述現在的心情…（例如：今天跟朋友吃飯很開心 / 有點焦慮，擔心報告）"
ANALYZE_LABEL = "分析並上色"
CLEAR_LABEL = "清空"
DETECTED_TEMPLATE = "偵測：{name}"
CHIPS_LABEL = "示例關鍵詞（點擊可貼上）："
TASKS_HEADER = "幸福感行動建議"
TASKS_CAPTION = "當下情緒：**{name}** · 建議小任務"
POINTS_LABEL = "今日積分"
POINTS_TEMPLATE = "{points} 分"
RAINBOW_CAPTION = "情緒彩虹 · 完成任務會點亮："
VISUAL_HEADER = "情緒與色彩回饋"
VISUAL_NOTE = "系統以顏色與動態呈現你的情緒氛圍（示意）。未來可接入雲端 AI/NLP 服務以獲得更精準判讀。"
JOURNEY_HEADER = "情緒色彩旅程紀錄"
AUTO_BREATH_LABEL = "自動呼吸"
FOOTER_TEMPLATE = "© {year} Color Walk · 情緒與色彩的沉浸式幸福旅程"
