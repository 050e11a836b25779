"""
Default join rules for the item catalog exports.

Everything here is a plain constant; `models.JoinConfig` gathers them into
one value so the pipeline never reads module state directly.
"""

ITEM_CN_FILE = "Item.csv"
ITEM_EN_FILE = "item-en.csv"
OUTPUT_FILE = "furniture_cn_en.csv"

SKIP_LINES = 2  # header rows in both exports
ITEM_ID_INDEX = 0
NAME_CN_INDEX = 1
NAME_EN_INDEX = 1
TYPE_ID_INDEX = 16  # ItemUICategory in Item.csv

MISSING_NAME = "N/A"
UNKNOWN_TYPE = "未知类型 (Unknown Type)"

OUTPUT_HEADER = ("ItemID", "ChineseName", "EnglishName", "ItemType")
OUTPUT_ENCODING = "utf-8"

# ItemUICategory ids: housing furniture plus fish (47)
TARGET_TYPE_IDS = frozenset({
    "57", "65", "66", "67", "68", "69", "70", "71", "72",
    "73", "74", "75", "76", "77", "78", "79", "80", "95",
    "47",
})

ITEM_TYPE_MAPPING = {
    "57": "椅子 (Seating)",
    "65": "房屋外部 - 屋顶 (Housing Exterior - Roof)",
    "66": "房屋外部 - 外墙 (Housing Exterior - Walls)",
    "67": "房屋外部 - 窗户 (Housing Exterior - Windows)",
    "68": "房屋外部 - 门 (Housing Exterior - Door)",
    "69": "房屋外部 - 烟囱 (Housing Exterior - Chimney)",
    "70": "房屋外部 - 遮蓬/附加物 (Housing Exterior - Placard/Roof Decor)",
    "71": "房屋外部 - 门牌 (Housing Exterior - Placard)",
    "72": "房屋外部 - 围墙 (Housing Exterior - Fence)",
    "73": "房屋内部 - 内墙 (Housing Interior - Interior Wall)",
    "74": "房屋内部 - 地板 (Housing Interior - Flooring)",
    "75": "房屋内部 - 照明 (Housing Interior - Ceiling Light)",
    "76": "庭具 - 植物 (Outdoor Furnishing - Plant/Tree)",
    "77": "桌子 (Table)",
    "78": "摆设/照明 (Tabletop/Lighting)",
    "79": "壁挂装饰 (Wall-mounted)",
    "80": "地毯 (Rug)",
    "95": "壁挂装饰 (Wall-mounted)",
    "47": "鱼类 (Fish)",
}
